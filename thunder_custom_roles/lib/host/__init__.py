from .naming import AwsNaming
from .service import DictServerless, DictService, LogCli
from .types import Cli, Naming, Provider, Serverless, Service
