from .create_policy import create_policy
from .create_role import LAMBDA_SERVICE_PRINCIPAL, create_role
from .generators.logs import generate_logging_policy
from .generators.streams import STREAM_ACTIONS, generate_streams_policy
from .generators.vpc import VPC_ACCESS_POLICY, generate_managed_policy_arns
from .types import POLICY_VERSION, PolicyDocument, Role, RolePolicy, RoleProperties, Statement
