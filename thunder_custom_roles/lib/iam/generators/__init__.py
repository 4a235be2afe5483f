from .logs import generate_logging_policy
from .streams import STREAM_ACTIONS, generate_streams_policy
from .vpc import VPC_ACCESS_POLICY, generate_managed_policy_arns
