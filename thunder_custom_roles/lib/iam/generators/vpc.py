from typing import Any, Optional

from thunder_custom_roles.lib.config import FunctionConfig, ProviderConfig
from ..intrinsics import AWS_PARTITION, join

VPC_ACCESS_POLICY = join(
    "",
    [
        "arn:",
        AWS_PARTITION,
        ":iam::aws:policy/service-role/AWSLambdaVPCAccessExecutionRole",
    ],
)
"""AWS managed policy that lets a function manage the network interfaces it needs inside a VPC"""


def generate_managed_policy_arns(
    function: FunctionConfig,
    provider: ProviderConfig,
    shared_managed_policies: Optional[list[Any]] = None,
) -> list[Any]:
    """
    Collect the managed policies for a function's role

    Shared managed policies come first, followed by the VPC access policy when either the function or the provider
    attaches functions to a VPC. No de-duplication is done against the shared list.

    :param function: The function definition
    :param provider: The provider configuration
    :param shared_managed_policies: Managed policies configured for every function
    :return: List of managed policy ARNs, possibly empty
    """
    managed_policy_arns = list(shared_managed_policies or [])

    if function.vpc or provider.vpc:
        managed_policy_arns.append(VPC_ACCESS_POLICY)

    return managed_policy_arns
