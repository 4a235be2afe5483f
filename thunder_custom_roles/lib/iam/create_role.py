from typing import Any, Optional

from .types import PolicyDocument, Role, RolePolicy, RoleProperties, Statement

LAMBDA_SERVICE_PRINCIPAL = "lambda.amazonaws.com"


def _generate_assume_role_policy() -> PolicyDocument:
    return PolicyDocument(
        Statement=[
            Statement(
                Effect="Allow",
                Principal={"Service": [LAMBDA_SERVICE_PRINCIPAL]},
                Action="sts:AssumeRole",
            )
        ]
    )


def create_role(
    policies: list[RolePolicy],
    *,
    managed_policy_arns: Optional[list[Any]] = None,
    permissions_boundary: Optional[Any] = None,
) -> Role:
    """
    Create an execution role that Lambda is allowed to assume

    Example::

        role = create_role(
            [generate_logging_policy("my-service-dev-hello")],
            managed_policy_arns=[VPC_ACCESS_POLICY],
        )

    :param policies: Inline policies, already in their final order
    :param managed_policy_arns: Managed policies to attach. Left out of the role when empty.
    :param permissions_boundary: Permissions boundary to apply. Left out of the role when empty.
    :return: Role
    """
    return Role(
        Properties=RoleProperties(
            AssumeRolePolicyDocument=_generate_assume_role_policy(),
            Policies=list(policies),
            ManagedPolicyArns=managed_policy_arns or None,
            PermissionsBoundary=permissions_boundary or None,
        )
    )
