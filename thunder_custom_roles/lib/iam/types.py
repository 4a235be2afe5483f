from dataclasses import dataclass, field
from typing import Any, Optional, Union

POLICY_VERSION = "2012-10-17"


@dataclass
class Statement:
    Effect: str
    """AWS statement effect, ("Allow", "Deny")"""

    Action: Union[str, list[str]]
    """AWS action, ("logs:PutLogEvents", "kinesis:GetRecords",...)"""

    Resource: Optional[list[Any]] = None
    """
    AWS resources to apply this statement to.
    Either literal ARNs or intrinsic functions resolved by CloudFormation at deploy time.
    """

    Principal: Optional[dict] = None
    """Principal the statement applies to, only used by trust policies"""


@dataclass
class PolicyDocument:
    Statement: list[Union[Statement, dict]]
    """Statements of this document. User-supplied statements are kept as plain dicts."""

    Version: str = POLICY_VERSION


@dataclass
class RolePolicy:
    PolicyName: str
    """Name of the inline policy, unique within a role"""

    PolicyDocument: PolicyDocument


@dataclass
class RoleProperties:
    AssumeRolePolicyDocument: PolicyDocument
    """Trust policy of the role"""

    Policies: list[RolePolicy] = field(default_factory=list)
    """Inline policies, in the order they were generated"""

    ManagedPolicyArns: Optional[list[Any]] = None
    """Managed policies attached to the role. Left out of the template when unset."""

    PermissionsBoundary: Optional[Any] = None
    """Permissions boundary ARN. Left out of the template when unset."""


@dataclass
class Role:
    Properties: RoleProperties

    Type: str = "AWS::IAM::Role"
