from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class StreamType(str, Enum):
    """Event source types that a function can read records from"""

    dynamodb = "dynamodb"
    kinesis = "kinesis"


@dataclass
class StreamConfig:
    type: Optional[Any] = None
    """Stream type (``dynamodb`` or ``kinesis``). Inferred from the ARN when not set."""

    arn: Optional[Any] = None
    """Stream ARN, either a literal string or an intrinsic function such as ``Fn::ImportValue``"""


@dataclass
class EventConfig:
    stream: Optional[Any] = None
    """
    Stream event source, a bare ARN or a full stream configuration.
    Kept as declared, see ``get_stream_config`` for the object form.
    """


@dataclass
class FunctionConfig:
    name: Optional[str] = None
    """Deployed function name, as filled in by the framework (``{service}-{stage}-{function}``)"""

    iamRoleStatements: Optional[list[Any]] = None
    """IAM statements to add to this function's role only"""

    events: Optional[list[EventConfig]] = None
    """Events that trigger this function"""

    vpc: Optional[Any] = None
    """VPC configuration of this function"""

    role: Optional[Any] = None
    """Role explicitly assigned to this function. Functions with a role are left alone."""


@dataclass
class IamRoleConfig:
    statements: Optional[list[Any]] = None
    """IAM statements shared by every function"""

    managedPolicies: Optional[list[Any]] = None
    """Managed policy ARNs shared by every function"""

    permissionsBoundary: Optional[Any] = None
    """Permissions boundary ARN applied to every role"""


@dataclass
class IamConfig:
    role: Optional[Union[str, IamRoleConfig]] = None
    """Either the name/ARN of an existing role, or settings for the generated roles"""


@dataclass
class ProviderConfig:
    iam: Optional[IamConfig] = None
    """Current ``provider.iam`` block"""

    iamRoleStatements: Optional[list[Any]] = None
    """Legacy form of ``provider.iam.role.statements``"""

    iamManagedPolicies: Optional[list[Any]] = None
    """Legacy form of ``provider.iam.role.managedPolicies``"""

    rolePermissionsBoundary: Optional[Any] = None
    """Legacy form of ``provider.iam.role.permissionsBoundary``"""

    vpc: Optional[Any] = None
    """VPC configuration shared by every function"""
