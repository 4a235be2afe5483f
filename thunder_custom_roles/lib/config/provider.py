"""
Lookups for the settings that exist both in the ``provider.iam.role`` block and in the older flat
``provider.iam*`` fields. The nested form always wins when it is set.
"""
from typing import Any, Optional

from .types import IamRoleConfig, ProviderConfig


def first_configured(*candidates: Any) -> Any:
    """
    Return the first candidate that is set

    :param candidates: Values in order of precedence
    :return: The first value that isn't ``None``, or ``None``
    """
    return next((candidate for candidate in candidates if candidate is not None), None)


def _role_settings(provider: ProviderConfig) -> IamRoleConfig:
    # `provider.iam.role` may also be the name of an existing role, which carries no settings
    if provider.iam and isinstance(provider.iam.role, IamRoleConfig):
        return provider.iam.role

    return IamRoleConfig()


def get_shared_statements(provider: ProviderConfig) -> Optional[list]:
    return first_configured(_role_settings(provider).statements, provider.iamRoleStatements)


def get_shared_managed_policies(provider: ProviderConfig) -> Optional[list]:
    return first_configured(_role_settings(provider).managedPolicies, provider.iamManagedPolicies)


def get_permissions_boundary(provider: ProviderConfig) -> Optional[Any]:
    return first_configured(_role_settings(provider).permissionsBoundary, provider.rolePermissionsBoundary)
