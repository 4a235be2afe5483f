from typing import Optional

from .types import PolicyDocument, RolePolicy


def create_policy(name: str, statements: Optional[list]) -> Optional[RolePolicy]:
    """
    Create an inline policy for a list of statements

    Statements are passed through untouched, their shape is not checked.

    :param name: Name of the inline policy
    :param statements: Statements for the policy
    :return: RolePolicy, or ``None`` if there are no statements to wrap
    """
    if not statements:
        return None

    return RolePolicy(
        PolicyName=name,
        PolicyDocument=PolicyDocument(Statement=statements),
    )
