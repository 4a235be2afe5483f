from ..create_policy import create_policy
from ..intrinsics import AWS_ACCOUNT_ID, AWS_REGION, join
from ..types import RolePolicy, Statement


def _log_group_arn(function_name: str, suffix: str) -> dict:
    return join(
        ":",
        [
            "arn:aws:logs",
            AWS_REGION,
            AWS_ACCOUNT_ID,
            f"log-group:/aws/lambda/{function_name}{suffix}",
        ],
    )


def generate_logging_policy(function_name: str) -> RolePolicy:
    """
    Generate an inline policy that allows the function to write to its own log group.

    Grants access to:
        logs:CreateLogStream
        logs:PutLogEvents

    Scoped to:
        - `log-group:/aws/lambda/{function_name}:*` for creating streams
        - `log-group:/aws/lambda/{function_name}:*:*` for writing events

    The log group itself is created by the framework, so ``logs:CreateLogGroup`` is not granted.

    :param function_name: Deployed name of the function
    :return: RolePolicy logging
    """
    return create_policy(
        "logging",
        [
            Statement(
                Effect="Allow",
                Action=["logs:CreateLogStream"],
                Resource=[_log_group_arn(function_name, ":*")],
            ),
            Statement(
                Effect="Allow",
                Action=["logs:PutLogEvents"],
                Resource=[_log_group_arn(function_name, ":*:*")],
            ),
        ],
    )
