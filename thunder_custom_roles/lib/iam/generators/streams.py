from typing import Any, Callable, Optional, Union

from pulumi import log

from thunder_custom_roles.lib.config import EventConfig, FunctionConfig, StreamConfig, StreamType, get_stream_config
from ..create_policy import create_policy
from ..types import RolePolicy, Statement

STREAM_ACTIONS = (
    "GetRecords",
    "GetShardIterator",
    "DescribeStream",
    "ListStreams",
)
"""Actions a Lambda event source mapping needs to poll a stream"""


def _get_stream(event: EventConfig) -> Union[str, StreamConfig, None]:
    if isinstance(event.stream, str):
        return event.stream
    elif isinstance(event.stream, dict):
        return get_stream_config(event.stream)

    # numbers, lists and the like carry no usable source
    return None


def _get_stream_arn(stream: Union[str, StreamConfig, None]) -> Optional[Any]:
    if isinstance(stream, str):
        return stream
    elif isinstance(stream, StreamConfig) and stream.arn:
        return stream.arn

    return None


def _get_stream_type(stream: Union[str, StreamConfig], arn: Any) -> Optional[str]:
    if isinstance(stream, StreamConfig) and stream.type:
        return stream.type if isinstance(stream.type, str) else None

    # arn:{partition}:{service}:... only works for literal ARNs, intrinsics have no type to infer
    if isinstance(arn, str):
        parts = arn.split(":")
        if len(parts) > 2:
            return parts[2]

    return None


def generate_streams_policy(
    function_name: str,
    function: FunctionConfig,
    warn: Callable[[str], None],
) -> Optional[RolePolicy]:
    """
    Generate an inline policy that allows the function to read the streams it is subscribed to.

    Grants access to, per stream type:
        {dynamodb,kinesis}:GetRecords
        {dynamodb,kinesis}:GetShardIterator
        {dynamodb,kinesis}:DescribeStream
        {dynamodb,kinesis}:ListStreams

    Scoped to the ARNs of the function's stream events. DynamoDB streams come first, then Kinesis streams.

    Stream events without an ARN or with an unknown type are skipped with a warning, they never stop the
    other events or functions from being processed.

    :param function_name: Name of the function in the service, used in warnings
    :param function: The function definition
    :param warn: Callable that reports a warning to the user
    :return: RolePolicy streams, or ``None`` if the function doesn't read from any stream
    """
    if not function.events:
        return None

    resources = {stream_type: [] for stream_type in StreamType}

    for event in function.events:
        # an empty object or list is still a declaration, just a broken one
        if not event.stream and not isinstance(event.stream, (dict, list)):
            continue

        stream = _get_stream(event)
        arn = _get_stream_arn(stream)
        if not arn:
            warn(
                f"WARNING: Stream event source for function '{function_name}' is not configured properly. "
                "IAM permissions will not be set properly."
            )
            continue

        try:
            stream_type = StreamType(_get_stream_type(stream, arn))
        except ValueError:
            warn(
                f"WARNING: Stream event type for function '{function_name}' is not configured properly. "
                "IAM permissions will not be set properly."
            )
            continue

        log.debug(f"function `{function_name}` reads from {stream_type.value} stream `{arn}`")
        resources[stream_type].append(arn)

    statements = [
        Statement(
            Effect="Allow",
            Action=[f"{stream_type.value}:{a}" for a in STREAM_ACTIONS],
            Resource=arns,
        )
        for stream_type, arns in resources.items()
        if arns
    ]

    return create_policy("streams", statements)
