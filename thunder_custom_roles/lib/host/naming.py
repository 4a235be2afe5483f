from thunder_custom_roles.lib.utils import normalize_name_to_alphanumeric
from .types import Naming


class AwsNaming(Naming):
    """
    The framework's naming conventions for AWS resources

    Example::

        naming = AwsNaming("my-service", "dev")

        naming.get_lambda_logical_id("hello-world")  # "HelloDashworldLambdaFunction"
        naming.get_stack_name()                      # "my-service-dev"
    """

    def __init__(self, service_name: str, stage: str):
        self.service_name = service_name
        self.stage = stage

    def get_normalized_function_name(self, function_name: str) -> str:
        return normalize_name_to_alphanumeric(function_name)

    def get_lambda_logical_id(self, function_name: str) -> str:
        return f"{self.get_normalized_function_name(function_name)}LambdaFunction"

    def get_stack_name(self) -> str:
        return f"{self.service_name}-{self.stage}"
