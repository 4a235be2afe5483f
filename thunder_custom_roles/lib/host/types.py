"""
The slice of the deployment framework this plugin talks to. The framework owns all of these objects, the plugin only
reads them and adds to them.
"""
from abc import ABC, abstractmethod
from typing import Any, Optional


class Cli(ABC):
    @abstractmethod
    def log(self, message: str) -> None:
        """Show a single line of output to the user"""


class Naming(ABC):
    @abstractmethod
    def get_lambda_logical_id(self, function_name: str) -> str:
        """Logical ID of a function's ``AWS::Lambda::Function`` resource"""

    @abstractmethod
    def get_stack_name(self) -> str:
        """Name of the CloudFormation stack the service deploys to"""


class Provider(ABC):
    naming: Naming
    """Naming conventions of this provider"""


class Service(ABC):
    provider: dict
    """Raw ``provider`` block"""

    resources: Optional[dict]
    """Raw ``resources`` block, ``None`` until something adds resources to the service"""

    @abstractmethod
    def get_all_functions(self) -> list[str]:
        """Names of all functions declared in the service, in declaration order"""

    @abstractmethod
    def get_function(self, function_name: str) -> dict:
        """Raw definition of a function. Changes made to it are seen by the framework."""


class Serverless(ABC):
    version: str
    """Framework version"""

    service: Service

    cli: Cli

    config_schema_handler: Optional[Any] = None
    """Schema registry, only present on framework versions that validate configuration"""

    @abstractmethod
    def get_provider(self, name: str) -> Provider:
        """Get a cloud provider plugin by name"""
