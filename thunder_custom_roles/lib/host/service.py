from typing import Optional

from pulumi import log

from .naming import AwsNaming
from .types import Cli, Provider, Serverless, Service

DEFAULT_STAGE = "dev"

FRAMEWORK_VERSION = "3.0.0"
"""Framework version reported by ``DictServerless``"""


class DictService(Service):
    """
    A service backed by a plain service definition, as loaded from ``serverless.yml``

    Every change is made directly on ``definition``, so it can be serialized again once the plugin has run.
    Functions without a ``name`` get the framework's default of ``{service}-{stage}-{function}``.
    """

    def __init__(self, definition: dict, stage: Optional[str] = None):
        self.definition = definition
        self.service_name = definition["service"]
        self.stage = stage or self.provider.get("stage") or DEFAULT_STAGE

        for function_name, function in self._functions.items():
            function.setdefault("name", f"{self.service_name}-{self.stage}-{function_name}")

    @property
    def _functions(self) -> dict:
        return self.definition.get("functions") or {}

    @property
    def provider(self) -> dict:
        return self.definition.setdefault("provider", {})

    @property
    def resources(self) -> Optional[dict]:
        return self.definition.get("resources")

    @resources.setter
    def resources(self, value: dict):
        self.definition["resources"] = value

    def get_all_functions(self) -> list[str]:
        return list(self._functions)

    def get_function(self, function_name: str) -> dict:
        return self._functions[function_name]


class AwsProvider(Provider):
    def __init__(self, naming: AwsNaming):
        self.naming = naming


class LogCli(Cli):
    """Sends output to the Pulumi engine, or stderr when running outside of it"""

    def log(self, message: str) -> None:
        log.info(message)


class DictServerless(Serverless):
    """
    Stand-in for the framework, for running plugins against a service definition directly

    Example::

        serverless = DictServerless(yaml.safe_load(open("serverless.yml")), stage="prod")
        CustomRoles(serverless).create_roles()
    """

    def __init__(self, definition: dict, stage: Optional[str] = None, cli: Optional[Cli] = None):
        self.version = FRAMEWORK_VERSION
        self.service = DictService(definition, stage)
        self.cli = cli or LogCli()
        self._aws = AwsProvider(AwsNaming(self.service.service_name, self.service.stage))

    def get_provider(self, name: str) -> Provider:
        if name != "aws":
            raise ValueError(f"provider `{name}` is not supported")

        return self._aws
