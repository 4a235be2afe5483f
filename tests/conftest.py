"""Fakes for the framework objects the plugin talks to."""

from typing import Optional

import pytest

from thunder_custom_roles import CustomRoles
from thunder_custom_roles.lib.host import Cli, Naming, Provider, Serverless, Service


class RecordingCli(Cli):
    def __init__(self):
        self.messages = []

    def log(self, message: str) -> None:
        self.messages.append(message)


class FakeNaming(Naming):
    def __init__(self, stack_name: str):
        self.stack_name = stack_name

    def get_lambda_logical_id(self, function_name: str) -> str:
        return f"{function_name[:1].upper()}{function_name[1:]}LambdaFunction"

    def get_stack_name(self) -> str:
        return self.stack_name


class FakeProvider(Provider):
    def __init__(self, naming: Naming):
        self.naming = naming


class FakeService(Service):
    def __init__(self, provider: dict, functions: dict, resources: Optional[dict]):
        self.provider = provider
        self.functions = functions
        self.resources = resources

    def get_all_functions(self) -> list[str]:
        return list(self.functions)

    def get_function(self, function_name: str) -> dict:
        return self.functions[function_name]


class FakeServerless(Serverless):
    def __init__(self, version, service, config_schema_handler=None, stack_name="foo-dev"):
        self.version = version
        self.service = service
        self.cli = RecordingCli()
        self.config_schema_handler = config_schema_handler
        self._provider = FakeProvider(FakeNaming(stack_name))

    def get_provider(self, name: str) -> Provider:
        assert name == "aws"
        return self._provider


@pytest.fixture
def make_plugin():
    """Build a plugin around a fake framework. Functions get the framework's default name unless they set one."""

    def _make_plugin(
        functions=None,
        provider=None,
        resources=None,
        version="1.12.0",
        config_schema_handler=None,
    ) -> CustomRoles:
        functions = functions if functions is not None else {}
        for function_name, function in functions.items():
            function.setdefault("name", f"foo-dev-{function_name}")

        service = FakeService(
            provider=provider or {},
            functions=functions,
            resources={"Resources": resources} if resources else None,
        )
        serverless = FakeServerless(version, service, config_schema_handler=config_schema_handler)

        return CustomRoles(serverless, {"stage": "dev"})

    return _make_plugin


@pytest.fixture
def plugin(make_plugin) -> CustomRoles:
    return make_plugin()
