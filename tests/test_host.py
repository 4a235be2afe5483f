"""Tests for thunder_custom_roles/lib/host."""

import pytest

from thunder_custom_roles import CustomRoles
from thunder_custom_roles.lib.host import AwsNaming, DictServerless, DictService
from thunder_custom_roles.lib.utils import normalize_name, normalize_name_to_alphanumeric

from conftest import RecordingCli


def _definition():
    return {
        "service": "foo",
        "provider": {"name": "aws", "iam": {"role": {"statements": [{"Effect": "Allow", "Action": "*", "Resource": "*"}]}}},
        "functions": {
            "hello-world": {"handler": "handler.hello"},
            "reader": {
                "handler": "handler.read",
                "events": [{"stream": "arn:aws:dynamodb:us-east-1:123456789012:table/t/stream/1"}],
            },
            "legacy": {"handler": "handler.legacy", "role": "LegacyRole"},
        },
    }


# ── naming ───────────────────────────────────────────────────────────

class TestNormalizeName:
    def test_upper_cases_first_letter(self):
        assert normalize_name("function1") == "Function1"

    def test_empty(self):
        assert normalize_name("") == ""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("function1", "Function1"),
            ("my-func_name", "MyDashfuncUnderscorename"),
            ("hello.world v2", "Helloworldv2"),
        ],
    )
    def test_alphanumeric(self, name, expected):
        assert normalize_name_to_alphanumeric(name) == expected


class TestAwsNaming:
    def test_lambda_logical_id(self):
        naming = AwsNaming("foo", "dev")

        assert naming.get_lambda_logical_id("function1") == "Function1LambdaFunction"
        assert naming.get_lambda_logical_id("my-func_name") == "MyDashfuncUnderscorenameLambdaFunction"

    def test_stack_name(self):
        assert AwsNaming("foo", "prod").get_stack_name() == "foo-prod"


# ── DictService ──────────────────────────────────────────────────────

class TestDictService:
    def test_default_function_names(self):
        service = DictService(_definition(), stage="prod")

        assert service.get_function("hello-world")["name"] == "foo-prod-hello-world"

    def test_explicit_function_name_kept(self):
        definition = _definition()
        definition["functions"]["reader"]["name"] = "stream-reader"

        assert DictService(definition).get_function("reader")["name"] == "stream-reader"

    def test_stage_from_provider(self):
        definition = _definition()
        definition["provider"]["stage"] = "qa"

        assert DictService(definition).stage == "qa"

    def test_default_stage(self):
        assert DictService(_definition()).stage == "dev"

    def test_functions_in_declaration_order(self):
        assert DictService(_definition()).get_all_functions() == ["hello-world", "reader", "legacy"]

    def test_no_functions(self):
        assert DictService({"service": "foo"}).get_all_functions() == []

    def test_resources_written_to_definition(self):
        definition = _definition()
        service = DictService(definition)

        assert service.resources is None
        service.resources = {"Resources": {}}
        assert definition["resources"] == {"Resources": {}}


class TestDictServerless:
    def test_unsupported_provider(self):
        with pytest.raises(ValueError, match="provider `azure` is not supported"):
            DictServerless(_definition()).get_provider("azure")


# ── end to end ───────────────────────────────────────────────────────

class TestEndToEnd:
    def test_create_roles(self):
        definition = _definition()
        cli = RecordingCli()
        plugin = CustomRoles(DictServerless(definition, stage="dev", cli=cli))

        plugin.create_roles()

        functions = definition["functions"]
        assert functions["hello-world"]["role"] == "HelloDashworldLambdaFunctionRole"
        assert functions["reader"]["role"] == "ReaderLambdaFunctionRole"
        assert functions["legacy"]["role"] == "LegacyRole"

        resources = definition["resources"]["Resources"]
        assert list(resources) == ["HelloDashworldLambdaFunctionRole", "ReaderLambdaFunctionRole"]

        reader_policies = resources["ReaderLambdaFunctionRole"]["Properties"]["Policies"]
        assert [policy["PolicyName"] for policy in reader_policies] == ["logging", "shared", "streams"]
        assert reader_policies[0]["PolicyDocument"]["Statement"][0]["Resource"][0]["Fn::Join"][1][3] == (
            "log-group:/aws/lambda/foo-dev-reader:*"
        )
        assert cli.messages == []

    def test_no_functions(self):
        definition = {"service": "foo"}
        cli = RecordingCli()

        CustomRoles(DictServerless(definition, cli=cli)).create_roles()

        assert "resources" not in definition
        assert cli.messages == ["[serverless-plugin-custom-roles]: No functions to add roles to"]
