from typing import Optional

from pulumi import log
from semver import VersionInfo

from thunder_custom_roles.lib.config import (
    get_function_config,
    get_permissions_boundary,
    get_provider_config,
    get_shared_managed_policies,
    get_shared_statements,
)
from thunder_custom_roles.lib.host import Serverless
from thunder_custom_roles.lib.iam import (
    create_policy,
    create_role,
    generate_logging_policy,
    generate_managed_policy_arns,
    generate_streams_policy,
)
from thunder_custom_roles.lib.utils import set_nested, template_from_dataclass

PLUGIN_NAME = "serverless-plugin-custom-roles"

MINIMUM_FRAMEWORK_VERSION = "1.12.0"

CREATE_ROLES_HOOK = "before:package:setupProviderConfiguration"
"""Runs after functions are fully populated, and before the framework generates its own shared role"""

FUNCTION_PROPERTIES_SCHEMA = {
    "properties": {
        "iamRoleStatements": {"type": "array"},
    },
}
"""Extra function properties this plugin understands, announced to frameworks that validate configuration"""


class CustomRolesVersionException(Exception):
    def __init__(self, version: str):
        super().__init__(f"{PLUGIN_NAME} requires serverless 1.12 or higher!")
        self.version = version


class CustomRoles:
    """
    Gives every function in a service its own IAM role.

    Each role gets, in this order:
        - a ``logging`` policy scoped to the function's own log group
        - a ``shared`` policy with the statements configured on the provider
        - a ``custom`` policy with the function's own ``iamRoleStatements``
        - a ``streams`` policy for the DynamoDB and Kinesis streams the function is subscribed to

    Policies without statements are left out. Functions that already have a ``role`` are not touched.
    """

    def __init__(self, serverless: Serverless, options: Optional[dict] = None):
        if VersionInfo.parse(serverless.version).compare(MINIMUM_FRAMEWORK_VERSION) < 0:
            raise CustomRolesVersionException(serverless.version)

        self.serverless = serverless
        self.options = options or {}
        self.provider = serverless.get_provider("aws")

        self._define_function_properties()

        self.hooks = {
            CREATE_ROLES_HOOK: lambda: self.create_roles(),
        }

    def log(self, message: str) -> None:
        self.serverless.cli.log(f"[{PLUGIN_NAME}]: {message}")

    def _define_function_properties(self) -> None:
        handler = getattr(self.serverless, "config_schema_handler", None)
        define_function_properties = getattr(handler, "define_function_properties", None)

        if define_function_properties is None:
            log.debug("framework does not validate configuration, not registering function properties")
            return

        define_function_properties("aws", FUNCTION_PROPERTIES_SCHEMA)

    def get_role_id(self, function_name: str) -> str:
        return f"{self.provider.naming.get_lambda_logical_id(function_name)}Role"

    def create_roles(self) -> None:
        """
        Generate a role for every function without one, and add it to the service's resources.

        :return: None
        """
        service = self.serverless.service
        functions = service.get_all_functions()
        if not functions:
            self.log("No functions to add roles to")
            return

        provider = get_provider_config(service.provider)
        shared_policy = create_policy("shared", get_shared_statements(provider))
        shared_managed_policies = get_shared_managed_policies(provider)
        permissions_boundary = get_permissions_boundary(provider)
        stack_name = self.provider.naming.get_stack_name()

        for function_name in functions:
            raw_function = service.get_function(function_name)
            function = get_function_config(raw_function)

            if function.role:
                log.debug(f"function `{function_name}` already uses role `{function.role}`, skipping")
                continue

            role_id = self.get_role_id(function_name)

            policies = [generate_logging_policy(function.name)]
            if shared_policy:
                policies.append(shared_policy)

            custom_policy = create_policy("custom", function.iamRoleStatements)
            if custom_policy:
                policies.append(custom_policy)

            streams_policy = generate_streams_policy(function_name, function, self.log)
            if streams_policy:
                policies.append(streams_policy)

            role = create_role(
                policies,
                managed_policy_arns=generate_managed_policy_arns(function, provider, shared_managed_policies),
                permissions_boundary=permissions_boundary,
            )

            log.debug(
                f"creating role `{role_id}` for function `{function_name}` in stack `{stack_name}` "
                f"with policies {[policy.PolicyName for policy in policies]}"
            )

            raw_function["role"] = role_id
            if service.resources is None:
                service.resources = {}
            set_nested(service.resources, ["Resources", role_id], template_from_dataclass(role))
