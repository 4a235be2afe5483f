from .mapper import get_function_config, get_provider_config, get_stream_config
from .provider import (
    first_configured,
    get_permissions_boundary,
    get_shared_managed_policies,
    get_shared_statements,
)
from .types import (
    EventConfig,
    FunctionConfig,
    IamConfig,
    IamRoleConfig,
    ProviderConfig,
    StreamConfig,
    StreamType,
)
