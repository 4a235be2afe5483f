from typing import Type, TypeVar

from dacite import Config, from_dict
from pulumi import log

from .types import FunctionConfig, ProviderConfig, StreamConfig

ConfigType = TypeVar("ConfigType")


def _map_config(config_cls: Type[ConfigType], raw_config: dict) -> ConfigType:
    """Map a raw framework configuration block to its dataclass

    Uses `dacite <https://github.com/konradhalas/dacite>`_ to map dict to dataclass.
    Mapping is not strict, since framework configuration carries plenty of keys this plugin doesn't care about.

    :param config_cls: The dataclass for the config
    :param raw_config: The configuration block as handed over by the framework
    :return: The configuration expressed as ``config_cls``
    """
    return from_dict(
        data_class=config_cls,
        data=raw_config or {},
        config=Config(strict=False),
    )


def get_provider_config(raw_config: dict) -> ProviderConfig:
    """Get the ``provider`` block in dataclass form

    :param raw_config: The raw ``provider`` block
    :return: ProviderConfig
    """
    config = _map_config(ProviderConfig, raw_config)

    log.debug(f"provider config is {config}")

    return config


def get_function_config(raw_config: dict) -> FunctionConfig:
    """Get a single function definition in dataclass form

    :param raw_config: The raw function definition
    :return: FunctionConfig
    """
    return _map_config(FunctionConfig, raw_config)


def get_stream_config(raw_config: dict) -> StreamConfig:
    """Get the object form of a stream event source in dataclass form

    Both fields accept any value, so a badly typed declaration still maps and can be reported by the caller.

    :param raw_config: The raw ``stream`` block of an event
    :return: StreamConfig
    """
    return _map_config(StreamConfig, raw_config)
