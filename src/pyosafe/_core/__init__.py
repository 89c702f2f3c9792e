from ._config import Config, config_context, get_config, set_config
from ._container import Container
from ._main import Pipeable

__all__ = [
    "Config",
    "Container",
    "Pipeable",
    "config_context",
    "get_config",
    "set_config",
]
