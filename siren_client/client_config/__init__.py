"""Client configuration module.

Key functions:
    - load_client_config(): Load a ClientConfig from YAML
    - async_load_client_config(): Same, from async code
"""

from .loader import async_load_client_config, load_client_config
from .schema import ClientConfig

__all__ = [
    "ClientConfig",
    "async_load_client_config",
    "load_client_config",
]
