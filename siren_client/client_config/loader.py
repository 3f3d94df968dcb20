"""Client configuration loader.

Loads a ClientConfig from a YAML file. File access is blocking; use
async_load_client_config from a running event loop.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from .schema import ClientConfig

_LOGGER = logging.getLogger(__name__)


def load_client_config(config_path: Path | str) -> ClientConfig:
    """Load a client configuration from a YAML file.

    Args:
        config_path: Path to the YAML file

    Returns:
        Parsed ClientConfig object.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file is empty or invalid.
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Client config not found at {path}")

    _LOGGER.debug("Loading client config from %s", path)

    with open(path, encoding="utf-8") as f:
        try:
            raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if not raw_config:
        raise ValueError(f"Empty client config at {path}")

    try:
        config: ClientConfig = ClientConfig.model_validate(raw_config)
    except ValidationError as e:
        raise ValueError(f"Invalid client config at {path}: {e}") from e

    return config


async def async_load_client_config(config_path: Path | str) -> ClientConfig:
    """Async wrapper for load_client_config.

    Runs the file read in the default executor so the event loop is not blocked.
    """
    loop = asyncio.get_running_loop()
    result: ClientConfig = await loop.run_in_executor(None, load_client_config, config_path)
    return result
