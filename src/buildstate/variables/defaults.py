"""
Default variable registry.

Loads the baseline variables every new store is seeded with from YAML.
"""

from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

import structlog
import yaml

from .errors import DefaultRegistryError, TypeMismatchError
from .types import Variable
from .values import new_variable

logger = structlog.get_logger(__name__)

DEFAULT_REGISTRY_PATH = Path(__file__).parent.parent / "data" / "default_variables.yaml"


def load_registry_file(file_path: Path) -> dict[str, dict[str, Any]]:
    """
    Load the raw variable definitions from a registry YAML file.

    Args:
        file_path: Path to the YAML file

    Returns:
        Dictionary mapping variable names to their definitions

    Raises:
        DefaultRegistryError: If the file cannot be loaded or parsed
    """
    try:
        with open(file_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DefaultRegistryError(f"YAML parsing error in {file_path}: {e}") from e
    except FileNotFoundError as e:
        raise DefaultRegistryError(f"File not found: {file_path}") from e

    if not data:
        raise DefaultRegistryError(f"Empty YAML file: {file_path}")

    if not isinstance(data, dict):
        raise DefaultRegistryError(f"Top level must be a mapping in {file_path}")

    if "variables" not in data:
        raise DefaultRegistryError(f"Missing 'variables' key in {file_path}")

    definitions = data["variables"]
    if not isinstance(definitions, dict):
        raise DefaultRegistryError(f"'variables' must be a mapping in {file_path}")

    return definitions


def build_registry(definitions: dict[str, dict[str, Any]], file_path: Path) -> dict[str, Variable]:
    """
    Build variables from raw registry definitions.

    Raises:
        DefaultRegistryError: If a definition has no type or an invalid value
    """
    registry: dict[str, Variable] = {}

    for name, definition in definitions.items():
        if not isinstance(definition, dict) or "type" not in definition:
            raise DefaultRegistryError(
                f"Variable '{name}' in {file_path} missing required field: type"
            )
        try:
            registry[name] = new_variable(definition["type"], name, definition.get("value"))
        except TypeMismatchError as e:
            raise DefaultRegistryError(f"Variable '{name}' in {file_path} is invalid: {e}") from e

    return registry


def load_default_registry(file_path: Path | None = None) -> Mapping[str, Variable]:
    """
    Get the default variable registry.

    Args:
        file_path: Registry file to load; the packaged registry when omitted

    Returns:
        Read-only mapping of variable names to their default Variable
    """
    return _load_registry(file_path or DEFAULT_REGISTRY_PATH)


@lru_cache
def _load_registry(file_path: Path) -> Mapping[str, Variable]:
    registry = build_registry(load_registry_file(file_path), file_path)
    logger.debug("default_registry_loaded", path=str(file_path), variable_count=len(registry))
    return MappingProxyType(registry)
