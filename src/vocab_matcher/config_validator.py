"""
Configuration validation utilities.

Reads environment values and turns bad input into ConfigurationError
with a message that says how to fix it.
"""
import os
from typing import Optional

from .exceptions import ConfigurationError


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable; blank values count as unset.

    :param key: Environment variable name
    :param default: Default value if not set
    :return: Environment variable value or default
    """
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value


def get_int_env(
    key: str,
    default: Optional[int] = None,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
) -> Optional[int]:
    """
    Get optional integer environment variable with bounds checking.

    :param key: Environment variable name
    :param default: Value used when the variable is unset or blank
    :param min_value: Inclusive lower bound, if any
    :param max_value: Inclusive upper bound, if any
    :return: Parsed integer or default
    :raises: ConfigurationError if the value is not an integer or out of bounds
    """
    raw = get_optional_env(key)
    if raw is None:
        return default

    try:
        value = int(raw.strip())
    except ValueError:
        raise ConfigurationError(
            f"{key} must be an integer, got {raw!r}.\n"
            f"Please fix it in the environment or in your .env file."
        ) from None

    if min_value is not None and value < min_value:
        raise ConfigurationError(f"{key} must be >= {min_value}, got {value}.")
    if max_value is not None and value > max_value:
        raise ConfigurationError(f"{key} must be <= {max_value}, got {value}.")

    return value


def validate_path(path: str, path_name: str, must_exist: bool = False) -> str:
    """
    Validate file/directory path.

    :param path: Path to validate
    :param path_name: Name of the path (for error messages)
    :param must_exist: Whether path must exist
    :return: Validated path
    :raises: ConfigurationError if invalid
    """
    if not path:
        raise ConfigurationError(f"{path_name} is required.")

    if must_exist and not os.path.exists(path):
        raise ConfigurationError(
            f"{path_name} does not exist: {path}\n"
            f"Please check the path and ensure the file exists."
        )

    return path
