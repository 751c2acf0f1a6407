"""
Storage parameter keys and extraction helpers.
"""

from collections.abc import Mapping

from src.config import Settings

PARAM_ACCOUNT_NAME = "account-name"
PARAM_ACCOUNT_KEY = "secure:account-key"
PARAM_CONTAINER_NAME = "container-name"
PATH_PREFIX_ATTR = "azure_path_prefix"

FORWARD_SLASH = "/"

STORAGE_PARAMETERS = (PARAM_ACCOUNT_NAME, PARAM_ACCOUNT_KEY, PARAM_CONTAINER_NAME)


def get_parameters(parameters: Mapping[str, str | None]) -> dict[str, str]:
    """
    Get the Azure storage parameters from an arbitrary parameter map.

    Only the account name, account key and container name are kept.
    Values are stripped; missing keys are left out.
    """
    result: dict[str, str] = {}
    for key in STORAGE_PARAMETERS:
        value = parameters.get(key)
        if value is not None:
            result[key] = value.strip()
    return result


def get_path_prefix(properties: Mapping[str, str]) -> str | None:
    """Get the configured path prefix, if any."""
    return properties.get(PATH_PREFIX_ATTR)


def get_artifact_path(properties: Mapping[str, str], path: str) -> str:
    """
    Get the full artifact path for a path relative to the prefix.

    No normalization is applied, the prefix is expected to be well-formed.

    Example:
        {"azure_path_prefix": "builds/42"}, "logs/out.txt" -> "builds/42/logs/out.txt"
    """
    prefix = get_path_prefix(properties) or ""
    return f"{prefix}{FORWARD_SLASH}{path}"


def parameters_from_settings(settings: Settings) -> dict[str, str]:
    """Build a storage parameter map from application settings."""
    raw = {
        PARAM_ACCOUNT_NAME: settings.azure_storage_account_name,
        PARAM_ACCOUNT_KEY: settings.azure_account_key_str,
        PARAM_CONTAINER_NAME: settings.azure_storage_container,
    }
    return get_parameters(raw)
