"""
Azure Blob Storage helpers for artifact storage.
"""

from src.storage.blob import get_blob_client, get_blob_reference, get_container_reference
from src.storage.errors import get_exception_message
from src.storage.params import (
    PARAM_ACCOUNT_KEY,
    PARAM_ACCOUNT_NAME,
    PARAM_CONTAINER_NAME,
    PATH_PREFIX_ATTR,
    get_artifact_path,
    get_parameters,
    get_path_prefix,
    parameters_from_settings,
)
from src.storage.paths import ArtifactPaths

__all__ = [
    "ArtifactPaths",
    "PARAM_ACCOUNT_KEY",
    "PARAM_ACCOUNT_NAME",
    "PARAM_CONTAINER_NAME",
    "PATH_PREFIX_ATTR",
    "get_artifact_path",
    "get_blob_client",
    "get_blob_reference",
    "get_container_reference",
    "get_exception_message",
    "get_parameters",
    "get_path_prefix",
    "parameters_from_settings",
]
