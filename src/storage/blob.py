"""
Azure Blob Storage client construction.

Building clients and references is local; no request is sent until the
caller reads or writes through them.
"""

from collections.abc import Mapping

import structlog
from azure.core.credentials import AzureNamedKeyCredential
from azure.storage.blob import BlobClient, BlobServiceClient, ContainerClient

from src.config import get_settings
from src.storage.params import PARAM_ACCOUNT_KEY, PARAM_ACCOUNT_NAME
from src.storage.paths import ArtifactPaths

logger = structlog.get_logger(__name__)


def get_account_url(account_name: str, endpoint_suffix: str | None = None) -> str:
    """Get the HTTPS blob endpoint for a storage account."""
    suffix = endpoint_suffix or get_settings().azure_storage_endpoint_suffix
    return f"https://{account_name}.blob.{suffix}"


def get_blob_client(
    parameters: Mapping[str, str],
    endpoint_suffix: str | None = None,
) -> BlobServiceClient:
    """
    Create a blob service client from storage parameters.

    Args:
        parameters: Map holding the account name and account key
        endpoint_suffix: Storage endpoint suffix, defaults to the configured one

    Returns:
        BlobServiceClient authenticated with the shared account key
    """
    account_name = (parameters.get(PARAM_ACCOUNT_NAME) or "").strip()
    account_key = (parameters.get(PARAM_ACCOUNT_KEY) or "").strip()
    if not account_name:
        raise ValueError("Storage account name is required")
    if not account_key:
        raise ValueError("Storage account key is required")

    credential = AzureNamedKeyCredential(account_name, account_key)
    account_url = get_account_url(account_name, endpoint_suffix)
    logger.debug("Creating blob service client", account_url=account_url)
    return BlobServiceClient(account_url=account_url, credential=credential)


def get_container_reference(
    parameters: Mapping[str, str],
    container_name: str,
) -> ContainerClient:
    """Get a container reference for the account described by parameters."""
    return get_blob_client(parameters).get_container_client(container_name)


def get_blob_reference(parameters: Mapping[str, str], path: str) -> BlobClient:
    """
    Get a blob reference for a "{container}/{blob path}" path.

    Raises:
        ValueError: If the path has no container segment
    """
    client = get_blob_client(parameters)
    container_name, blob_path = ArtifactPaths.split_container_and_path(path)
    logger.debug("Resolving blob reference", container=container_name, blob=blob_path)
    container = client.get_container_client(container_name)
    return container.get_blob_client(blob_path)
