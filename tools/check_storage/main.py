"""
Storage settings check CLI tool.

Verifies that an Azure storage account, key and container can be used
for artifacts before any build publishes to them.

Usage:
    poetry run check-storage --account-name myaccount --account-key ... --container artifacts
    poetry run check-storage --path-prefix builds/nightly
"""

import sys

import click
import structlog

from src.config import configure_from_settings, get_settings
from src.storage import (
    PARAM_ACCOUNT_KEY,
    PARAM_ACCOUNT_NAME,
    PARAM_CONTAINER_NAME,
    PATH_PREFIX_ATTR,
    get_artifact_path,
    get_blob_client,
    get_container_reference,
    get_exception_message,
    get_parameters,
    parameters_from_settings,
)

logger = structlog.get_logger(__name__)


def check_storage(parameters: dict[str, str]) -> None:
    """
    Touch the storage account described by parameters.

    Reads the container properties when a container is configured,
    otherwise lists a single page of containers. Azure errors propagate.
    """
    container_name = parameters.get(PARAM_CONTAINER_NAME)
    if container_name:
        get_container_reference(parameters, container_name).get_container_properties()
    else:
        pages = get_blob_client(parameters).list_containers(results_per_page=1).by_page()
        list(next(pages, []))


def get_artifact_location(container_name: str, prefix: str | None) -> str:
    """Get the "{container}/{prefix}" location shown to the user, unnormalized."""
    parts = [container_name, (prefix or "").strip("/")]
    return "/".join(part for part in parts if part)


@click.command()
@click.option("--account-name", default=None, help="Storage account name")
@click.option("--account-key", default=None, help="Storage account access key")
@click.option("--container", default=None, help="Container holding the artifacts")
@click.option("--path-prefix", default=None, help="Prefix for artifact paths")
def main(
    account_name: str | None,
    account_key: str | None,
    container: str | None,
    path_prefix: str | None,
):
    """Check Azure storage settings used for artifacts."""
    configure_from_settings()
    settings = get_settings()

    parameters = parameters_from_settings(settings)
    parameters.update(
        get_parameters(
            {
                PARAM_ACCOUNT_NAME: account_name,
                PARAM_ACCOUNT_KEY: account_key,
                PARAM_CONTAINER_NAME: container,
            }
        )
    )
    if not parameters.get(PARAM_ACCOUNT_NAME) or not parameters.get(PARAM_ACCOUNT_KEY):
        raise click.UsageError("Both --account-name and --account-key are required")

    prefix = path_prefix if path_prefix is not None else settings.azure_storage_path_prefix
    location = get_artifact_location(parameters.get(PARAM_CONTAINER_NAME, ""), prefix)
    if location:
        click.echo(f"Artifact location: {location}")
    if prefix:
        example = get_artifact_path({PATH_PREFIX_ATTR: prefix.rstrip("/")}, "<artifact>")
        click.echo(f"Artifacts are stored as: {example}")

    try:
        check_storage(parameters)
    except Exception as e:
        message = get_exception_message(e)
        logger.error(
            "Storage check failed",
            account=parameters[PARAM_ACCOUNT_NAME],
            error=str(e),
        )
        click.echo(f"Error: {message}", err=True)
        sys.exit(1)

    click.echo("Storage settings are valid")


if __name__ == "__main__":
    main()
