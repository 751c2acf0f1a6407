"""
Tests for the storage settings check CLI.
"""

import socket
from unittest.mock import MagicMock, patch

import pytest
from azure.core.exceptions import ClientAuthenticationError, ServiceRequestError
from click.testing import CliRunner
from pydantic import SecretStr

from src.config import Settings
from src.storage.params import PARAM_ACCOUNT_KEY, PARAM_ACCOUNT_NAME, PARAM_CONTAINER_NAME
from tools.check_storage.main import check_storage, get_artifact_location, main


@pytest.fixture
def settings():
    """Settings with no storage account configured."""
    return Settings(
        azure_storage_account_name=None,
        azure_storage_account_key=None,
        azure_storage_container=None,
        azure_storage_path_prefix=None,
    )


@pytest.fixture
def blob_service():
    """Mock blob service client."""
    service = MagicMock()
    with patch("tools.check_storage.main.get_blob_client", return_value=service), patch(
        "src.storage.blob.get_blob_client", return_value=service
    ):
        yield service


@pytest.fixture
def run(settings):
    """Invoke the CLI with fixed settings and logging left untouched."""

    def _run(*args):
        with patch("tools.check_storage.main.get_settings", return_value=settings), patch(
            "tools.check_storage.main.configure_from_settings"
        ):
            return CliRunner().invoke(main, list(args))

    return _run


class TestCheckStorage:
    """Tests for the storage check itself."""

    def test_container_properties(self, blob_service):
        """Test a configured container is checked directly."""
        check_storage({PARAM_ACCOUNT_NAME: "a", PARAM_ACCOUNT_KEY: "k", PARAM_CONTAINER_NAME: "c"})

        blob_service.get_container_client.assert_called_once_with("c")
        blob_service.get_container_client.return_value.get_container_properties.assert_called_once()

    def test_list_containers(self, blob_service):
        """Test the account is listed when no container is configured."""
        blob_service.list_containers.return_value.by_page.return_value = iter([iter([])])

        check_storage({PARAM_ACCOUNT_NAME: "a", PARAM_ACCOUNT_KEY: "k"})

        blob_service.list_containers.assert_called_once_with(results_per_page=1)
        blob_service.get_container_client.assert_not_called()


class TestCli:
    """Tests for the command line interface."""

    def test_valid_settings(self, run, blob_service):
        """Test a successful check."""
        result = run("--account-name", "acct", "--account-key", "key", "--container", "artifacts")

        assert result.exit_code == 0
        assert "Artifact location: artifacts" in result.output
        assert "Storage settings are valid" in result.output

    def test_path_prefix_is_shown(self, run, blob_service):
        """Test the artifact location includes the prefix."""
        result = run(
            "--account-name", "acct",
            "--account-key", "key",
            "--container", "artifacts",
            "--path-prefix", "builds/nightly/",
        )

        assert result.exit_code == 0
        assert "Artifact location: artifacts/builds/nightly" in result.output
        assert "Artifacts are stored as: builds/nightly/<artifact>" in result.output

    def test_missing_credentials(self, run):
        """Test that account name and key are required."""
        result = run("--account-name", "acct")

        assert result.exit_code == 2
        assert "--account-key" in result.output

    def test_invalid_account_key(self, run, blob_service):
        """Test an authentication failure is reported as a bad key."""
        container = blob_service.get_container_client.return_value
        container.get_container_properties.side_effect = ClientAuthenticationError(
            message="Server failed to authenticate the request"
        )

        result = run("--account-name", "acct", "--account-key", "key", "--container", "c")

        assert result.exit_code == 1
        assert "Error: Invalid account key" in result.output

    def test_invalid_account_name(self, run, blob_service):
        """Test a resolution failure is reported as a bad account name."""
        blob_service.list_containers.side_effect = ServiceRequestError(
            "Failed to establish a new connection",
            error=socket.gaierror(socket.EAI_NONAME, "Name or service not known"),
        )

        result = run("--account-name", "nosuchaccount", "--account-key", "key")

        assert result.exit_code == 1
        assert "Error: Invalid account name:" in result.output

    def test_settings_are_used_as_defaults(self, run, settings):
        """Test storage settings fill in missing options."""
        settings.azure_storage_account_name = "fromenv"
        settings.azure_storage_account_key = SecretStr("key")
        settings.azure_storage_container = "artifacts"

        with patch("tools.check_storage.main.get_container_reference") as reference:
            result = run()

        assert result.exit_code == 0
        parameters, container_name = reference.call_args.args
        assert parameters[PARAM_ACCOUNT_NAME] == "fromenv"
        assert container_name == "artifacts"

    def test_options_override_settings(self, run, settings):
        """Test command line options win over settings and are trimmed."""
        settings.azure_storage_account_name = "fromenv"
        settings.azure_storage_account_key = SecretStr("key")
        settings.azure_storage_container = "artifacts"

        with patch("tools.check_storage.main.get_container_reference") as reference:
            result = run("--account-name", " fromcli ", "--container", "other")

        assert result.exit_code == 0
        parameters, container_name = reference.call_args.args
        assert parameters == {
            PARAM_ACCOUNT_NAME: "fromcli",
            PARAM_ACCOUNT_KEY: "key",
            PARAM_CONTAINER_NAME: "other",
        }
        assert container_name == "other"

    def test_parent_segments_keep_container(self, run, blob_service):
        """Test the shown location is not normalized."""
        result = run(
            "--account-name", "acct",
            "--account-key", "key",
            "--container", "c",
            "--path-prefix", "../x",
        )

        assert result.exit_code == 0
        assert "Artifact location: c/../x" in result.output


class TestArtifactLocation:
    """Tests for the location shown to the user."""

    @pytest.mark.parametrize(
        ("container", "prefix", "expected"),
        [
            ("c", "../x", "c/../x"),
            ("c", "/builds/", "c/builds"),
            ("c", None, "c"),
            ("", "builds", "builds"),
            ("", None, ""),
        ],
    )
    def test_location(self, container, prefix, expected):
        """Test container and prefix are joined as given."""
        assert get_artifact_location(container, prefix) == expected
