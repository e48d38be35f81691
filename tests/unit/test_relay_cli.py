"""Tests for the relay CLI."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from src.cli.relay_cli import app
from src.config import get_settings
from src.services.signature import SignatureVerifier

runner = CliRunner()

_REQUIRED_ENV = {
    "MESSENGER_APP_SECRET": "cli-secret",
    "MESSENGER_VALIDATION_TOKEN": "cli-verify-token",
    "MESSENGER_PAGE_ACCESS_TOKEN": "EAAcliPageToken",
    "SERVER_URL": "https://relay.example.com",
}


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Start every test without configuration and with a clean cache."""
    monkeypatch.chdir(tmp_path)
    for key in _REQUIRED_ENV:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("PORT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def configured(monkeypatch):
    for key, value in _REQUIRED_ENV.items():
        monkeypatch.setenv(key, value)


class TestCheckConfig:
    def test_complete_configuration(self, configured):
        result = runner.invoke(app, ["check-config"])

        assert result.exit_code == 0
        assert "✓ Configuration complete" in result.output
        assert "https://relay.example.com" in result.output
        assert "EAAcliPageToken" not in result.output

    def test_missing_configuration_exits_1(self):
        result = runner.invoke(app, ["check-config"])

        assert result.exit_code == 1
        assert "Missing config values" in result.output
        assert "messenger_app_secret" in result.output

    def test_invalid_configuration_exits_1(self, configured, monkeypatch):
        monkeypatch.setenv("PORT", "abc")

        result = runner.invoke(app, ["check-config"])

        assert result.exit_code == 1
        assert "Invalid config values" in result.output
        assert "port" in result.output


class TestSign:
    def test_sign_with_explicit_secret(self, tmp_path):
        body_file = tmp_path / "body.json"
        body_file.write_bytes(b'{"object":"page","entry":[]}')

        result = runner.invoke(app, ["sign", str(body_file), "--secret", "s3cret"])

        assert result.exit_code == 0
        expected = SignatureVerifier("s3cret").header_for(b'{"object":"page","entry":[]}')
        assert result.output.strip() == expected
        assert expected.startswith("sha1=")

    def test_sign_uses_configured_secret(self, configured, tmp_path):
        body_file = tmp_path / "body.json"
        body_file.write_bytes(b"{}")

        result = runner.invoke(app, ["sign", str(body_file)])

        assert result.exit_code == 0
        assert result.output.strip() == SignatureVerifier("cli-secret").header_for(b"{}")

    def test_sign_without_secret_or_config(self, tmp_path):
        body_file = tmp_path / "body.json"
        body_file.write_bytes(b"{}")

        result = runner.invoke(app, ["sign", str(body_file)])

        assert result.exit_code == 1

    def test_sign_missing_file(self, tmp_path):
        result = runner.invoke(
            app, ["sign", str(tmp_path / "absent.json"), "--secret", "s"]
        )

        assert result.exit_code != 0


class TestServe:
    def test_serve_announces_port_and_runs(self, configured):
        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve", "--port", "8080"])

        assert result.exit_code == 0
        assert "Webhook relay listening on port 8080" in result.output
        mock_run.assert_called_once()
        assert mock_run.call_args.args == ("src.main:app",)
        assert mock_run.call_args.kwargs["port"] == 8080

    def test_serve_defaults_to_configured_port(self, configured):
        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve"])

        assert result.exit_code == 0
        assert mock_run.call_args.kwargs["port"] == 5000

    def test_serve_refuses_to_start_without_configuration(self):
        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve"])

        assert result.exit_code == 1
        mock_run.assert_not_called()
