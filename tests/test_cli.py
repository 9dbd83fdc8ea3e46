"""Tests for the predictstore CLI."""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from predictstore.cli import app
from predictstore.core.exceptions import ConfigMalformedError, ConfigMissingError

runner = CliRunner()


def _json_from(output: str) -> dict:
    return json.loads(output[output.index("{") : output.rindex("}") + 1])


@pytest.fixture
def cli_store(prediction_store):
    """Route CLI commands to the in-memory backed store."""
    with (
        patch("predictstore.cli.setup_logging"),
        patch("predictstore.cli.create_prediction_store", return_value=prediction_store),
    ):
        yield prediction_store


class TestDocumentCommands:
    def test_store_then_get(self, cli_store, fake_firestore):
        stored = runner.invoke(app, ["store", "pred-1", "--data", '{"label": "cat", "score": 0.92}'])
        fetched = runner.invoke(app, ["get", "pred-1"])

        assert stored.exit_code == 0
        assert _json_from(stored.output) == {"success": True}
        assert fetched.exit_code == 0
        assert _json_from(fetched.output) == {
            "success": True,
            "data": {"label": "cat", "score": 0.92},
        }
        assert fake_firestore.closed is True

    def test_get_missing_exits_nonzero(self, cli_store):
        result = runner.invoke(app, ["get", "missing"])

        assert result.exit_code == 1
        assert _json_from(result.output) == {
            "success": False,
            "error": "Dokumen tidak ditemukan",
        }

    def test_delete_missing_succeeds(self, cli_store):
        result = runner.invoke(app, ["delete", "missing"])

        assert result.exit_code == 0
        assert _json_from(result.output) == {"success": True}

    @pytest.mark.parametrize("payload", ["{bad json", "[1, 2]"])
    def test_store_rejects_bad_payload(self, cli_store, fake_firestore, payload):
        result = runner.invoke(app, ["store", "pred-1", "--data", payload])

        assert result.exit_code == 2
        assert fake_firestore.collections["predictions"].documents == {}


class TestStartupFailures:
    @pytest.mark.parametrize(
        "error",
        [
            ConfigMissingError("SERVICE_ACCOUNT_KEY"),
            ConfigMalformedError("SERVICE_ACCOUNT_KEY", "invalid JSON"),
        ],
    )
    def test_configuration_error_exits(self, error):
        with (
            patch("predictstore.cli.setup_logging"),
            patch("predictstore.cli.create_prediction_store", side_effect=error),
        ):
            result = runner.invoke(app, ["get", "pred-1"])

        assert result.exit_code == 1


class TestCheckConfig:
    def test_valid(self, monkeypatch, service_account_json):
        monkeypatch.setenv("SERVICE_ACCOUNT_KEY", service_account_json)

        result = runner.invoke(app, ["check-config"])

        assert result.exit_code == 0
        assert "test-project" in result.output

    def test_missing(self, monkeypatch):
        monkeypatch.setenv("SERVICE_ACCOUNT_KEY", "")

        result = runner.invoke(app, ["check-config"])

        assert result.exit_code == 1

    def test_malformed(self, monkeypatch):
        monkeypatch.setenv("SERVICE_ACCOUNT_KEY", "not-json")

        result = runner.invoke(app, ["check-config"])

        assert result.exit_code == 1
