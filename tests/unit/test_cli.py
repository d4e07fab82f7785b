"""CLI tests."""

import jwt
from typer.testing import CliRunner

from ydbauth.cli import app

runner = CliRunner()


def test_headers_masks_token(monkeypatch):
    monkeypatch.setenv("YDBAUTH_TOKEN", "abcdefghijklmnop")
    monkeypatch.delenv("YDBAUTH_METHOD", raising=False)

    result = runner.invoke(app, ["headers", "--method", "token"])
    assert result.exit_code == 0
    assert "x-ydb-auth-ticket: abcd...mnop" in result.output


def test_headers_show_token(monkeypatch):
    monkeypatch.setenv("YDBAUTH_TOKEN", "abcdefghijklmnop")

    result = runner.invoke(app, ["headers", "--method", "token", "--show-token"])
    assert result.exit_code == 0
    assert "abcdefghijklmnop" in result.output


def test_headers_anonymous(tmp_path, monkeypatch):
    monkeypatch.delenv("YDBAUTH_METHOD", raising=False)
    monkeypatch.setenv("YDBAUTH_CONFIG", str(tmp_path / "missing.yaml"))

    result = runner.invoke(app, ["headers"])
    assert result.exit_code == 0
    assert "No credentials attached." in result.output


def test_headers_reports_errors(monkeypatch):
    monkeypatch.delenv("YDBAUTH_TOKEN", raising=False)
    monkeypatch.setenv("YDBAUTH_CONFIG", "does-not-exist.yaml")

    result = runner.invoke(app, ["headers", "--method", "token"])
    assert result.exit_code == 1
    assert "requires a token" in result.output


def test_jwt_command(key_file):
    result = runner.invoke(app, ["jwt", str(key_file)])
    assert result.exit_code == 0
    header = jwt.get_unverified_header(result.output.strip())
    assert header["kid"] == "key-456"


def test_jwt_command_missing_file(tmp_path):
    result = runner.invoke(app, ["jwt", str(tmp_path / "nope.json")])
    assert result.exit_code == 1


def test_headers_reports_malformed_config(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("method: [unclosed\n")

    result = runner.invoke(app, ["headers", "--config", str(config_path)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)


def test_headers_reports_missing_key_file(tmp_path, monkeypatch):
    monkeypatch.delenv("YDBAUTH_METHOD", raising=False)
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        f"method: iam\niam:\n  service_account_key_file: {tmp_path / 'missing.json'}\n"
    )

    result = runner.invoke(app, ["headers", "--config", str(config_path)])
    assert isinstance(result.exception, SystemExit)
    assert result.exit_code == 1
    assert "missing.json" in result.output
