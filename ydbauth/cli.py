"""Command line interface for inspecting authentication metadata."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import httpx
import typer
import yaml

from ydbauth import get_auth_service, load_config
from ydbauth.credentials import IamCredentials
from ydbauth.errors import AuthError
from ydbauth.security.jws import JwtSigner

app = typer.Typer(help="CLI for ydbauth credentials")


@app.callback()
def main() -> None:
    """ydbauth CLI entry point."""
    pass


def _mask(value: str) -> str:
    if len(value) <= 8:
        return "***"
    return f"{value[:4]}...{value[-4:]}"


@app.command("headers")
def headers(
    method: Optional[str] = typer.Option(None, help="anonymous, token, iam or metadata"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="YAML config file"),
    show_token: bool = typer.Option(False, help="Print token values unmasked"),
) -> None:
    """
    Print the metadata attached to calls by the configured auth method.

    Example:
        ydbauth headers --method metadata
        ydbauth headers --config ./auth.yaml --show-token
    """
    try:
        config = load_config(str(config_path) if config_path else None)
        service = get_auth_service(method=method, config=config)
        metadata = asyncio.run(service.get_auth_metadata())
    except (AuthError, ValueError, OSError, yaml.YAMLError, httpx.HTTPError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED)
        raise typer.Exit(code=1)

    if not metadata:
        typer.echo("No credentials attached.")
        return
    for key, value in metadata.items():
        typer.echo(f"{key}: {value if show_token else _mask(value)}")


@app.command("jwt")
def signed_jwt(key_file: Path) -> None:
    """Print a signed assertion for the service account key in ``key_file``."""
    if not key_file.exists():
        typer.secho("Specified key file does not exist", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    credentials = IamCredentials.from_json_file(key_file)
    typer.echo(JwtSigner(credentials).sign())


if __name__ == "__main__":
    app()
