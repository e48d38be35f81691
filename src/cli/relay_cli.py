"""Typer-based operator CLI for the webhook relay."""

import os

os.environ.setdefault("LOGFIRE_IGNORE_NO_CONFIG", "1")

from pathlib import Path

_project_root = Path(__file__).resolve().parent.parent.parent
from dotenv import load_dotenv

load_dotenv(_project_root / ".env")
load_dotenv(_project_root / ".env.local")

import typer

from src.config import ConfigurationError, Settings, get_settings
from src.logging_config import mask_pii
from src.services.signature import SignatureVerifier

app = typer.Typer(help="Messenger webhook relay tools.")


def _load_settings_or_exit() -> Settings:
    """Load settings; print the missing values and exit 1 when incomplete."""
    try:
        return get_settings()
    except ConfigurationError as e:
        typer.echo(f"✗ {e}", err=True)
        raise typer.Exit(1)


@app.command("check-config")
def check_config():
    """Validate configuration and print a masked summary."""
    settings = _load_settings_or_exit()

    typer.echo("✓ Configuration complete")
    typer.echo(f"  Environment:        {settings.env}")
    typer.echo(f"  Server URL:         {settings.server_url}")
    typer.echo(f"  App secret:         {mask_pii(settings.messenger_app_secret)}")
    typer.echo(f"  Validation token:   {mask_pii(settings.messenger_validation_token)}")
    typer.echo(f"  Page access token:  {mask_pii(settings.messenger_page_access_token)}")
    typer.echo(f"  Graph API version:  {settings.graph_api_version}")


@app.command()
def sign(
    body_file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    secret: str | None = typer.Option(
        None, "--secret", help="App secret (defaults to MESSENGER_APP_SECRET)"
    ),
):
    """Print the x-hub-signature header value for a webhook body file."""
    if secret is None:
        secret = _load_settings_or_exit().messenger_app_secret

    verifier = SignatureVerifier(secret)
    typer.echo(verifier.header_for(body_file.read_bytes()))


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Interface to bind"),
    port: int | None = typer.Option(None, help="Port (defaults to PORT or 5000)"),
):
    """Validate configuration, then run the webhook server."""
    settings = _load_settings_or_exit()

    import uvicorn

    bind_port = port or settings.port
    typer.echo(f"Webhook relay listening on port {bind_port}")
    uvicorn.run(
        "src.main:app",
        host=host,
        port=bind_port,
        reload=settings.env == "local",
    )


if __name__ == "__main__":
    app()
