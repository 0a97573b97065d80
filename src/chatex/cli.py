"""Typer-based CLI for the Chatex API client."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Optional, TypeVar

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .errors import ChatexError, RequestBuildError

if TYPE_CHECKING:
    from .client import ChatexClient

T = TypeVar("T")


def _load_settings(config_path: Optional[Path] = None):
    from .config import load_settings
    return load_settings(config_path)


def _create_client(settings):
    from .factory import create_client_from_settings
    return create_client_from_settings(settings)


def _configure_logging(log_dir: Path | None = None):
    from .logging import configure_logging
    return configure_logging(log_dir)


app = typer.Typer(help="Chatex exchange API client")
console = Console()
logger = logging.getLogger(__name__)


def run_cli(argv: list[str] | None = None) -> None:
    """Run CLI with optional argv parameter."""
    app(argv)


def main(argv: list[str] | None = None) -> int:
    """Console script entry point."""
    _configure_logging()
    try:
        run_cli(argv)
        return 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0


def _run(config: Optional[Path], operation: Callable[["ChatexClient"], Awaitable[T]]) -> T:
    """Build a client from config, run one operation and close the client."""
    try:
        settings = _load_settings(config)
        client = _create_client(settings)
    except (ValueError, RequestBuildError) as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(1)

    async def runner() -> T:
        async with client:
            return await operation(client)

    try:
        return asyncio.run(runner())
    except ChatexError as e:
        logger.error("Request failed: %s", e.to_dict(), exc_info=True)
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


ConfigOption = typer.Option(None, help="Path to config file")


@app.command()
def token(config: Optional[Path] = ConfigOption) -> None:
    """Request a new access token."""
    access_token = _run(config, lambda client: client.profile.create_access_token())
    console.print(Panel.fit(
        f"Access token: {access_token.access_token}\n"
        f"Expires at: {access_token.expires_at}",
        title="Access Token",
    ))


@app.command()
def me(config: Optional[Path] = ConfigOption) -> None:
    """Show account information."""
    info = _run(config, lambda client: client.profile.get_account_information())
    profile = info.profile
    lines = [
        f"ID: {info.id}",
        f"Username: {profile.username}",
        f"Email: {profile.email or '-'}",
        f"Country: {profile.country_code}",
        f"Verification: {profile.verification.current_level}",
        f"Finance blocked: {profile.is_finance_blocked}",
        f"Withdraw limit: {profile.limits.current_withdraw}/{profile.limits.withdraw_limit}",
    ]
    if info.merchant_info:
        lines.append(f"Merchant: {info.merchant_info.name}")
    console.print(Panel.fit("\n".join(lines), title="Account"))


@app.command()
def balance(config: Optional[Path] = ConfigOption) -> None:
    """Show balance per coin."""
    currencies = _run(config, lambda client: client.profile.get_balance_summary())

    table = Table(title="Balance")
    table.add_column("Coin", style="cyan")
    table.add_column("Amount", justify="right")
    table.add_column("Held", justify="right")
    for currency in currencies:
        table.add_row(currency.coin, currency.amount, currency.held)
    console.print(table)


@app.command()
def coins(config: Optional[Path] = ConfigOption) -> None:
    """List coins available on the exchange."""
    available = _run(config, lambda client: client.coin.get_available_coins())

    table = Table(title="Coins")
    table.add_column("Name", style="cyan")
    table.add_column("Full name")
    table.add_column("Decimals", justify="right")
    for info in available:
        table.add_row(info.name, info.full_name, str(info.decimals))
    console.print(table)


@app.command()
def coin(
    name: str = typer.Argument(..., help="Coin symbol, e.g. btc"),
    config: Optional[Path] = ConfigOption,
) -> None:
    """Show metadata of a single coin."""
    info = _run(config, lambda client: client.coin.get_coin(name))
    console.print(Panel.fit(
        f"Name: {info.name}\n"
        f"Full name: {info.full_name}\n"
        f"Decimals: {info.decimals}",
        title="Coin",
    ))


@app.command("config-show")
def config_show(config: Optional[Path] = ConfigOption) -> None:
    """Print the effective configuration with secrets masked."""
    try:
        settings = _load_settings(config)
    except ValueError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(1)
    data: dict[str, Any] = settings.redacted()
    console.print_json(json.dumps(data))
