"""Crowdmap identity CLI using Typer.

Schema management and maintenance of password reset tokens.
"""

import asyncio
from datetime import timedelta

import typer
from rich.console import Console

from crowdmap_config.settings import get_settings
from crowdmap_identity.application.services import PasswordResetService
from crowdmap_identity.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    display_url,
    drop_tables,
    get_engine,
    get_session_maker,
)
from crowdmap_identity.infrastructure.persistence.sqlalchemy.repositories import (
    IdentityRepositoryFactory,
)
from crowdmap_identity.logging_config import configure_logging

app = typer.Typer(
    name="crowdmap-identity",
    help="Crowdmap identity store utilities",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main() -> None:
    configure_logging()


@app.command("init-db")
def init_db() -> None:
    """Create missing tables. Existing tables are left untouched."""
    settings = get_settings()
    console.print(f"Database: [cyan]{display_url(settings.database_url)}[/cyan]")
    asyncio.run(create_tables())
    console.print("[bold green]Database initialized[/bold green]")


@app.command("drop-db")
def drop_db(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Drop without asking for confirmation.",
    ),
) -> None:
    """Drop every table and all data in it."""
    settings = get_settings()
    console.print(f"Database: [cyan]{display_url(settings.database_url)}[/cyan]")

    if not force:
        console.print("[yellow]This will DELETE ALL DATA in the database![/yellow]")
        if not typer.confirm("Continue?", default=False):
            console.print("Aborted.")
            raise typer.Exit(1)

    asyncio.run(drop_tables())
    console.print("[bold green]Database tables dropped[/bold green]")


async def _purge_reset_tokens() -> int:
    settings = get_settings()
    engine = get_engine(settings)
    session_maker = get_session_maker(engine)
    try:
        async with session_maker() as session:
            factory = IdentityRepositoryFactory(session, settings)
            service = PasswordResetService(
                user_repository=factory.user_repository(),
                token_repository=factory.token_repository(),
                password_service=factory.password_service(),
                token_ttl=timedelta(seconds=settings.reset_token_ttl_seconds),
            )
            removed = await service.purge_expired()
            await session.commit()
            return removed
    finally:
        await engine.dispose()


@app.command("purge-reset-tokens")
def purge_reset_tokens() -> None:
    """Delete password reset tokens that can no longer be used."""
    removed = asyncio.run(_purge_reset_tokens())
    console.print(f"Removed [bold]{removed}[/bold] expired reset token(s)")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
