"""Typer CLI for building an election database from constituency files."""

import typer

from election_db.core.config import get_settings
from election_db.core.errors import BuildError
from election_db.core.logging import setup_logging

app = typer.Typer(name="election-db", help="Election database builder", add_completion=False)


@app.command()
def build(
    database: str | None = typer.Option(
        None,
        "-d",
        "--database",
        help="Name of database to build (default: <election>_<hash>)",
    ),
) -> None:
    """Load ./constituencies/*/* area files into the MongoDB 'area' collection.

    Run from a directory named assembly, dail, or westminster.
    """
    from pymongo import MongoClient

    from election_db.core.database import close, connect
    from election_db.services.build_service import create_database

    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)

    clients: list[MongoClient] = []

    def _client_factory() -> MongoClient:
        client = connect(settings.mongodb_uri, timeout_ms=settings.mongodb_timeout_ms)
        clients.append(client)
        return client

    try:
        result = create_database(settings, _client_factory, db_name=database or None)
    except BuildError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    finally:
        for client in clients:
            close(client)

    typer.echo(f'Created database "{result.election_db.get_database()}"')
    typer.echo(f"  Election:       {result.election_db.kind.value}")
    typer.echo(f"  Constituencies: {result.constituencies}")
    typer.echo(f"  Files:          {result.files}")
    typer.echo(f"  Inserted:       {result.load.inserted}")
    typer.echo(f"  Skipped:        {len(result.load.skipped)}")
