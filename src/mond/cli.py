from __future__ import annotations

import logging

import typer

from .demo import User, divide, find_user_by_id
from .errors import UnwrapError
from .option import Option
from .result import Result

logger: logging.Logger = logging.getLogger(__name__)

app: typer.Typer = typer.Typer(no_args_is_help=True)


def _format_number(value: float) -> str:
    return str(int(value)) if value.is_integer() else repr(value)


def _format_user(user: User) -> str:
    return f"{user.id}:{user.name}"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Try out Result and Option containers from the shell."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@app.command("divide", context_settings={"ignore_unknown_options": True})
def divide_command(
    a: float,
    b: float,
    default: float | None = typer.Option(None, help="Value printed when the division fails."),
    expect: str | None = typer.Option(None, help="Message reported when the division fails."),
) -> None:
    """Divide A by B."""
    if default is not None and expect is not None:
        typer.echo("Provide at most one of --default and --expect", err=True)
        raise typer.Exit(2)
    result: Result[float, str] = divide(a, b)
    logger.debug("divide(%s, %s) -> %r", a, b, result)
    if default is not None:
        typer.echo(_format_number(result.unwrap_or(default)))
        return
    value: float
    try:
        value = result.expect(expect) if expect is not None else result.unwrap()
    except UnwrapError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc
    typer.echo(_format_number(value))


@app.command("find-user")
def find_user_command(
    user_id: int = typer.Argument(..., metavar="ID"),
    default_name: str | None = typer.Option(None, help="Name of the placeholder user printed when ID is unknown."),
) -> None:
    """Look up a demonstration user by ID."""
    found: Option[User] = find_user_by_id(user_id)
    logger.debug("find_user_by_id(%s) -> %r", user_id, found)
    if default_name is not None:
        typer.echo(_format_user(found.unwrap_or(User(id=0, name=default_name))))
        return
    line: str | None = found.match(some=_format_user, none=lambda: None)
    if line is None:
        typer.echo(f"user {user_id} not found", err=True)
        raise typer.Exit(1)
    typer.echo(line)


if __name__ == "__main__":
    app()
