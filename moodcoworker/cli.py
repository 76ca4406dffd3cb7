"""
Mood Co-Worker command line.

    moodcoworker login --email you@example.com
    moodcoworker add --mood 7 --note "Good standup"
    moodcoworker show
    moodcoworker app        # interactive loop
"""

import logging
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.prompt import Prompt

from moodcoworker.core.config import Config
from moodcoworker.core.errors import ActionResult
from moodcoworker.shell import MoodShell
from moodcoworker.ui.auth_panel import AuthMode, AuthPanel
from moodcoworker.ui.journal_form import MOOD_MAX, MOOD_MIN, JournalForm
from moodcoworker.ui.view import render_view

app = typer.Typer(help="Digital Mood Co-Worker - track how your days feel")
console = Console()

logger = logging.getLogger("moodcoworker")


def alert(message: str) -> None:
    """Blocking, generic user-facing error."""
    console.print(f"[bold red]{message}[/bold red]")


def _build_shell() -> MoodShell:
    config = Config.from_env()
    logger.debug(f"Using API {config.api_url}")
    return MoodShell.from_config(config, alert=alert)


def _warn_unsaved(result: ActionResult) -> None:
    if result.warning is not None:
        console.print("[yellow]Session could not be saved; you will need to log in again next time.[/yellow]")


def _logout(shell: MoodShell) -> bool:
    result = shell.logout()
    if not result:
        console.print(f"[yellow]Logged out, but the session file was not cleared: {result.error.message}[/yellow]")
        return False

    console.print("Logged out.")
    return True


def _require_login(shell: MoodShell) -> None:
    if not shell.is_authenticated:
        console.print("[yellow]Not logged in. Run `login` or `signup` first.[/yellow]")
        raise typer.Exit(1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """
    Log moods, see your average and your trend.
    """
    load_dotenv()

    try:
        config = Config.from_env()
    except ValueError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1)

    level = logging.DEBUG if verbose else config.log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@app.command()
def login(
    email: str = typer.Option(..., "--email", "-e", prompt=True, help="Account email"),
    password: str = typer.Option(..., "--password", "-p", prompt=True, hide_input=True, help="Password"),
):
    """Log in and remember the session."""
    shell = _build_shell()
    result = shell.handle_login(email, password)
    if not result:
        raise typer.Exit(1)
    _warn_unsaved(result)

    console.print(f"[green]Logged in. {len(shell.entries)} entries loaded.[/green]")


@app.command()
def signup(
    name: str = typer.Option(..., "--name", "-n", prompt=True, help="Your name"),
    email: str = typer.Option(..., "--email", "-e", prompt=True, help="Account email"),
    password: str = typer.Option(..., "--password", "-p", prompt=True, hide_input=True, help="Password"),
):
    """Create an account and remember the session."""
    shell = _build_shell()
    result = shell.handle_signup(name, email, password)
    if not result:
        raise typer.Exit(1)
    _warn_unsaved(result)

    console.print("[green]Account created. You're logged in.[/green]")


@app.command()
def logout():
    """Forget the stored session."""
    shell = _build_shell()
    if not _logout(shell):
        raise typer.Exit(1)


@app.command()
def show():
    """Show the insight and mood chart."""
    shell = _build_shell()
    result = shell.start()
    if shell.is_authenticated and not result:
        logger.debug(f"Showing cached view after failed fetch: {result.error}")

    console.print(render_view(shell))


@app.command()
def add(
    mood: int = typer.Option(..., "--mood", "-m", min=MOOD_MIN, max=MOOD_MAX, help="Mood from 1 to 10"),
    note: Optional[str] = typer.Option(None, "--note", "-n", help="What happened today"),
    date: Optional[str] = typer.Option(None, "--date", "-d", help="ISO timestamp, defaults to now"),
):
    """Record a mood entry."""
    shell = _build_shell()
    _require_login(shell)

    form = JournalForm(on_add=shell.add_entry)
    result = form.submit(mood, note, date)
    if not result:
        console.print("[red]Entry not saved.[/red]")
        raise typer.Exit(1)

    console.print(render_view(shell))


@app.command("config")
def show_config():
    """Show current settings."""
    typer.echo(Config.from_env().get_summary())


def _auth_loop(shell: MoodShell) -> bool:
    """Returns False when the user wants to quit."""
    panel = AuthPanel(on_login=shell.handle_login, on_signup=shell.handle_signup)

    choice = Prompt.ask(
        "[bold]Login[/bold], signup or quit",
        choices=["login", "signup", "quit"],
        default="login",
        console=console,
    )
    if choice == "quit":
        return False

    panel.switch_mode(AuthMode(choice))
    result = panel.prompt(console)
    if result:
        _warn_unsaved(result)
    return True


def _journal_loop(shell: MoodShell) -> bool:
    """Returns False when the user wants to quit."""
    console.print(render_view(shell))

    choice = Prompt.ask(
        "\nAdd entry, refresh, logout or quit",
        choices=["add", "refresh", "logout", "quit"],
        default="add",
        console=console,
    )

    if choice == "quit":
        return False
    if choice == "add":
        if not JournalForm(on_add=shell.add_entry).prompt(console):
            console.print("[red]Entry not saved.[/red]")
    elif choice == "refresh":
        shell.fetch_entries()
    elif choice == "logout":
        _logout(shell)

    return True


@app.command("app")
def run_app():
    """Interactive journal session."""
    shell = _build_shell()
    shell.start()

    keep_going = True
    while keep_going:
        if shell.is_authenticated:
            keep_going = _journal_loop(shell)
        else:
            console.print(render_view(shell))
            keep_going = _auth_loop(shell)


if __name__ == "__main__":
    app()
