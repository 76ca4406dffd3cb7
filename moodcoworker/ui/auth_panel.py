"""
Auth panel.

Two modes, LOGIN and SIGNUP, switchable at any time. The draft is a
plain dict of whatever has been typed so far. No client-side
validation: the server decides what a valid email or password is.
"""

from enum import Enum
from typing import Any, Callable, Dict, Optional

from rich.console import Console
from rich.prompt import Prompt


class AuthMode(str, Enum):
    LOGIN = "login"
    SIGNUP = "signup"


class AuthPanel:
    """
    Collects credentials and hands them to login/signup callbacks.
    """

    def __init__(
        self,
        on_login: Callable[[Optional[str], Optional[str]], Any],
        on_signup: Callable[[Optional[str], Optional[str], Optional[str]], Any],
        mode: AuthMode = AuthMode.LOGIN,
    ):
        self.on_login = on_login
        self.on_signup = on_signup
        self.mode = mode
        self.draft: Dict[str, str] = {}

    @property
    def is_signup(self) -> bool:
        return self.mode == AuthMode.SIGNUP

    def switch_mode(self, mode: AuthMode) -> None:
        """Change mode. The draft is kept."""
        self.mode = AuthMode(mode)

    def set_field(self, name: str, value: str) -> None:
        self.draft = {**self.draft, name: value}

    def submit(self) -> Any:
        """
        Call the callback for the current mode with draft values.

        The draft is discarded afterwards, whatever the outcome.
        """
        draft = self.draft
        self.draft = {}

        if self.is_signup:
            return self.on_signup(draft.get("name"), draft.get("email"), draft.get("password"))
        return self.on_login(draft.get("email"), draft.get("password"))

    def prompt(self, console: Optional[Console] = None) -> Any:
        """
        Fill the draft interactively for the current mode, then submit.
        """
        console = console or Console()
        title = "Signup" if self.is_signup else "Login"
        console.print(f"\n[bold]{title}[/bold]\n")

        if self.is_signup:
            self.set_field("name", Prompt.ask("Name", console=console))
        self.set_field("email", Prompt.ask("Email", console=console))
        self.set_field("password", Prompt.ask("Password", password=True, console=console))

        return self.submit()
