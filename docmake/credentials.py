"""Registry credential resolution."""

from __future__ import annotations

import getpass
import os
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

USERNAME_ENV = "DOCKERHUB_USERNAME"
PASSWORD_ENV = "DOCKERHUB_PASSWORD"


class CredentialsError(RuntimeError):
    """Raised when credentials cannot be read from the terminal."""


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str


def prompt_credentials(
    input_func: Callable[[str], str] = input,
    getpass_func: Callable[[str], str] = getpass.getpass,
) -> Credentials:
    """Ask for a username and a password; the password is not echoed."""
    try:
        username = input_func("Enter Docker Hub username: ").strip()
        password = getpass_func("Enter Docker Hub password: ")
    except (EOFError, OSError) as exc:
        raise CredentialsError(f"could not read credentials: {exc}") from exc
    return Credentials(username=username, password=password)


def resolve_credentials(
    username: Optional[str] = None,
    password: Optional[str] = None,
    *,
    environ: Mapping[str, str] | None = None,
    prompt: Callable[[], Credentials] = prompt_credentials,
) -> Credentials:
    """Take credentials from arguments, then the environment, then the terminal."""
    env = os.environ if environ is None else environ
    username = username or env.get(USERNAME_ENV, "")
    password = password or env.get(PASSWORD_ENV, "")
    if username and password:
        return Credentials(username=username, password=password)
    return prompt()
