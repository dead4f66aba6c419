"""External process execution shared by the git and container collaborators."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence

Runner = Callable[..., None]


class ExternalProcessError(RuntimeError):
    """Raised when an external command exits non-zero or cannot be started."""

    def __init__(
        self,
        stage: str,
        command: Sequence[str],
        returncode: Optional[int] = None,
        reason: Optional[str] = None,
    ) -> None:
        self.stage = stage
        self.command = list(command)
        self.returncode = returncode
        detail = reason or f"exit status {returncode}"
        super().__init__(f"{stage} failed: `{' '.join(self.command)}` ({detail})")


def default_runner(
    args: Iterable[str],
    *,
    cwd: Path | None = None,
    input_text: str | None = None,
) -> None:
    """Run *args* with inherited stdout/stderr, raising on a non-zero exit."""
    subprocess.run(
        list(args),
        cwd=str(cwd) if cwd is not None else None,
        input=input_text,
        text=True,
        check=True,
    )


def run_stage(
    runner: Runner,
    stage: str,
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    input_text: str | None = None,
) -> None:
    """Invoke *runner* and translate its failures into :class:`ExternalProcessError`."""
    try:
        runner(args, cwd=cwd, input_text=input_text)
    except subprocess.CalledProcessError as exc:
        raise ExternalProcessError(stage, args, returncode=exc.returncode) from exc
    except OSError as exc:
        raise ExternalProcessError(stage, args, reason=str(exc)) from exc
