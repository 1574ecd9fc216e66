"""Shared utility functions for the MEVN generate command.

Provides async command execution, file-system copy/write helpers, Rich-based
console output and the interactive prompt primitives.  File-system helpers
convert ``OSError`` into ``FileSystemWriteError`` so callers see a single,
typed failure.
"""

from __future__ import annotations

import asyncio
import os
import re
import shutil
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.prompt import Prompt

from src.errors import FileSystemWriteError, PromptAbortedError

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: int | None = 120,
    env: dict[str, str] | None = None,
) -> tuple[int, str, str]:
    """Run a command asynchronously and capture its output.

    Args:
        cmd: Program and arguments; executed without a shell.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed,
            or ``None`` to wait for the process however long it takes.
        env: Optional extra environment variables merged on top of ``os.environ``.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  A timed-out command
        reports a return code of ``-1``.
    """
    merged_env: dict[str, str] | None = None
    if env:
        merged_env = {**os.environ, **env}

    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=str(cwd) if cwd else None,
        env=merged_env,
    )

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (-1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}")

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


def which(executable: str) -> str | None:
    """Return the absolute path of *executable* on ``PATH``, or ``None``."""
    return shutil.which(executable)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def copy_dir(source: str | Path, target: str | Path) -> Path:
    """Copy the directory *source* into *target*.

    The copy lands at ``target / source.name``.  An existing destination is
    merged into and same-named files are overwritten.

    Returns:
        The destination directory.

    Raises:
        FileSystemWriteError: If the source is missing or any copy fails.
    """
    src = Path(source)
    dest = Path(target) / src.name
    try:
        shutil.copytree(src, dest, dirs_exist_ok=True)
    except shutil.Error as exc:
        # copytree collects per-file failures; report the first one.
        _, failed_dest, reason = exc.args[0][0]
        raise FileSystemWriteError(Path(failed_dest), OSError(reason)) from exc
    except OSError as exc:
        raise FileSystemWriteError(dest, exc) from exc
    return dest


def write_file(path: str | Path, content: str) -> Path:
    """Write *content* to *path*, replacing any existing file.

    Parent directories are created automatically.
    """
    file_path = Path(path)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise FileSystemWriteError(file_path, exc) from exc
    return file_path


def read_file(path: str | Path) -> str:
    file_path = Path(path)
    try:
        return file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FileSystemWriteError(file_path, exc) from exc


# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def to_pascal_case(name: str) -> str:
    """Convert ``some-thing``, ``some_thing`` or ``some thing`` to ``SomeThing``.

    Words that already contain capitals keep them, so ``todoList`` becomes
    ``TodoList`` rather than ``Todolist``.
    """
    parts = re.split(r"[^A-Za-z0-9]+", name.strip())
    return "".join(word[0].upper() + word[1:] for word in parts if word)


# ---------------------------------------------------------------------------
# Interactive prompts
# ---------------------------------------------------------------------------


def prompt_choice(message: str, choices: Sequence[str]) -> str:
    """Ask the user to pick one of *choices* and return the selected label.

    The menu is rendered as a numbered list; the user may answer with either
    the number or the label itself.

    Raises:
        PromptAbortedError: On Ctrl-C or end of input.
    """
    console.print(f"[bold cyan]?[/bold cyan] [bold]{message}[/bold]")
    for index, label in enumerate(choices, start=1):
        console.print(f"  [cyan]{index})[/cyan] {label}")

    numbered = [str(i) for i in range(1, len(choices) + 1)]
    try:
        answer = Prompt.ask(
            "Answer",
            console=console,
            choices=numbered + list(choices),
            default="1",
            show_choices=False,
        )
    except (KeyboardInterrupt, EOFError) as exc:
        raise PromptAbortedError() from exc

    if answer in numbered:
        return choices[int(answer) - 1]
    return answer


def prompt_text(message: str) -> str:
    """Ask the user for a free-form answer.

    Raises:
        PromptAbortedError: On Ctrl-C or end of input.
    """
    try:
        return Prompt.ask(f"[bold cyan]?[/bold cyan] [bold]{message}[/bold]", console=console)
    except (KeyboardInterrupt, EOFError) as exc:
        raise PromptAbortedError() from exc


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner(title: str, subtitle: str) -> None:
    """Print the command banner inside a Rich panel."""
    console.print()
    console.print(
        Panel(
            f"[bold bright_green]{title}[/bold bright_green]\n[dim]{subtitle}[/dim]",
            expand=False,
            border_style="bright_green",
        )
    )
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def create_progress() -> Progress:
    """Create a Rich spinner for long-running steps.

    Returns:
        A ``Progress`` instance suitable for use as a context manager.
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )
