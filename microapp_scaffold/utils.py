"""Shared utility functions for the microapp scaffolder.

Provides async command execution, file-system helpers, and Rich-based console
reporting.  File writes are off-loaded to a worker thread so callers can await
them one by one from the asyncio loop.
"""

from __future__ import annotations

import asyncio
import os
import shlex
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: str | list[str],
    cwd: str | Path | None = None,
    timeout: int = 120,
    env: dict[str, str] | None = None,
) -> tuple[int, str, str]:
    """Run a command asynchronously and capture its output.

    Args:
        cmd: Command string (split with ``shlex``) or list of arguments.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
        env: Optional extra environment variables merged on top of ``os.environ``.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  A timeout is reported as
        return code ``-1``.

    Raises:
        FileNotFoundError: If the executable does not exist.
    """
    args = shlex.split(cmd) if isinstance(cmd, str) else list(cmd)
    merged_env = {**os.environ, **env} if env else None

    process = await asyncio.create_subprocess_exec(
        *args,
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
        return (-1, "", f"Command timed out after {timeout}s: {' '.join(args)}")

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Returns:
        The directory as a ``Path``.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


async def write_file(path: str | Path, content: str) -> Path:
    """Write *content* to *path* (overwriting) from a worker thread."""
    out = Path(path)
    await asyncio.to_thread(_write_file, out, content)
    return out


def list_subdirectories(path: str | Path) -> list[str]:
    """Return the sorted names of the immediate subdirectories of *path*.

    Raises:
        FileNotFoundError: If *path* does not exist or is not a directory.
    """
    root = Path(path)
    if not root.is_dir():
        raise FileNotFoundError(root)
    return sorted(entry.name for entry in root.iterdir() if entry.is_dir())


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str) -> None:
    """Print a full-width rule announcing a command."""
    console.print()
    console.print(Rule(f"[bold bright_blue] {escape(title)} [/bold bright_blue]", style="bright_blue"))
    console.print()


def print_step(message: str) -> None:
    """Print a blue progress message."""
    console.print(f"[blue]{escape(message)}[/blue]", soft_wrap=True)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]", soft_wrap=True)


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]", soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]", soft_wrap=True)


def print_code(snippet: str) -> None:
    """Print a literal code fragment without markup interpretation."""
    console.print(snippet, style="cyan", markup=False, highlight=False, soft_wrap=True)


def print_listing(title: str, entries: list[tuple[str, str]], empty: str) -> None:
    """Print a two-column table, or a dim *empty* line when there is nothing to show.

    Args:
        title: Table title.
        entries: ``(name, hint)`` rows.
        empty: Message shown instead of an empty table.
    """
    if not entries:
        console.print(f"[bold]{escape(title)}[/bold]")
        console.print(f"[dim]   {escape(empty)}[/dim]")
        console.print()
        return

    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Name", style="green", no_wrap=True)
    table.add_column("Hint", style="dim")
    for name, hint in entries:
        table.add_row(name, hint)

    console.print(table)
    console.print()
