"""PawPicker entry point — interactive terminal file picker.

Renders the remote listing with Rich after every state change and reads
one command per line:

  <n>    open entry n (enter a directory, or pick a file in file mode)
  u      go up to the parent directory
  r      jump to the filesystem root
  b<i>   jump to breadcrumb i
  .      choose the current directory (dir mode)
  q      cancel
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from pawpicker.config import Settings, get_settings
from pawpicker.logging_setup import setup_logging
from pawpicker.models import EntryType, NavigationState, SelectionMode
from pawpicker.navigator import Navigator
from pawpicker.transport import FilesClient

logger = logging.getLogger(__name__)

console = Console()


def render(navigator: Navigator, state: NavigationState) -> None:
    """Print the breadcrumb trail and the current listing."""
    trail = " / ".join(
        f"[{i}] {escape(crumb.name)}" for i, crumb in enumerate(navigator.breadcrumbs)
    )
    console.print(f"[bold cyan]/[/] {trail}", highlight=False)

    if state.loading:
        console.print("[dim]Loading…[/]")
        return
    if state.error:
        console.print(f"[bold red]{escape(state.error)}[/]")
        return

    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Type")
    for i, entry in enumerate(state.entries):
        is_dir = entry.type is EntryType.DIRECTORY
        name = escape(f"{entry.name}/" if is_dir else entry.name)
        if is_dir:
            name = f"[blue]{name}[/]"
        table.add_row(str(i), name, "dir" if is_dir else "file")
    if not state.entries:
        console.print("[dim](empty)[/]")
    else:
        console.print(table)


def _help_line(navigator: Navigator) -> str:
    parts = ["<n> open", "r root", "b<i> crumb", "q cancel"]
    if navigator.can_go_up:
        parts.insert(1, "u up")
    if navigator.can_confirm:
        parts.insert(-1, ". choose this directory")
    return " · ".join(parts)


async def handle_command(navigator: Navigator, command: str) -> None:
    """Apply one user command to *navigator*."""
    command = command.strip()
    if not command:
        return
    if command == "q":
        await navigator.dismiss()
    elif command == "u":
        await navigator.go_up()
    elif command == "r":
        await navigator.go_root()
    elif command == ".":
        await navigator.confirm()
    elif command.startswith("b") and command[1:].isdigit():
        try:
            await navigator.go_to_crumb(int(command[1:]))
        except IndexError:
            console.print("[yellow]No such breadcrumb[/]")
    elif command.isdigit():
        index = int(command)
        entries = navigator.state.entries
        if index >= len(entries):
            console.print("[yellow]No such entry[/]")
            return
        await navigator.select_entry(entries[index])
    else:
        console.print(f"[yellow]Unknown command: {command}[/]")


async def run_picker(settings: Settings, mode: SelectionMode, path: str) -> int:
    """Run the interactive picker. Returns the process exit code."""
    outcome: dict[str, object] = {}

    def on_complete(*args: str) -> None:
        outcome["selection"] = args

    def on_dismiss() -> None:
        outcome["dismissed"] = True

    async with FilesClient.from_settings(settings) as client:
        navigator = Navigator(
            client,
            mode,
            on_complete=on_complete,
            on_dismiss=on_dismiss,
            initial_path=path,
        )
        navigator.subscribe(lambda state: render(navigator, state))
        await navigator.initialize()

        while navigator.alive:
            try:
                command = await asyncio.to_thread(
                    Prompt.ask, f"[dim]{_help_line(navigator)}[/]"
                )
            except (EOFError, KeyboardInterrupt):
                await navigator.dismiss()
                break
            await handle_command(navigator, command)

    selection = outcome.get("selection")
    if not selection:
        console.print("[dim]Cancelled[/]")
        return 1

    if len(selection) == 1:
        print(selection[0])
    else:
        file_path, content = selection
        console.print(f"[bold]{escape(file_path)}[/]", highlight=False)
        sys.stdout.write(content)
        if content and not content.endswith("\n"):
            sys.stdout.write("\n")
    return 0


def main() -> None:
    """Main entry point."""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Pick a directory or a file on a remote file server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pawpicker                             Pick a directory starting at ~
  pawpicker --mode file                 Pick a file and print its content
  pawpicker --server http://nas:8888/api --path /srv
""",
    )
    parser.add_argument("--server", default=settings.server_url, help="File server base URL")
    parser.add_argument("--token", default=settings.api_token, help="Bearer token")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in SelectionMode],
        default=SelectionMode.DIRECTORY.value,
        help="What to pick (default: dir)",
    )
    parser.add_argument("--path", default=settings.initial_path, help="Starting path")
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.request_timeout,
        help="Request timeout in seconds (0 disables)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args()

    setup_logging(level="DEBUG" if args.verbose else settings.log_level)

    run_settings = settings.model_copy(
        update={
            "server_url": args.server,
            "api_token": args.token,
            "request_timeout": args.timeout or None,
        }
    )
    try:
        code = asyncio.run(run_picker(run_settings, SelectionMode(args.mode), args.path))
    except KeyboardInterrupt:
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
