"""Command-line entry point for the microapp scaffolder.

Usage::

    microapp create fitness --type both
    microapp create            # prompts for the name and type
    microapp list
    microapp add-tab news
    microapp --root ../monorepo list
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from rich.prompt import Prompt

from microapp_scaffold.config import Config
from microapp_scaffold.errors import InvalidNameError, ScaffoldError
from microapp_scaffold.scaffolder import (
    MicroappDescriptor,
    MicroappScaffolder,
    NavigationRegistrar,
    ScaffoldResult,
    TabRegistration,
    UnitKind,
    WorkspaceInspector,
    WritePolicy,
    normalize_name,
)
from microapp_scaffold.utils import (
    console,
    print_code,
    print_error,
    print_header,
    print_listing,
    print_success,
    print_warning,
)

KIND_CHOICES = [kind.value for kind in UnitKind]


# ---------------------------------------------------------------------------
# Interactive collaborator
# ---------------------------------------------------------------------------


def prompt_for_unit(kind: str | None) -> tuple[str, str]:
    """Ask for a unit name (re-prompting until valid) and, if unset, a kind."""
    while True:
        name = Prompt.ask("What is the name of your microapp?", console=console)
        try:
            normalize_name(name)
            break
        except InvalidNameError as exc:
            print_warning(str(exc))

    if kind is None:
        kind = Prompt.ask(
            "What type of microapp do you want to create?",
            choices=KIND_CHOICES,
            default=UnitKind.BOTH.value,
            console=console,
        )
    return name, kind


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------


def print_registration(registration: TabRegistration) -> None:
    """Show the tab file and the fragment to paste into the host layout."""
    if registration.written:
        print_success(f"Created {registration.name} tab: {registration.path}")
    else:
        print_warning(f"Kept existing {registration.name} tab: {registration.path}")
    print_warning(f"Add this to your main app's {registration.layout_path}:")
    print_code(registration.instruction)


def print_next_steps(result: ScaffoldResult, config: Config) -> None:
    descriptor = result.descriptor
    console.print()
    print_success(f"Microapp '{descriptor.canonical_name}' created successfully!")
    if result.skipped:
        print_warning(f"Kept {len(result.skipped)} existing file(s) untouched.")
    if result.app_path is not None:
        console.print(
            f"[cyan]Standalone app:[/cyan] {config.apps_dir}/{descriptor.app_dir}", soft_wrap=True
        )
        console.print(
            f"[dim]   -> Run: yarn workspace {descriptor.app_dir} start[/dim]", soft_wrap=True
        )
    if result.package_path is not None:
        console.print(
            f"[cyan]Microapp package:[/cyan] {config.packages_dir}/{descriptor.package_dir}",
            soft_wrap=True,
        )
    console.print()
    console.print("[yellow]Next steps:[/yellow]")
    console.print(
        f"   1. Add the tab to {config.apps_dir}/{config.host_app}/app/(tabs)/_layout.tsx",
        soft_wrap=True,
    )
    console.print("   2. Run the main app: yarn dev")
    console.print(f"   3. Run standalone: yarn workspace {descriptor.app_dir} start", soft_wrap=True)
    console.print("   4. Edit the generated files to add functionality")
    console.print()


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


async def _create(
    config: Config,
    descriptor: MicroappDescriptor,
    *,
    skip_install: bool,
    keep_existing: bool,
) -> ScaffoldResult:
    policy = WritePolicy.SKIP_EXISTING if keep_existing else WritePolicy.OVERWRITE
    scaffolder = MicroappScaffolder(config, write_policy=policy)
    result = await scaffolder.scaffold(descriptor)
    if result.registration is not None:
        print_registration(result.registration)
    if not skip_install:
        await scaffolder.install_dependencies()
    return result


def cmd_create(args: argparse.Namespace, config: Config) -> int:
    name, kind = args.name, args.type
    if name is None:
        try:
            name, kind = prompt_for_unit(kind)
        except (EOFError, KeyboardInterrupt):
            print_error("Error creating microapp: a name is required")
            return 1

    try:
        descriptor = MicroappDescriptor.from_name(name, kind or UnitKind.BOTH)
    except InvalidNameError as exc:
        print_error(f"Error creating microapp: {exc}")
        return 1

    print_header(f"Creating microapp: {descriptor.canonical_name}")
    try:
        result = asyncio.run(
            _create(
                config,
                descriptor,
                skip_install=args.skip_install,
                keep_existing=args.keep_existing,
            )
        )
    except ScaffoldError as exc:
        print_error(f"Error creating microapp ({exc.stage.value}): {exc.cause}")
        return 1

    print_next_steps(result, config)
    return 0


def cmd_list(args: argparse.Namespace, config: Config) -> int:
    snapshot = WorkspaceInspector(config).list_units()
    console.print()
    print_listing(
        "Standalone Apps",
        [(app, f"yarn workspace {app} start") for app in snapshot.standalone_shells],
        "No microapps found",
    )
    print_listing(
        "Microapp Packages",
        [(pkg, f"{config.packages_dir}/{pkg}") for pkg in snapshot.unit_packages],
        "No microapp packages found",
    )
    return 0


def cmd_add_tab(args: argparse.Namespace, config: Config) -> int:
    try:
        descriptor = MicroappDescriptor.from_name(args.name)
    except InvalidNameError as exc:
        print_error(f"Error adding tab: {exc}")
        return 1

    registrar = NavigationRegistrar(config)
    try:
        registration = asyncio.run(registrar.register_tab(descriptor))
    except ScaffoldError as exc:
        print_error(f"Error adding tab ({exc.stage.value}): {exc.cause}")
        return 1

    print_registration(registration)
    return 0


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="microapp",
        description="Generate microapps in a multi-package workspace",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  microapp create fitness --type both\n"
            "  microapp create banking --type package --skip-install\n"
            "  microapp list\n"
            "  microapp add-tab news\n"
        ),
    )
    parser.add_argument(
        "--root",
        default=None,
        help="Workspace root directory (default: $MICROAPP_ROOT or the current directory)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    create = subparsers.add_parser("create", help="Create a new microapp")
    create.add_argument("name", nargs="?", default=None, help="Name of the microapp")
    create.add_argument(
        "--type", "-t",
        choices=KIND_CHOICES,
        default=None,
        help="Type of microapp (default: both)",
    )
    create.add_argument(
        "--skip-install", "-s",
        action="store_true",
        help="Skip installing workspace dependencies",
    )
    create.add_argument(
        "--keep-existing",
        action="store_true",
        help="Leave files that already exist untouched instead of overwriting them",
    )
    create.set_defaults(handler=cmd_create)

    listing = subparsers.add_parser("list", help="List all microapps in the workspace")
    listing.set_defaults(handler=cmd_list)

    add_tab = subparsers.add_parser("add-tab", help="Add a microapp tab to the main app")
    add_tab.add_argument("name", help="Name of the microapp")
    add_tab.set_defaults(handler=cmd_add_tab)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``microapp`` / ``python -m microapp_scaffold``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = Config.from_env(workspace_root=Path(args.root) if args.root else None)
    code = args.handler(args, config)
    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
