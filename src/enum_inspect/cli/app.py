"""CLI application entry point and command routing for enum-inspect.

This module is the **sole error boundary** for the entire application.
It catches :class:`~enum_inspect.exceptions.EnumInspectError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  service and infrastructure layers.
* ``print()`` is forbidden outside the CLI layer; the console proxy is
  used exclusively.
* This module is the only place that configures logging and translates
  between the domain world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from enum_inspect.cli import exit_codes
from enum_inspect.cli.console import Part, console
from enum_inspect.exceptions import EnumInspectError, EnumTypeError
from enum_inspect.version import __version__

_LOG_LEVELS: tuple[str, ...] = ("debug", "info", "warning", "error", "critical")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Commands:
    * ``enum-inspect decompose TARGET VALUE``
    * ``enum-inspect list TARGET [--split-flags]``
    * ``enum-inspect parse TARGET TEXT [--default NAME]``
    * ``enum-inspect doctor``
    * ``enum-inspect --version``
    """
    parser = argparse.ArgumentParser(
        prog="enum-inspect",
        description="Inspect Python enum types and split flag values.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default="warning",
        help="Logging level for diagnostic output (default: warning).",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    decompose = commands.add_parser(
        "decompose",
        help="Split a combined value into named flags.",
    )
    decompose.add_argument("target", help="Enum class as package.module:Name.")
    decompose.add_argument("value", help="Combined value, e.g. 5, 0x10 or 0b101.")

    listing = commands.add_parser("list", help="List every named value.")
    listing.add_argument("target", help="Enum class as package.module:Name.")
    listing.add_argument(
        "--split-flags",
        action="store_true",
        help="Describe combined flag members through their parts.",
    )

    parse = commands.add_parser("parse", help="Resolve a name, ignoring case.")
    parse.add_argument("target", help="Enum class as package.module:Name.")
    parse.add_argument("text", help="Name to look up.")
    parse.add_argument(
        "--default",
        default=None,
        metavar="NAME",
        help="Member returned when TEXT matches nothing.",
    )

    commands.add_parser("doctor", help="Run environment diagnostics.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_decompose(target: str, value: str) -> int:
    """Render the flags that make up *value* for the enum *target*."""
    from enum_inspect import default_service
    from enum_inspect.core.models import EnumValue, NoNamedZero
    from enum_inspect.infra.loader import load_enum_type

    service = default_service()
    enum_type = load_enum_type(target)
    result = service.get_flag_list(enum_type, value)

    rows: list[list[Part]] = []
    for entry in result:
        if isinstance(entry, EnumValue):
            rows.append([entry.name, str(entry.value), hex(entry.value)])
        elif isinstance(entry, NoNamedZero):
            rows.append([("(no named zero)", "dim"), "0", "0x0"])
        else:
            rows.append([("(unrecognised bits)", "yellow"), str(entry.value), hex(entry.value)])

    console.table(
        f"{enum_type.__name__} {result.query} ({result.query:#x})",
        ("Name", "Value", "Hex"),
        rows,
    )
    return exit_codes.SUCCESS


def _handle_list(target: str, split_flags: bool) -> int:
    """Render the full catalog of the enum *target*."""
    from enum_inspect import default_service
    from enum_inspect.infra.loader import load_enum_type

    service = default_service()
    enum_type = load_enum_type(target)
    catalog = service.get_catalog(enum_type)
    descriptions = service.get_descriptions(enum_type, split_flags=split_flags)

    rows = [
        [entry.name, str(entry.value), hex(entry.value), text]
        for entry, text in zip(catalog.entries, descriptions)
    ]
    kind = "flags" if catalog.is_flags else "enum"
    console.table(
        f"{catalog.type_name} ({kind}, {len(catalog)} names)",
        ("Name", "Value", "Hex", "Description"),
        rows,
    )
    return exit_codes.SUCCESS


def _handle_parse(target: str, text: str, default_name: str | None) -> int:
    """Resolve *text* against the enum *target*, falling back to a default."""
    from enum_inspect import default_service
    from enum_inspect.infra.loader import load_enum_type

    service = default_service()
    enum_type = load_enum_type(target)

    default = None
    if default_name is not None:
        default = service.parse(enum_type, default_name, None)
        if default is None:
            raise EnumTypeError(
                f"{enum_type.__name__} has no member named {default_name!r}.",
                hint="--default must name a member of the enum.",
            )

    member = service.parse(enum_type, text, default)
    if member is None:
        console.message((f"No member of {enum_type.__name__} named {text!r}.", "yellow"))
        return exit_codes.GENERAL_ERROR

    console.message((str(member.name), "bold"), f" = {member.value}")
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from enum_inspect.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the enum-inspect CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper())

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command == "decompose":
        return _handle_decompose(args.target, args.value)
    if args.command == "list":
        return _handle_list(args.target, args.split_flags)
    if args.command == "parse":
        return _handle_parse(args.target, args.text, args.default)
    return _handle_doctor()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except EnumInspectError as exc:
        console.message(("Error:", "bold red"), f" {exc}")
        if exc.hint:
            console.message(("Hint:", "yellow"), f" {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.message(
            ("Unexpected error.", "bold red"),
            " Please report this issue.\n",
            f"  {type(exc).__name__}: {exc}",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
