"""``enum-inspect doctor`` — environment diagnostics command.

Gathers system information and renders a table summarising whether the
runtime environment satisfies enum-inspect's requirements.

This module lives in the CLI layer.  No business logic resides here; it
purely collects and displays diagnostic data.
"""

from __future__ import annotations

import platform
import sys
from importlib.metadata import PackageNotFoundError, version

from enum_inspect.cli import exit_codes
from enum_inspect.cli.console import console, rich_available
from enum_inspect.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    major, minor = sys.version_info[:2]
    ok = (major, minor) >= (3, 10)
    status = "OK" if ok else "FAIL (>=3.10 required)"
    return "Python", version, status


def _rich_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Rich row.

    Rich is optional: without it output is plain text, so a missing
    install is a warning rather than a failure.
    """
    if not rich_available():
        return "rich", "NOT INSTALLED", "WARN"
    try:
        return "rich", version("rich"), "OK"
    except PackageNotFoundError:
        return "rich", "unknown", "OK"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    release = platform.release()
    machine = platform.machine()
    value = f"{system_display} {release} ({machine})"
    return "OS", value, "OK"


def _package_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the enum-inspect version row."""
    return "enum-inspect", __version__, "OK"


def _status_style(status: str) -> str:
    """Return the Rich style used to render a status cell."""
    if "FAIL" in status:
        return "red"
    if "WARN" in status:
        return "yellow"
    return "green"


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    checks = [
        _package_version_check(),
        _python_version_check(),
        _rich_check(),
        _os_check(),
    ]

    has_failure = any("FAIL" in status for _, _, status in checks)

    console.table(
        "enum-inspect doctor",
        ("Component", "Value", "Status"),
        [[label, value, (status, _status_style(status))] for label, value, status in checks],
    )

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
