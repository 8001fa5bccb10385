"""Allow ``python -m enum_inspect`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m enum_inspect`` behaves identically to the
``enum-inspect`` console script.
"""

from __future__ import annotations

from enum_inspect.cli.app import cli

if __name__ == "__main__":
    cli()
