"""Allow ``python -m clivo`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m clivo`` behaves identically to the ``clivo`` console script.
"""

from __future__ import annotations

from clivo.cli.app import cli

if __name__ == "__main__":
    cli()
