"""Allow ``python -m toodles`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m toodles`` behaves identically to the ``toodles``
console script.
"""

from __future__ import annotations

from toodles.cli.app import cli

if __name__ == "__main__":
    cli()
