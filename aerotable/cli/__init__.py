"""AeroTable command-line interface package.

Supports ``python -m aerotable.cli`` as an alternative to the ``aerotable`` entry point.
"""

from aerotable.cli.main import cli, main

__all__ = ["cli", "main"]
