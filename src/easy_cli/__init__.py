"""easy-cli — turn a directory of annotated scripts into a command line.

Scripts describe themselves with ``# @tag`` comment lines; easy-cli
scans them into a command model and dispatches to the scripts.
"""

from easy_cli.version import __version__

__all__: list[str] = ["__version__"]
