"""kvctl — connection front end for a distributed key-value store cluster.

Resolves global connection flags into a dial-ready configuration and
reads required arguments from the command line or standard input.
"""

from kvctl.version import __version__

__all__: list[str] = ["__version__"]
