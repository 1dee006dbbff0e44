"""Infrastructure layer — external system integration.

This layer wraps all interaction with ``ssl`` and the filesystem.  Every
raw exception must be caught here and re-raised as a
:class:`~kvctl.exceptions.KvctlError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from kvctl.infra.tls_loader import SSLContextLoader

__all__: list[str] = [
    "SSLContextLoader",
]
