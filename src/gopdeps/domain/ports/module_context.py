"""Module context port."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ModuleContext(Protocol):
    """Identity of the module owning the scanned files.

    Implementations must be immutable for the lifetime of a parser.
    Module satisfies this Protocol.
    """

    @property
    def path(self) -> str:
        """Canonical root import path of the module."""
        ...
