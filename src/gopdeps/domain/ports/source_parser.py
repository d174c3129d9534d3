"""Source parser port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from gopdeps.domain.model.import_spec import ImportSpec


class SourceParserPort(ABC):
    """Port for parsing the import header of a source file.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def parse_imports(self, path: Path) -> tuple[ImportSpec, ...]:
        """Parse package clause and import declarations of one file.

        The file body after the import declarations is not parsed.
        Every returned ImportSpec.path is a valid string literal token.

        Args:
            path: Source file path

        Returns:
            Import declarations in source order

        Raises:
            ParsingError: If the file cannot be read or its header is malformed
        """
        ...
