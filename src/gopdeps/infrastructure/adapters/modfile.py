"""Module marker file parsing.

Reads the module directive of a go.mod / gop.mod file:

    module example.com/app
    module "example.com/app"
    module (
        example.com/app
    )

Everything else in the file (go, require, replace, ...) is ignored.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from gopdeps.domain.exceptions.module import ModFileError
from gopdeps.domain.model.module import Module
from gopdeps.infrastructure.analyzers.literal import unquote

logger = logging.getLogger(__name__)

# Lookup order: a Go+ marker wins over a Go marker in the same directory
MOD_FILE_NAMES = ("gop.mod", "go.mod")

_DIRECTIVE = re.compile(r"^(?P<verb>[A-Za-z_]+)\s*(?P<rest>.*)$")


def parse_mod_file(path: Path) -> Module:
    """Read a module marker file.

    Args:
        path: go.mod or gop.mod file

    Returns:
        Module rooted at the file's directory

    Raises:
        ModFileError: If file is unreadable or has no valid module directive
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ModFileError(path, "file not found") from e
    except PermissionError as e:
        raise ModFileError(path, "permission denied") from e
    except UnicodeDecodeError as e:
        raise ModFileError(path, f"unsupported encoding: {e}") from e
    except OSError as e:
        raise ModFileError(path, f"cannot read file: {e.strerror or e}") from e

    module_path = parse_module_directive(text, path)
    try:
        module = Module(path=module_path, dir=path.parent, mod_file=path)
    except ValueError as e:
        raise ModFileError(path, str(e)) from e

    logger.debug("module %s declared in %s", module.path, path)
    return module


def parse_module_directive(text: str, path: Path) -> str:
    """Extract the module path from mod file content.

    Args:
        text: Mod file content
        path: Mod file path (for error messages)

    Returns:
        Module path, unquoted

    Raises:
        ModFileError: If the directive is missing, duplicated or malformed
    """
    found: list[tuple[int, str]] = []
    block: str | None = None

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = _strip_comment(raw).strip()
        if not line:
            continue

        if block is not None:
            if line == ")":
                block = None
            elif block == "module":
                found.append((lineno, line))
            continue

        match = _DIRECTIVE.match(line)
        if match is None:
            continue

        verb, rest = match["verb"], match["rest"].strip()
        if rest == "(":
            block = verb
        elif verb == "module":
            found.append((lineno, rest))

    if block is not None:
        raise ModFileError(path, f"unterminated {block} block")
    if not found:
        raise ModFileError(path, "no module directive")
    if len(found) > 1:
        raise ModFileError(path, f"repeated module directive at line {found[1][0]}")

    lineno, value = found[0]
    return _module_path(value, lineno, path)


def _module_path(value: str, lineno: int, path: Path) -> str:
    if not value:
        raise ModFileError(path, f"line {lineno}: missing module path")

    if value[0] in "\"`":
        try:
            return unquote(value)
        except ValueError as e:
            raise ModFileError(path, f"line {lineno}: invalid quoted module path: {e}") from e

    if len(value.split()) != 1:
        raise ModFileError(path, f"line {lineno}: unexpected text after module path")
    return value


def _strip_comment(line: str) -> str:
    index = line.find("//")
    return line if index < 0 else line[:index]
