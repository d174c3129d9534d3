"""Invariant faults."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gopdeps.domain.exceptions.base import GopDepsFault

if TYPE_CHECKING:
    from gopdeps.domain.model.token import Token


class LiteralDecodeFault(GopDepsFault):
    """Import path token is not a decodable string literal.

    The header parser only hands over validated string literals,
    so this means the parser itself is broken. Do not catch.

    Attributes:
        token: Offending token
        reason: What was wrong with it
    """

    def __init__(self, token: Token, reason: str) -> None:
        if token is None:
            raise TypeError("token must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.token = token
        self.reason = reason
        super().__init__(f"cannot decode {token.kind.name} token {token.text!r}: {reason}")
