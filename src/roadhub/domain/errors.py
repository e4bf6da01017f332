"""Domain exceptions."""

from __future__ import annotations

from typing import Any


class InvalidInputError(ValueError):
    """Road lists are mismatched or name a city outside ``[0, N]``.

    Carries a machine-readable *code* and *detail* so the service layer can
    turn it into a ``ServiceError`` without parsing the message.
    """

    code = "INVALID_INPUT"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail
