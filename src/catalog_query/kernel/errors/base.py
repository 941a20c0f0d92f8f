"""BaseError: root of the catalog_query error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Exception carrying a stable ``code`` and structured ``detail``.

    ``str(error)`` is a single JSON line, so an error dropped straight into a
    log message stays machine-readable, e.g.
    ``{"code": "not_found", "message": "Product 'p1' not found", "detail": {}}``.

    Subclasses set ``default_code``; callers may override it per instance.
    ``cause`` is also chained as ``__cause__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["BaseError"]
