"""Root error class for the ingress-auth error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Arbitrary extra context (serialisable dict).
        cause: Original exception that triggered this error.
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
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """Return a JSON-serialisable single-line string representation."""
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for logging)."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


class NotRequestedError(BaseError):
    """No recognised annotation is present on the route.

    This is an opt-out signal rather than a failure: callers should treat
    the route as not requesting the feature the parser handles.
    """

    default_code = "missing_annotations"

    def __init__(self, message: str = "ingress rule without annotations", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


def is_not_requested(exc: BaseException | None) -> bool:
    """Return ``True`` when *exc* is the opt-out signal itself.

    Errors that merely wrap a :class:`NotRequestedError` (a missing required
    annotation, for instance) are real failures and return ``False``.
    """
    return isinstance(exc, NotRequestedError)


__all__ = ["BaseError", "NotRequestedError", "is_not_requested"]
