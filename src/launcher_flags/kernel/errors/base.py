"""Root error class for the launcher_flags error hierarchy.

Every error carries a machine-readable ``code`` and a ``detail`` dict that
names the flag or setting involved, so a failure can be logged as one
structured event (``_log.warning("...", error=exc.to_dict())``).
"""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Context about the flag or setting involved.
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
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def with_detail(self, **context: Any) -> "BaseError":
        """Add *context* to :attr:`detail` and return ``self`` for re-raising.

        Keys already present are kept, so the innermost raiser wins.
        """
        for key, value in context.items():
            self.detail.setdefault(key, value)
        return self

    def __str__(self) -> str:
        if not self.detail:
            return f"[{self.code}] {self.message}"
        context = ", ".join(f"{key}={value!r}" for key, value in self.detail.items())
        return f"[{self.code}] {self.message} ({context})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain dict for structured log events; ``cause`` only when set."""
        payload: dict[str, Any] = {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
