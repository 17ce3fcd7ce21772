"""Error hierarchy for the scriptdiff package.

Every public error class inherits from ScriptDiffError. Each carries a
machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, an optional structured ``context`` dict, and an optional
``cause`` (chained exception).

The line diff engine itself never raises: these errors belong to the
text-level facade and the renderers that sit around it.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error the package can raise."""

    INPUT_TOO_LARGE = "INPUT_TOO_LARGE"
    RENDER_ERROR = "RENDER_ERROR"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class ScriptDiffError(Exception):
    """Base exception for all scriptdiff errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
        Keys are documented per subclass.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# Facade / presentation errors
# ---------------------------------------------------------------------------

class ScriptDiffInputTooLargeError(ScriptDiffError):
    """One side of a comparison has more lines than ``max_lines`` allows.

    Context keys: ``side`` (``"original"`` or ``"updated"``), ``lines``,
    ``max_lines``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INPUT_TOO_LARGE,
            message=message,
            context=context,
            cause=cause,
        )


class ScriptDiffRenderError(ScriptDiffError):
    """A renderer was handed something that is not an :class:`EditOp`.

    Context keys: ``index``, ``type``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.RENDER_ERROR,
            message=message,
            context=context,
            cause=cause,
        )
