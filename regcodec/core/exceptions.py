# SPDX-License-Identifier: LGPL-3.0-or-later
# regcodec/core/exceptions.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

# Windows error codes carried by codec failures.
ERROR_INVALID_BLOCK = 9
ERROR_BAD_FILE_TYPE = 222
ERROR_INVALID_DATA = 13


def _safe_int(x: Any, default: int = 1) -> int:
    try:
        return int(x)
    except Exception:
        return default


def _clamp_error_code(code: int) -> int:
    # Win32 error codes fit in 16 bits for everything this package reports.
    if code < 0:
        return 1
    if code > 0xFFFF:
        return 0xFFFF
    return code


def _one_line(s: str, limit: int = 600) -> str:
    s = (s or "").strip().replace("\r", " ").replace("\n", " ")
    s = " ".join(s.split())
    return s if len(s) <= limit else (s[: limit - 3] + "...")


def _format_context_compact(ctx: Dict[str, Any]) -> str:
    return ", ".join(f"{k}={ctx[k]!r}" for k in sorted(ctx.keys()))


@dataclass(eq=False)
class RegCodecError(Exception):
    """
    Base error for the registry value codec.

      - `code` is the Windows error code the native API would report
      - `msg` is a single readable line
      - `context` holds structured details (kind, expected kinds, ...)
    """
    code: int = 1
    msg: str = "error"
    cause: Optional[BaseException] = None
    context: Optional[Dict[str, Any]] = None

    def __post_init__(self) -> None:
        self.code = _clamp_error_code(_safe_int(self.code, default=1))
        self.msg = _one_line(self.msg) or self.__class__.__name__
        super().__init__(self.msg)
        self.args = (self.msg,)
        if self.context is None:
            self.context = {}

    def with_context(self, **ctx: Any) -> "RegCodecError":
        if self.context is None:
            self.context = {}
        self.context.update(ctx)
        return self

    def user_message(self, *, include_context: bool = False, include_cause: bool = False) -> str:
        parts = [self.msg or self.__class__.__name__]

        if include_context and self.context:
            parts.append(f"[{_one_line(_format_context_compact(self.context))}]")

        if include_cause and self.cause is not None:
            parts.append(f"(cause: {type(self.cause).__name__}: {_one_line(str(self.cause))})")

        return " ".join(parts)

    def __str__(self) -> str:
        return self.user_message()

    def to_dict(self, *, include_cause: bool = False) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "type": self.__class__.__name__,
            "code": self.code,
            "message": self.msg,
            "context": dict(self.context or {}),
        }
        if include_cause and self.cause is not None:
            d["cause"] = {"type": type(self.cause).__name__, "message": _one_line(str(self.cause))}
        return d


@dataclass(eq=False)
class UnsupportedType(RegCodecError):
    """The value's type tag is not accepted by the requested decode."""
    code: int = ERROR_BAD_FILE_TYPE
    msg: str = "registry value has an unsupported type"


@dataclass(eq=False)
class InvalidEncoding(RegCodecError):
    """The type tag was accepted but the words are not valid data for it."""
    code: int = ERROR_INVALID_BLOCK
    msg: str = "registry value data is not validly encoded"


@dataclass(eq=False)
class ConfigError(RegCodecError):
    code: int = ERROR_INVALID_DATA
    msg: str = "invalid configuration"


def format_exception_for_cli(e: BaseException, *, verbose: int = 0) -> str:
    """
    One-liner rendering of an exception.

    verbose=0: just message
    verbose=1: message + compact context (if any)
    verbose>=2: message + context + cause
    """
    if isinstance(e, RegCodecError):
        return e.user_message(
            include_context=(verbose >= 1),
            include_cause=(verbose >= 2),
        )

    if verbose >= 2:
        return f"{type(e).__name__}: {_one_line(str(e))}"
    return _one_line(str(e)) or type(e).__name__
