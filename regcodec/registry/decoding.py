# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# regcodec/registry/decoding.py
"""
Registry value decoding: RawValue -> str / u32 / u64.

Each host type has its own decoder and its own list of accepted kinds.
A kind outside that list raises UnsupportedType before any word is read.
"""
from __future__ import annotations

import logging
import struct
from typing import Iterable

from ..core.exceptions import InvalidEncoding, UnsupportedType
from .constants import REG_DWORD, REG_MULTI_SZ, REG_QWORD, STRING_KINDS, RegType, reg_type_name
from .value import RawValue

logger = logging.getLogger(__name__)

MULTI_SZ_SEPARATOR = "\n"


def _reject(raw: RawValue, target: str, accepted: Iterable[RegType]) -> UnsupportedType:
    expected = sorted(reg_type_name(k) for k in accepted)
    logger.debug("Refusing to decode %s as %s (accepted: %s)", raw.kind_name, target, ", ".join(expected))
    return UnsupportedType(
        msg=f"cannot decode {raw.kind_name} value as {target}",
        context={"kind": raw.kind, "kind_name": raw.kind_name, "expected": expected},
    )


def _utf16_text(raw: RawValue) -> str:
    ctx = {"kind": raw.kind, "kind_name": raw.kind_name, "units": len(raw.words)}
    try:
        data = struct.pack(f"<{len(raw.words)}H", *raw.words)
    except struct.error as e:
        raise InvalidEncoding(msg="registry string contains a unit wider than 16 bits", cause=e, context=ctx) from e
    try:
        return data.decode("utf-16-le")
    except UnicodeDecodeError as e:
        raise InvalidEncoding(msg="registry string is not valid UTF-16", cause=e, context=ctx) from e


def decode_str(raw: RawValue, *, separator: str = MULTI_SZ_SEPARATOR) -> str:
    """
    Decode a REG_SZ, REG_EXPAND_SZ or REG_MULTI_SZ value.

    The last unit is the NUL terminator and is always dropped, whether or
    not it is actually NUL. For REG_MULTI_SZ a second trailing NUL (the
    last element's own terminator) is deliberately dropped as well, rather
    than popping only the one terminator unit and leaving a trailing
    separator. The NULs between elements become `separator`, so
    "a\\0b\\0\\0" decodes to "a\\nb", not "a\\nb\\n". Expanding %VARS% is
    left to the caller.

    Raises:
        UnsupportedType: kind is not a string kind
        InvalidEncoding: words are not valid UTF-16
    """
    if raw.kind not in STRING_KINDS:
        raise _reject(raw, "str", STRING_KINDS)

    s = _utf16_text(raw)[:-1]
    if raw.kind == REG_MULTI_SZ:
        if s.endswith("\0"):
            s = s[:-1]
        s = s.replace("\0", separator)
    return s


def decode_u32(raw: RawValue) -> int:
    """
    Decode a REG_DWORD (little-endian) value from its first two words.

    REG_DWORD_BIG_ENDIAN is rejected.
    """
    if raw.kind != REG_DWORD:
        raise _reject(raw, "u32", (REG_DWORD,))
    w = raw.words
    return (w[1] << 16) | w[0]


def decode_u64(raw: RawValue) -> int:
    """Decode a REG_QWORD value from its first four words, word[0] lowest."""
    if raw.kind != REG_QWORD:
        raise _reject(raw, "u64", (REG_QWORD,))
    w = raw.words
    return (w[3] << 48) | (w[2] << 32) | (w[1] << 16) | w[0]
