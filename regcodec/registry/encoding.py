# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# regcodec/registry/encoding.py
"""
Registry value encoding: str / u32 / u64 -> RawValue.

Word layouts mirror decoding.py exactly. Strings are emitted without a
terminator; the transport appends it when serializing for storage.
"""
from __future__ import annotations

import struct

from .constants import REG_DWORD, REG_QWORD, REG_SZ
from .value import RawValue

U32_MAX = 0xFFFF_FFFF
U64_MAX = 0xFFFF_FFFF_FFFF_FFFF


def _check_range(v: int, hi: int, what: str) -> int:
    if isinstance(v, bool) or not isinstance(v, int):
        raise TypeError(f"{what} value must be an int, got {type(v).__name__}")
    if not 0 <= v <= hi:
        raise ValueError(f"{v} does not fit in an unsigned {what}")
    return v


def encode_str(s: str) -> RawValue:
    """Encode text as REG_SZ; always REG_SZ, never REG_MULTI_SZ."""
    # surrogatepass keeps lone surrogates as plain code units
    data = s.encode("utf-16-le", errors="surrogatepass")
    words = struct.unpack(f"<{len(data) // 2}H", data)
    return RawValue(words=words, kind=REG_SZ)


def encode_u32(v: int) -> RawValue:
    v = _check_range(v, U32_MAX, "u32")
    return RawValue(words=(v & 0xFFFF, (v >> 16) & 0xFFFF), kind=REG_DWORD)


def encode_u64(v: int) -> RawValue:
    v = _check_range(v, U64_MAX, "u64")
    return RawValue(
        words=(
            v & 0xFFFF,
            (v >> 16) & 0xFFFF,
            (v >> 32) & 0xFFFF,
            (v >> 48) & 0xFFFF,
        ),
        kind=REG_QWORD,
    )
