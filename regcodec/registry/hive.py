# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# regcodec/registry/hive.py
"""
Transport-side helpers for hivex-style value dicts.

hivex (and the Win32 API) hand values around as byte buffers:

    {"key": "Start", "t": 4, "value": b"\\x03\\x00\\x00\\x00"}

These helpers turn such dicts into RawValue and back. Byte order and the
storage terminator are handled here, never by the codec functions.
"""
from __future__ import annotations

import logging
import struct
from typing import Any, Dict, Iterable, Mapping, Tuple

from ..core.exceptions import InvalidEncoding
from .constants import REG_EXPAND_SZ, REG_MULTI_SZ, REG_SZ
from .value import RawValue

logger = logging.getLogger(__name__)


def words_to_bytes(words: Iterable[int]) -> bytes:
    """Pack 16-bit words little-endian, two bytes per word."""
    w = tuple(words)
    return struct.pack(f"<{len(w)}H", *w)


def bytes_to_words(data: bytes) -> Tuple[int, ...]:
    """Split a little-endian byte buffer into 16-bit words."""
    b = bytes(data)
    if len(b) % 2:
        raise InvalidEncoding(
            msg="registry value buffer has an odd number of bytes",
            context={"bytes": len(b)},
        )
    return struct.unpack(f"<{len(b) // 2}H", b)


def _terminated(raw: RawValue) -> Tuple[int, ...]:
    words = raw.words
    if raw.kind in (REG_SZ, REG_EXPAND_SZ):
        return words + (0,)
    if raw.kind == REG_MULTI_SZ:
        words = words + (0,)
        if words[-2:] != (0, 0):
            words = words + (0,)
        return words
    return words


def raw_value_to_hive(name: str, raw: RawValue) -> Dict[str, Any]:
    """
    Build the value dict hivex's node_set_value() expects.

    String kinds get their storage terminator appended: one NUL for
    REG_SZ / REG_EXPAND_SZ, a double NUL ending for REG_MULTI_SZ.
    """
    words = _terminated(raw)
    logger.debug("Serializing %r: %s (+%d terminator units)", name, raw.describe(), len(words) - len(raw.words))
    return {"key": name, "t": int(raw.kind), "value": words_to_bytes(words)}


def raw_value_from_hive(value: Mapping[str, Any]) -> RawValue:
    """
    Build a RawValue from a node_get_value()-style dict.

    The buffer is taken as-is: string values keep their terminator, which
    decode_str() expects to find.
    """
    data = value.get("value")
    if not isinstance(data, (bytes, bytearray)):
        raise InvalidEncoding(
            msg="registry value dict carries no byte buffer",
            context={"key": value.get("key"), "value_type": type(data).__name__},
        )
    try:
        words = bytes_to_words(bytes(data))
    except InvalidEncoding as e:
        raise e.with_context(key=value.get("key"), kind=int(value.get("t", 0)))
    return RawValue(words=words, kind=int(value.get("t", 0)))
