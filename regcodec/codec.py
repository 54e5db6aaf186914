# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# regcodec/codec.py
"""
Dispatch by requested host type.

Python has one `int`, so the caller names the host type it wants
(HostType.U32 vs HostType.U64) instead of the value picking it. The
tables below are closed: one decoder and one encoder per host type.

    from regcodec import HostType, from_reg, to_reg

    raw = to_reg(3, HostType.U32)
    start = from_reg(raw, HostType.U32)
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional

from .config import CodecConfig
from .core.exceptions import RegCodecError
from .core.logger import Log
from .registry.decoding import decode_str, decode_u32, decode_u64
from .registry.encoding import encode_str, encode_u32, encode_u64
from .registry.value import RawValue

logger = logging.getLogger(__name__)


class HostType(Enum):
    TEXT = "str"
    U32 = "u32"
    U64 = "u64"


_DECODERS: Dict[HostType, Callable[..., Any]] = {
    HostType.TEXT: decode_str,
    HostType.U32: decode_u32,
    HostType.U64: decode_u64,
}

_ENCODERS: Dict[HostType, Callable[[Any], RawValue]] = {
    HostType.TEXT: encode_str,
    HostType.U32: encode_u32,
    HostType.U64: encode_u64,
}


def _host_type(host_type: Any) -> HostType:
    if isinstance(host_type, HostType):
        return host_type
    if host_type is str:
        return HostType.TEXT
    try:
        return HostType(host_type)
    except ValueError:
        raise ValueError(f"unknown host type {host_type!r} (expected one of: str, u32, u64)") from None


def from_reg(raw: RawValue, host_type: Any) -> Any:
    """Decode `raw` into the requested host type ("str", "u32", "u64")."""
    return _DECODERS[_host_type(host_type)](raw)


def to_reg(value: Any, host_type: Any) -> RawValue:
    """Encode `value` as the requested host type."""
    return _ENCODERS[_host_type(host_type)](value)


class RegCodec:
    """
    from_reg/to_reg bound to a CodecConfig.

    Holds no state besides the (frozen) config, so one instance can be
    shared freely.
    """

    def __init__(self, config: Optional[CodecConfig] = None):
        self.config = config or CodecConfig()

    def decode(self, raw: RawValue, host_type: Any, *, name: Optional[str] = None) -> Any:
        ht = _host_type(host_type)
        log = Log.bind(logger, value=name, kind=raw.kind_name, host_type=ht.value)
        try:
            if ht is HostType.TEXT:
                out = decode_str(raw, separator=self.config.multi_text_separator)
            else:
                out = _DECODERS[ht](raw)
        except RegCodecError as e:
            if name is not None:
                e.with_context(value=name)
            log.debug("decode failed: %s", e)
            raise
        Log.trace(logger, "decoded %s", raw.describe(), value=name)
        return out

    def encode(self, value: Any, host_type: Any) -> RawValue:
        raw = _ENCODERS[_host_type(host_type)](value)
        Log.trace(logger, "encoded %s", raw.describe())
        return raw

    def decode_str(self, raw: RawValue) -> str:
        return self.decode(raw, HostType.TEXT)

    def decode_u32(self, raw: RawValue) -> int:
        return self.decode(raw, HostType.U32)

    def decode_u64(self, raw: RawValue) -> int:
        return self.decode(raw, HostType.U64)
