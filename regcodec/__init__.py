# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# regcodec/__init__.py
"""
regcodec - typed Windows registry value codec

Converts between the registry's type-tagged word buffers (RawValue) and
Python str / int values, checking the REG_* tag on the way in.

    from regcodec import RawValue, RegType, decode_u32, encode_str

    start = decode_u32(RawValue([3, 0], RegType.REG_DWORD))
    raw = encode_str("C:\\\\Windows")

Opening keys and talking to the OS (or to a hive file) is the caller's job.
"""

__version__ = "0.1.0"

from .codec import HostType, RegCodec, from_reg, to_reg
from .config import CodecConfig, load_config
from .core.exceptions import ConfigError, InvalidEncoding, RegCodecError, UnsupportedType
from .core.logger import Log
from .registry import (
    HKey,
    KeyAccess,
    RawValue,
    RegType,
    decode_str,
    decode_u32,
    decode_u64,
    encode_str,
    encode_u32,
    encode_u64,
    normalize_reg_type,
    reg_type_name,
)

__all__ = [
    "__version__",
    # Codec
    "RawValue",
    "decode_str",
    "decode_u32",
    "decode_u64",
    "encode_str",
    "encode_u32",
    "encode_u64",
    "HostType",
    "RegCodec",
    "from_reg",
    "to_reg",
    # Constants
    "RegType",
    "HKey",
    "KeyAccess",
    "normalize_reg_type",
    "reg_type_name",
    # Errors
    "RegCodecError",
    "UnsupportedType",
    "InvalidEncoding",
    "ConfigError",
    # Ambient
    "CodecConfig",
    "load_config",
    "Log",
]
