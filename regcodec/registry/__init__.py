# SPDX-License-Identifier: LGPL-3.0-or-later
# regcodec/registry/__init__.py
"""
Registry value codec.

- constants: REG_* / HKEY_* / KEY_* tables
- value: RawValue (words + kind)
- decoding: RawValue -> str / u32 / u64
- encoding: str / u32 / u64 -> RawValue
- hive: hivex-style value dicts <-> RawValue
"""
from .constants import HKey, KeyAccess, RegType, normalize_reg_type, reg_type_name
from .decoding import decode_str, decode_u32, decode_u64
from .encoding import encode_str, encode_u32, encode_u64
from .hive import bytes_to_words, raw_value_from_hive, raw_value_to_hive, words_to_bytes
from .value import RawValue

__all__ = [
    "HKey",
    "KeyAccess",
    "RegType",
    "RawValue",
    "bytes_to_words",
    "decode_str",
    "decode_u32",
    "decode_u64",
    "encode_str",
    "encode_u32",
    "encode_u64",
    "normalize_reg_type",
    "raw_value_from_hive",
    "raw_value_to_hive",
    "reg_type_name",
    "words_to_bytes",
]
