# SPDX-License-Identifier: LGPL-3.0-or-later
# regcodec/registry/constants.py
"""
Windows registry constant tables.

Value-type identifiers (REG_*), predefined root key handles (HKEY_*) and
key access-right masks (KEY_*), with the numeric values from winnt.h.
Nothing here has behavior beyond name <-> number lookup.
"""
from __future__ import annotations

import logging
from enum import IntEnum, IntFlag
from typing import Dict, Union

logger = logging.getLogger(__name__)


class RegType(IntEnum):
    REG_NONE = 0
    REG_SZ = 1
    REG_EXPAND_SZ = 2
    REG_BINARY = 3
    REG_DWORD = 4
    REG_DWORD_BIG_ENDIAN = 5
    REG_LINK = 6
    REG_MULTI_SZ = 7
    REG_RESOURCE_LIST = 8
    REG_FULL_RESOURCE_DESCRIPTOR = 9
    REG_RESOURCE_REQUIREMENTS_LIST = 10
    REG_QWORD = 11


# Aliases share a value with the base type; IntEnum would fold them anyway,
# keep them as plain module constants so lookups stay on the base name.
REG_NONE = RegType.REG_NONE
REG_SZ = RegType.REG_SZ
REG_EXPAND_SZ = RegType.REG_EXPAND_SZ
REG_BINARY = RegType.REG_BINARY
REG_DWORD = RegType.REG_DWORD
REG_DWORD_LITTLE_ENDIAN = RegType.REG_DWORD
REG_DWORD_BIG_ENDIAN = RegType.REG_DWORD_BIG_ENDIAN
REG_LINK = RegType.REG_LINK
REG_MULTI_SZ = RegType.REG_MULTI_SZ
REG_RESOURCE_LIST = RegType.REG_RESOURCE_LIST
REG_FULL_RESOURCE_DESCRIPTOR = RegType.REG_FULL_RESOURCE_DESCRIPTOR
REG_RESOURCE_REQUIREMENTS_LIST = RegType.REG_RESOURCE_REQUIREMENTS_LIST
REG_QWORD = RegType.REG_QWORD
REG_QWORD_LITTLE_ENDIAN = RegType.REG_QWORD

STRING_KINDS = frozenset({REG_SZ, REG_EXPAND_SZ, REG_MULTI_SZ})

_REG_ALIASES: Dict[str, RegType] = {
    "REG_DWORD_LITTLE_ENDIAN": RegType.REG_DWORD,
    "REG_QWORD_LITTLE_ENDIAN": RegType.REG_QWORD,
}


class HKey(IntEnum):
    """Predefined root key handles, as their unsigned 32-bit values (0x8000000x)."""
    HKEY_CLASSES_ROOT = 0x80000000
    HKEY_CURRENT_USER = 0x80000001
    HKEY_LOCAL_MACHINE = 0x80000002
    HKEY_USERS = 0x80000003
    HKEY_PERFORMANCE_DATA = 0x80000004
    HKEY_CURRENT_CONFIG = 0x80000005
    HKEY_DYN_DATA = 0x80000006
    HKEY_CURRENT_USER_LOCAL_SETTINGS = 0x80000007
    HKEY_PERFORMANCE_TEXT = 0x80000050
    HKEY_PERFORMANCE_NLSTEXT = 0x80000060


_STANDARD_RIGHTS_READ = 0x00020000
_STANDARD_RIGHTS_WRITE = 0x00020000
_STANDARD_RIGHTS_ALL = 0x001F0000
_SYNCHRONIZE = 0x00100000


class KeyAccess(IntFlag):
    KEY_QUERY_VALUE = 0x0001
    KEY_SET_VALUE = 0x0002
    KEY_CREATE_SUB_KEY = 0x0004
    KEY_ENUMERATE_SUB_KEYS = 0x0008
    KEY_NOTIFY = 0x0010
    KEY_CREATE_LINK = 0x0020
    KEY_WOW64_64KEY = 0x0100
    KEY_WOW64_32KEY = 0x0200
    KEY_WOW64_RES = 0x0300

    KEY_READ = (_STANDARD_RIGHTS_READ | KEY_QUERY_VALUE | KEY_ENUMERATE_SUB_KEYS | KEY_NOTIFY) & ~_SYNCHRONIZE
    KEY_WRITE = (_STANDARD_RIGHTS_WRITE | KEY_SET_VALUE | KEY_CREATE_SUB_KEY) & ~_SYNCHRONIZE
    KEY_EXECUTE = KEY_READ
    KEY_ALL_ACCESS = (
        _STANDARD_RIGHTS_ALL
        | KEY_QUERY_VALUE
        | KEY_SET_VALUE
        | KEY_CREATE_SUB_KEY
        | KEY_ENUMERATE_SUB_KEYS
        | KEY_NOTIFY
        | KEY_CREATE_LINK
    ) & ~_SYNCHRONIZE


def reg_type_name(kind: int) -> str:
    """Name of a REG_* kind; unknown kinds render as UnknownType(<n>)."""
    try:
        return RegType(int(kind)).name
    except ValueError:
        return f"UnknownType({int(kind)})"


def normalize_reg_type(type_input: Union[int, str]) -> RegType:
    """
    Normalize a registry type given as an integer or a REG_* name.

    Names are matched case-insensitively and the *_LITTLE_ENDIAN aliases
    map to their base type.

    Raises:
        TypeError: input is neither int nor str
        ValueError: input is not a known REG_* type
    """
    if isinstance(type_input, bool):
        raise TypeError(f"registry type must be an int or a REG_* name, got {type(type_input).__name__}")

    if isinstance(type_input, int):
        try:
            return RegType(type_input)
        except ValueError:
            raise ValueError(f"{type_input} is not a known registry value type") from None

    if isinstance(type_input, str):
        name = type_input.strip().upper()
        if name in _REG_ALIASES:
            logger.debug("Registry type %r normalized to %s", type_input, _REG_ALIASES[name].name)
            return _REG_ALIASES[name]
        try:
            return RegType[name]
        except KeyError:
            raise ValueError(f"{type_input!r} is not a recognized registry type name") from None

    raise TypeError(f"registry type must be an int or a REG_* name, got {type(type_input).__name__}")
