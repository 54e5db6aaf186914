# SPDX-License-Identifier: LGPL-3.0-or-later
"""Tests for the hivex value-dict adapter."""
from __future__ import annotations

import pytest

from regcodec.core.exceptions import InvalidEncoding
from regcodec.registry.constants import RegType
from regcodec.registry.decoding import decode_str, decode_u32, decode_u64
from regcodec.registry.encoding import encode_str, encode_u32, encode_u64
from regcodec.registry.hive import bytes_to_words, raw_value_from_hive, raw_value_to_hive, words_to_bytes
from regcodec.registry.value import RawValue


@pytest.mark.unit
def test_adapter_exported_from_registry_package():
    from regcodec import registry

    assert registry.words_to_bytes is words_to_bytes
    assert registry.bytes_to_words is bytes_to_words
    assert registry.raw_value_to_hive is raw_value_to_hive
    assert registry.raw_value_from_hive is raw_value_from_hive


@pytest.mark.unit
class TestWordPacking:
    def test_little_endian(self):
        assert words_to_bytes([0xABCD, 0x0001]) == b"\xcd\xab\x01\x00"
        assert bytes_to_words(b"\xcd\xab\x01\x00") == (0xABCD, 0x0001)

    def test_odd_length_rejected(self):
        with pytest.raises(InvalidEncoding) as ei:
            bytes_to_words(b"\x01\x02\x03")
        assert ei.value.context["bytes"] == 3


@pytest.mark.unit
class TestHiveDicts:
    def test_dword_matches_hivex_layout(self):
        d = raw_value_to_hive("Start", encode_u32(3))
        assert d == {"key": "Start", "t": 4, "value": b"\x03\x00\x00\x00"}

    def test_qword(self):
        d = raw_value_to_hive("Stamp", encode_u64(0x0123_4567_89AB_CDEF))
        assert d["t"] == 11
        assert d["value"] == (0x0123_4567_89AB_CDEF).to_bytes(8, "little")

    def test_reg_sz_gets_terminator(self):
        d = raw_value_to_hive("ImagePath", encode_str("ab"))
        assert d["value"] == "ab\0".encode("utf-16-le")

    def test_expand_sz_gets_terminator(self):
        raw = RawValue([ord("x")], RegType.REG_EXPAND_SZ)
        assert raw_value_to_hive("P", raw)["value"] == b"x\x00\x00\x00"

    def test_multi_sz_ends_with_double_nul(self):
        raw = RawValue([ord(c) for c in "a\0b"], RegType.REG_MULTI_SZ)
        assert raw_value_to_hive("M", raw)["value"] == "a\0b\0\0".encode("utf-16-le")

        already = RawValue([ord(c) for c in "a\0b\0"], RegType.REG_MULTI_SZ)
        assert raw_value_to_hive("M", already)["value"] == "a\0b\0\0".encode("utf-16-le")

    def test_binary_passes_through(self):
        raw = RawValue([0x0201], RegType.REG_BINARY)
        assert raw_value_to_hive("B", raw)["value"] == b"\x01\x02"

    def test_from_hive(self):
        raw = raw_value_from_hive({"key": "Start", "t": 4, "value": b"\x02\x00\x00\x00"})
        assert raw == RawValue([2, 0], RegType.REG_DWORD)
        assert decode_u32(raw) == 2

    def test_from_hive_string_keeps_terminator(self):
        raw = raw_value_from_hive({"key": "ImagePath", "t": 2, "value": "%SystemRoot%\0".encode("utf-16-le")})
        assert raw.words[-1] == 0
        assert decode_str(raw) == "%SystemRoot%"

    def test_from_hive_multi_sz(self):
        raw = raw_value_from_hive({"key": "DependOnService", "t": 7, "value": "RpcSs\0Tcpip\0\0".encode("utf-16-le")})
        assert decode_str(raw) == "RpcSs\nTcpip"

    def test_from_hive_requires_bytes(self):
        with pytest.raises(InvalidEncoding):
            raw_value_from_hive({"key": "X", "t": 1, "value": "text"})

    def test_from_hive_odd_buffer_carries_key(self):
        with pytest.raises(InvalidEncoding) as ei:
            raw_value_from_hive({"key": "X", "t": 3, "value": b"\x01"})
        assert ei.value.context["key"] == "X"
        assert ei.value.context["kind"] == 3

    @pytest.mark.parametrize(
        "raw, decode, expected",
        [
            (encode_str("C:\\Windows"), decode_str, "C:\\Windows"),
            (encode_u32(0xDEADBEEF), decode_u32, 0xDEADBEEF),
            (encode_u64(1 << 63), decode_u64, 1 << 63),
        ],
    )
    def test_through_transport_and_back(self, raw, decode, expected):
        assert decode(raw_value_from_hive(raw_value_to_hive("v", raw))) == expected
