# SPDX-License-Identifier: LGPL-3.0-or-later
# regcodec/registry/value.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple

from .constants import reg_type_name


def _as_words(words: Iterable[int]) -> Tuple[int, ...]:
    return tuple(int(w) for w in words)


@dataclass(frozen=True)
class RawValue:
    """
    A registry value as the native API sees it: 16-bit words plus a REG_* tag.

    `words` is the literal word sequence, in order. Its length must suit
    `kind` (2 words for a DWORD, 4 for a QWORD, a trailing NUL unit for
    string kinds); the transport that builds a RawValue guarantees this.
    """
    words: Tuple[int, ...] = field(default_factory=tuple)
    kind: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "words", _as_words(self.words))
        object.__setattr__(self, "kind", int(self.kind))

    @property
    def kind_name(self) -> str:
        return reg_type_name(self.kind)

    def describe(self, *, max_words: int = 8) -> str:
        """Compact one-line rendering for log messages."""
        shown = " ".join(f"{w:04x}" for w in self.words[:max_words])
        if len(self.words) > max_words:
            shown += " …"
        return f"{self.kind_name} words={len(self.words)} [{shown}]"
