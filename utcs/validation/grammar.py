# /utcs/validation/grammar.py
"""Грамматика кода UTCS: разбор строки и поиск кодов в тексте."""
from __future__ import annotations

import string
from typing import List, Optional, Tuple

from .base import DELIMITERS, ParsedCode

_DIGITS = frozenset(string.digits)
_UPPER = frozenset(string.ascii_uppercase)
_ALNUM = _DIGITS | _UPPER

# Блоки A, B, C: ширина и допустимые символы; после каждого идёт разделитель.
_FIXED_BLOCKS = ((6, _DIGITS), (7, _ALNUM), (3, _UPPER))

_Match = Tuple[int, Tuple[str, str, str, str]]


def _match_at(text: str, start: int) -> Optional[_Match]:
    """Сопоставляет код, начинающийся ровно в позиции ``start``."""

    pos = start
    blocks: List[str] = []
    for width, charset in _FIXED_BLOCKS:
        end = pos + width
        chunk = text[pos:end]
        if len(chunk) != width or not all(ch in charset for ch in chunk):
            return None
        if end >= len(text) or text[end] not in DELIMITERS:
            return None
        blocks.append(chunk)
        pos = end + 1

    if pos >= len(text) or text[pos] != "[":
        return None
    close = text.find("]", pos + 1)
    if close <= pos + 1:
        return None
    classification, variant, system = blocks
    return close + 1, (classification, variant, system, text[pos + 1 : close])


def parse(raw: str) -> Optional[ParsedCode]:
    """Разбирает код целиком; при любом несовпадении возвращает ``None``."""

    text = raw.strip()
    match = _match_at(text, 0)
    if match is None:
        return None
    end, (classification, variant, system, installation) = match
    if end != len(text):
        return None
    return ParsedCode(
        classification=classification,
        variant=variant,
        system=system,
        installation=installation,
        source_text=raw,
    )


def extract_codes(content: str) -> List[str]:
    """Все непересекающиеся вхождения кодов в порядке появления."""

    codes: List[str] = []
    pos = 0
    while pos < len(content):
        if content[pos] not in _DIGITS:
            pos += 1
            continue
        match = _match_at(content, pos)
        if match is None:
            pos += 1
            continue
        end = match[0]
        codes.append(content[pos:end])
        pos = end
    return codes

