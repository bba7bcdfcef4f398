"""Проверка принципа неизменяемости блоков A-C между ревизиями кода."""

from __future__ import annotations

from .base import ImmutabilityResult
from .grammar import parse

UNPARSABLE = "Unable to parse one or both codes"

# Блок D (установка) намеренно не сравнивается.
IMMUTABLE_BLOCKS = (
    ("classification", "UTCS classification (Block A)"),
    ("variant", "Product variant (Block B)"),
    ("system", "System/Technology ID (Block C)"),
)


def check_immutable(old_code: str, new_code: str) -> ImmutabilityResult:
    old = parse(old_code)
    new = parse(new_code)
    if old is None or new is None:
        return ImmutabilityResult(violations=[UNPARSABLE])

    violations = [
        f"{label} changed - this violates immutability principle"
        for attr, label in IMMUTABLE_BLOCKS
        if getattr(old, attr) != getattr(new, attr)
    ]
    return ImmutabilityResult(violations=violations)
