"""Разбор блока D (установки) на единицы."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Sequence, Tuple

from .base import DELIMITERS, SPECIAL_KEYWORDS, InstallationUnit, ListUnit, RangeUnit, SingleUnit, SpecialUnit

_RANGE_SPLIT = re.compile("[" + re.escape("".join(DELIMITERS)) + "]")

# Более длинные номера остаются сырыми сегментами.
MAX_UNIT_DIGITS = 1000


def _to_number(text: str) -> Optional[int]:
    if not (text and text.isascii() and text.isdigit()) or len(text) > MAX_UNIT_DIGITS:
        return None
    try:
        return int(text)
    except ValueError:
        return None


def _parse_range(segment: str) -> InstallationUnit:
    bounds = [_to_number(part.strip()) for part in _RANGE_SPLIT.split(segment)]
    if len(bounds) == 2 and None not in bounds:
        start, end = bounds
        if start <= end:
            return RangeUnit(raw=segment, start=start, end=end)
    # Убывающий или нечисловой диапазон не отвергает код, а остаётся сырым сегментом.
    return ListUnit(raw=segment)


def expand_installation(
    installation: str,
    special_keywords: Sequence[str] = SPECIAL_KEYWORDS,
) -> List[InstallationUnit]:
    """Разбивает строку установки на одиночные номера, диапазоны и прочие сегменты."""

    if installation in special_keywords:
        return [SpecialUnit(keyword=installation)]

    units: List[InstallationUnit] = []
    for segment in (part.strip() for part in installation.split(",")):
        if any(delim in segment for delim in DELIMITERS):
            units.append(_parse_range(segment))
            continue
        value = _to_number(segment)
        if value is None:
            units.append(ListUnit(raw=segment))
        else:
            units.append(SingleUnit(raw=segment, value=value))
    return units


def _intervals(units: Iterable[InstallationUnit]) -> List[Tuple[int, int]]:
    merged: List[Tuple[int, int]] = []
    bounds: List[Tuple[int, int]] = []
    for unit in units:
        if isinstance(unit, RangeUnit):
            bounds.append((unit.start, unit.end))
        elif isinstance(unit, SingleUnit):
            bounds.append((unit.value, unit.value))
    for start, end in sorted(bounds):
        if merged and start <= merged[-1][1] + 1:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def installation_count(units: Iterable[InstallationUnit]) -> int:
    """Число различных номеров, покрытых единицами, без перечисления самих номеров."""

    return sum(end - start + 1 for start, end in _intervals(units))


def installation_numbers(units: Iterable[InstallationUnit]) -> List[int]:
    """Отсортированный набор конкретных номеров, покрытых единицами.

    Список строится целиком; для огромных диапазонов используйте ``installation_count``.
    """

    numbers: List[int] = []
    for start, end in _intervals(units):
        numbers.extend(range(start, end + 1))
    return numbers
