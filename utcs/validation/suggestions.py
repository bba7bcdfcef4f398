"""Подсказки для автодополнения неполного кода."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .base import CANONICAL_DELIMITER, DELIMITERS, TrigramInfo
from .registry import Registries

_DELIM_CLASS = "[" + re.escape("".join(DELIMITERS)) + "]"
_CLASSIFICATION_ONLY = re.compile(r"^[0-9]{6}$")
_CLASSIFICATION_AND_VARIANT = re.compile(rf"^([0-9]{{6}}){_DELIM_CLASS}([A-Z0-9]{{7}}){_DELIM_CLASS}?$")


@dataclass(frozen=True)
class SuggestionRule:
    """Если вариант содержит один из маркеров, предпочесть триграммы семейства или домена."""

    markers: Tuple[str, ...]
    family: Optional[str] = None
    domain: Optional[str] = None

    def applies_to(self, variant: str) -> bool:
        return any(marker in variant for marker in self.markers)

    def favours(self, trigram: TrigramInfo) -> bool:
        if self.family is not None and self.family.lower() in trigram.family.lower():
            return True
        if self.domain is not None and any(self.domain in d for d in trigram.domains):
            return True
        return False


DEFAULT_RULES: Tuple[SuggestionRule, ...] = (
    SuggestionRule(markers=("Q",), family="Quantum"),
    SuggestionRule(markers=("EVT",), family="Electric"),
    SuggestionRule(markers=("HYB",), family="Hybrid"),
    SuggestionRule(markers=("UAV",), family="Autonomous"),
    SuggestionRule(markers=("ROV", "FAL", "MRO", "SPC", "EXP"), family="Robotics"),
    SuggestionRule(markers=("SUBS", "ORB", "SAT"), domain="100-Space"),
)


class SuggestionEngine:
    """Предлагает продолжения по справочникам, сам ничего не проверяет."""

    def __init__(
        self,
        registries: Registries,
        rules: Sequence[SuggestionRule] = DEFAULT_RULES,
        limit: int = 5,
        delimiter: str = CANONICAL_DELIMITER,
    ) -> None:
        self.registries = registries
        self.rules = tuple(rules)
        self.limit = limit
        self.delimiter = delimiter

    def suggest(self, partial: str) -> List[str]:
        text = partial.strip()
        d = self.delimiter

        if _CLASSIFICATION_ONLY.match(text):
            if text not in self.registries.domains:
                return []
            variants = list(self.registries.variants)[: self.limit]
            return [f"{text}{d}{variant}{d}" for variant in variants]

        match = _CLASSIFICATION_AND_VARIANT.match(text)
        if match:
            classification, variant = match.groups()
            if variant not in self.registries.variants:
                return []
            trigrams = self.trigrams_for_variant(variant)[: self.limit]
            return [f"{classification}{d}{variant}{d}{t.code}{d}[" for t in trigrams]

        return []

    def trigrams_for_variant(self, variant: str) -> List[TrigramInfo]:
        """Сначала триграммы, подходящие по правилам, затем часто используемые."""

        active = [rule for rule in self.rules if rule.applies_to(variant)]
        favoured = [
            trigram
            for trigram in self.registries.trigrams.values()
            if any(rule.favours(trigram) for rule in active)
        ]
        chosen = {t.code for t in favoured}
        common = [t for t in self.registries.common_trigrams() if t.code not in chosen]
        return favoured + common


def suggest(partial: str, registries: Registries) -> List[str]:
    return SuggestionEngine(registries).suggest(partial)
