"""Справочники UTCS: домены, варианты продукта, системные триграммы."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from .base import TrigramInfo, VariantInfo

DOMAIN_SEPARATOR = " · "


@dataclass(frozen=True)
class DomainInfo:
    code: str
    domain: str
    category: str
    description: str


@dataclass(frozen=True)
class Registries:
    """Неизменяемый снимок трёх справочников, передаваемый в движок."""

    domains: Mapping[str, str]
    variants: Mapping[str, VariantInfo]
    trigrams: Mapping[str, TrigramInfo]

    def __post_init__(self) -> None:
        for name in ("domains", "variants", "trigrams"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    @classmethod
    def empty(cls) -> "Registries":
        return cls(domains={}, variants={}, trigrams={})

    # Домены (блок A)

    def domain_info(self, code: str) -> Optional[DomainInfo]:
        description = self.domains.get(code)
        if not description:
            return None
        domain, _, category = description.partition(DOMAIN_SEPARATOR)
        return DomainInfo(code=code, domain=domain, category=category, description=description)

    def search_domains(self, query: str) -> List[DomainInfo]:
        query_lower = query.lower()
        found: List[DomainInfo] = []
        for code, description in self.domains.items():
            if query_lower in description.lower() or query in code:
                info = self.domain_info(code)
                if info:
                    found.append(info)
        return found

    def domains_by_category(self) -> Dict[str, List[DomainInfo]]:
        grouped: Dict[str, List[DomainInfo]] = {}
        for code in self.domains:
            info = self.domain_info(code)
            if info:
                grouped.setdefault(info.domain, []).append(info)
        return grouped

    # Варианты продукта (блок B)

    def variants_by(
        self,
        type: Optional[str] = None,
        category: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[VariantInfo]:
        return [
            variant
            for variant in self.variants.values()
            if (type is None or variant.type == type)
            and (category is None or variant.category == category)
            and (status is None or variant.status == status)
        ]

    def search_variants(self, query: str) -> List[VariantInfo]:
        query_lower = query.lower()
        return [
            variant
            for variant in self.variants.values()
            if any(
                query_lower in text.lower()
                for text in (variant.code, variant.name, variant.description, variant.category)
            )
        ]

    def variant_categories(self) -> List[str]:
        return sorted({variant.category for variant in self.variants.values()})

    def variant_types(self) -> List[str]:
        return sorted({variant.type for variant in self.variants.values()})

    # Триграммы (блок C)

    def trigrams_by_family(self, family: str) -> List[TrigramInfo]:
        family_lower = family.lower()
        return [t for t in self.trigrams.values() if family_lower in t.family.lower()]

    def trigrams_by_domain(self, domain: str) -> List[TrigramInfo]:
        return [t for t in self.trigrams.values() if any(domain in d for d in t.domains)]

    def common_trigrams(self) -> List[TrigramInfo]:
        return [t for t in self.trigrams.values() if t.common]

    def search_trigrams(self, query: str) -> List[TrigramInfo]:
        query_lower = query.lower()
        return [
            trigram
            for trigram in self.trigrams.values()
            if any(
                query_lower in text.lower()
                for text in (trigram.code, trigram.name, trigram.family, trigram.description)
            )
        ]

    def trigram_families(self) -> List[str]:
        return sorted({t.family for t in self.trigrams.values()})
