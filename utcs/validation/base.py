"""Базовые модели данных для валидации кодов UTCS."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Dict, List, Optional, Sequence, Tuple, Union

CANONICAL_DELIMITER = "‑"
DELIMITERS = ("-", "‑", "–")
SPECIAL_KEYWORDS = ("ALL", "STD", "TST", "DEV")


@dataclass(frozen=True)
class ParsedCode:
    """Код, разобранный на четыре блока."""

    classification: str
    variant: str
    system: str
    installation: str
    source_text: str

    def canonical(self, delimiter: str = CANONICAL_DELIMITER) -> str:
        return delimiter.join(
            (self.classification, self.variant, self.system, f"[{self.installation}]")
        )

    def to_dict(self) -> dict:
        return {
            "classification": self.classification,
            "variant": self.variant,
            "system": self.system,
            "installation": self.installation,
            "source_text": self.source_text,
        }


@dataclass(frozen=True)
class SpecialUnit:
    """Служебное ключевое слово, занимающее весь блок D."""

    kind: ClassVar[str] = "special"

    keyword: str

    @property
    def raw(self) -> str:
        return self.keyword

    @property
    def expanded(self) -> Sequence[int]:
        return ()


@dataclass(frozen=True)
class SingleUnit:
    kind: ClassVar[str] = "single"

    raw: str
    value: int

    @property
    def expanded(self) -> Sequence[int]:
        return (self.value,)


@dataclass(frozen=True)
class RangeUnit:
    """Включительный диапазон ``start..end``."""

    kind: ClassVar[str] = "range"

    raw: str
    start: int
    end: int

    @property
    def expanded(self) -> Sequence[int]:
        return range(self.start, self.end + 1)

    @property
    def count(self) -> int:
        return self.end - self.start + 1


@dataclass(frozen=True)
class ListUnit:
    """Сегмент, который не удалось распознать; хранится как есть."""

    kind: ClassVar[str] = "list"

    raw: str

    @property
    def expanded(self) -> Sequence[int]:
        return ()


InstallationUnit = Union[SpecialUnit, SingleUnit, RangeUnit, ListUnit]


@dataclass
class ValidationResult:
    """Результат проверки кода."""

    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
    parsed: Optional[ParsedCode] = None

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "suggestions": list(self.suggestions),
            "parsed": self.parsed.to_dict() if self.parsed else None,
        }


@dataclass
class ContentScanResult:
    """Коды, найденные в тексте, и результаты их проверки."""

    codes: List[str]
    results: List[ValidationResult]

    @property
    def has_errors(self) -> bool:
        return any(not result.is_valid for result in self.results)


@dataclass
class ImmutabilityResult:
    violations: List[str] = field(default_factory=list)

    @property
    def is_compliant(self) -> bool:
        return not self.violations


@dataclass(frozen=True)
class VariantInfo:
    """Запись каталога вариантов продукта (блок B)."""

    code: str
    name: str
    description: str = ""
    type: str = ""
    category: str = ""
    status: str = ""
    specifications: Dict[str, str] = field(default_factory=dict, hash=False, compare=False)


@dataclass(frozen=True)
class TrigramInfo:
    """Запись реестра системных триграмм (блок C)."""

    code: str
    name: str
    family: str = ""
    description: str = ""
    domains: Tuple[str, ...] = ()
    common: bool = False
    status: str = ""
    examples: Tuple[str, ...] = ()


@dataclass(frozen=True)
class EngineSettings:
    """Настраиваемые пороги и константы движка."""

    special_keywords: Tuple[str, ...] = SPECIAL_KEYWORDS
    large_range_threshold: int = 100
    min_unit: int = 1
    version_suffixes: Tuple[str, ...] = ("V2", "V3")
    suggestion_limit: int = 5
    delimiter: str = CANONICAL_DELIMITER
