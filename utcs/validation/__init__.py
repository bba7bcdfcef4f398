"""Разбор и валидация кодов UTCS."""

from pathlib import Path

from .base import (
    CANONICAL_DELIMITER,
    ContentScanResult,
    EngineSettings,
    ImmutabilityResult,
    ListUnit,
    ParsedCode,
    RangeUnit,
    SingleUnit,
    SpecialUnit,
    TrigramInfo,
    ValidationResult,
    VariantInfo,
)
from .engine import UTCSEngine
from .grammar import extract_codes, parse
from .immutability import check_immutable
from .installation import expand_installation, installation_count, installation_numbers
from .loader import load_engine_settings, load_registries
from .registry import Registries
from .scanner import scan_content
from .suggestions import SuggestionRule, suggest
from .validator import CodeValidator, validate

__all__ = [
    "CANONICAL_DELIMITER",
    "CodeValidator",
    "ContentScanResult",
    "EngineSettings",
    "ImmutabilityResult",
    "ListUnit",
    "ParsedCode",
    "RangeUnit",
    "Registries",
    "SingleUnit",
    "SpecialUnit",
    "SuggestionRule",
    "TrigramInfo",
    "UTCSEngine",
    "ValidationResult",
    "VariantInfo",
    "check_immutable",
    "expand_installation",
    "extract_codes",
    "installation_count",
    "installation_numbers",
    "load_engine_settings",
    "load_registries",
    "parse",
    "scan_content",
    "suggest",
    "validate",
    "validation_config_dir",
]


def validation_config_dir() -> Path:
    """Возвращает путь до каталога с YAML-справочниками UTCS."""

    return Path(__file__).resolve().parent / "configs"
