"""Фасад движка: справочники, настройки и все операции над кодами."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from utcs.logging_manager import get_logger

from .base import ContentScanResult, EngineSettings, ImmutabilityResult, InstallationUnit, ParsedCode, ValidationResult
from .formatting import format_validation_result
from .grammar import extract_codes, parse
from .immutability import check_immutable
from .installation import expand_installation
from .loader import SETTINGS_FILE, load_engine_settings, load_registries
from .registry import Registries
from .scanner import ContentScanner
from .suggestions import SuggestionEngine
from .validator import CodeValidator

logger = get_logger(__name__)


class UTCSEngine:
    """Объединяет валидатор, подсказки и сканер над одним снимком справочников."""

    def __init__(self, registries: Registries, settings: Optional[EngineSettings] = None) -> None:
        self.registries = registries
        self.settings = settings or EngineSettings()
        self.validator = CodeValidator(registries, self.settings)
        self.suggester = SuggestionEngine(
            registries,
            limit=self.settings.suggestion_limit,
            delimiter=self.settings.delimiter,
        )
        self.scanner = ContentScanner(self.validator)

    @staticmethod
    def parse(code: str) -> Optional[ParsedCode]:
        return parse(code)

    def expand_installation(self, installation: str) -> List[InstallationUnit]:
        return expand_installation(installation, self.settings.special_keywords)

    def validate(self, code: str) -> ValidationResult:
        return self.validator.validate(code)

    def suggest(self, partial: str) -> List[str]:
        return self.suggester.suggest(partial)

    @staticmethod
    def extract_codes(content: str) -> List[str]:
        return extract_codes(content)

    def scan_content(self, content: str) -> ContentScanResult:
        return self.scanner.scan_content(content)

    @staticmethod
    def check_immutable(old_code: str, new_code: str) -> ImmutabilityResult:
        return check_immutable(old_code, new_code)

    def format_result(self, result: ValidationResult) -> str:
        return format_validation_result(result, self.registries)

    @classmethod
    def from_config_dir(cls, config_dir: Optional[Path] = None) -> "UTCSEngine":
        from . import validation_config_dir

        base_dir = Path(config_dir) if config_dir else validation_config_dir()
        registries = load_registries(base_dir)
        settings = load_engine_settings(base_dir / SETTINGS_FILE)
        logger.info(
            "Движок UTCS готов: %d доменов, %d вариантов, %d триграмм",
            len(registries.domains),
            len(registries.variants),
            len(registries.trigrams),
        )
        return cls(registries, settings)
