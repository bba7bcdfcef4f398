"""Проверка кода UTCS по грамматике и справочникам."""

from __future__ import annotations

import re
from typing import Optional

from .base import EngineSettings, ListUnit, ParsedCode, RangeUnit, ValidationResult
from .grammar import parse
from .installation import expand_installation
from .registry import Registries

EMPTY_CODE = "UTCS code cannot be empty"

FORMAT_ERRORS = (
    "Invalid UTCS code format",
    "Expected format: YYYZZZ-PPPVVVV-APP-[INS]",
    "Where YYYZZZ = 6 digits, PPPVVVV = 7 alphanumerics, APP = 3 letters, [INS] = installation in brackets",
)
FORMAT_SUGGESTIONS = (
    "Ensure you use the proper en-dash (‑) delimiter between blocks",
    "Check that installation units are enclosed in square brackets [...]",
)

UNKNOWN_DOMAIN = "Unknown UTCS domain/category: {}"
UNKNOWN_VARIANT = "Unknown product variant: {}"
UNKNOWN_TRIGRAM = "Unknown system/technology trigram: {}"
DOMAIN_HINT = "Verify UTCS classification against the master domain table"
VARIANT_HINT = "Check the Product Variant Catalogue or submit a new variant request to CRB"
TRIGRAM_HINT = "Register new trigram through CRB approval process"

INVALID_CHARACTERS = "Installation contains invalid characters"
INVALID_CHARACTERS_HINT = "Use only numbers, commas, dashes, and special keywords (ALL, STD, TST, DEV)"
INVALID_INSTALLATION = "Invalid installation format"
INSTALLATION_FORMATS_HINT = (
    "Use formats like: [1], [1-10], [1,3,5], [1-10,17,54], [ALL], [STD], [TST], or [DEV]"
)

LOW_START_WARNING = "Installation units should typically start from 1"
LARGE_RANGE_WARNING = "Large installation range detected ({} units)"
VERSION_SUFFIX_WARNING = (
    "Consider using a new product variant code for major redesigns rather than version suffixes"
)

_INSTALLATION_CHARSET = re.compile(r"[A-Z0-9,\-‑–\s]+")


class CodeValidator:
    """Применяет грамматику и три справочника к одному коду."""

    def __init__(self, registries: Registries, settings: Optional[EngineSettings] = None) -> None:
        self.registries = registries
        self.settings = settings or EngineSettings()

    def validate(self, code: str) -> ValidationResult:
        if not code or not code.strip():
            return ValidationResult(errors=[EMPTY_CODE])

        parsed = parse(code)
        if parsed is None:
            return ValidationResult(errors=list(FORMAT_ERRORS), suggestions=list(FORMAT_SUGGESTIONS))

        result = ValidationResult(parsed=parsed)
        self._check_registries(parsed, result)
        self._check_installation(parsed, result)
        self._check_variant_style(parsed, result)
        return result

    def _check_registries(self, parsed: ParsedCode, result: ValidationResult) -> None:
        checks = (
            (parsed.classification, self.registries.domains, UNKNOWN_DOMAIN, DOMAIN_HINT),
            (parsed.variant, self.registries.variants, UNKNOWN_VARIANT, VARIANT_HINT),
            (parsed.system, self.registries.trigrams, UNKNOWN_TRIGRAM, TRIGRAM_HINT),
        )
        for value, registry, error, hint in checks:
            if value not in registry:
                result.errors.append(error.format(value))
                result.suggestions.append(hint)

    def _check_installation(self, parsed: ParsedCode, result: ValidationResult) -> None:
        if not _INSTALLATION_CHARSET.fullmatch(parsed.installation):
            result.errors.append(INVALID_CHARACTERS)
            result.suggestions.append(INVALID_CHARACTERS_HINT)

        units = expand_installation(parsed.installation, self.settings.special_keywords)
        if not units or all(isinstance(u, ListUnit) and not u.raw for u in units):
            result.errors.append(INVALID_INSTALLATION)
            result.suggestions.append(INSTALLATION_FORMATS_HINT)

        for unit in units:
            if not isinstance(unit, RangeUnit):
                continue
            if unit.start < self.settings.min_unit:
                result.warnings.append(LOW_START_WARNING)
            if unit.count > self.settings.large_range_threshold:
                result.warnings.append(LARGE_RANGE_WARNING.format(unit.count))

    def _check_variant_style(self, parsed: ParsedCode, result: ValidationResult) -> None:
        if parsed.variant.endswith(tuple(self.settings.version_suffixes)):
            result.warnings.append(VERSION_SUFFIX_WARNING)


def validate(code: str, registries: Registries, settings: Optional[EngineSettings] = None) -> ValidationResult:
    return CodeValidator(registries, settings).validate(code)
