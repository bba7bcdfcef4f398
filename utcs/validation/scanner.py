"""Поиск и пакетная проверка кодов в произвольном тексте."""

from __future__ import annotations

from typing import Optional

from .base import ContentScanResult, EngineSettings
from .grammar import extract_codes
from .registry import Registries
from .validator import CodeValidator


class ContentScanner:
    def __init__(self, validator: CodeValidator) -> None:
        self.validator = validator

    def scan_content(self, content: str) -> ContentScanResult:
        codes = extract_codes(content)
        return ContentScanResult(codes=codes, results=[self.validator.validate(code) for code in codes])


def scan_content(
    content: str,
    registries: Registries,
    settings: Optional[EngineSettings] = None,
) -> ContentScanResult:
    return ContentScanner(CodeValidator(registries, settings)).scan_content(content)
