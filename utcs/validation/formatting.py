"""Текстовое представление результата проверки."""

from __future__ import annotations

from typing import List

from .base import ValidationResult
from .registry import Registries

UNKNOWN = "Unknown"


def format_validation_result(result: ValidationResult, registries: Registries) -> str:
    lines: List[str] = []

    if result.is_valid:
        lines.append("✅ Valid UTCS code")
    else:
        lines.append("❌ Invalid UTCS code")

    parsed = result.parsed
    if parsed is not None:
        variant = registries.variants.get(parsed.variant)
        trigram = registries.trigrams.get(parsed.system)
        lines.append(f"   Domain: {parsed.classification} ({registries.domains.get(parsed.classification) or UNKNOWN})")
        lines.append(f"   Variant: {parsed.variant} ({variant.description if variant else UNKNOWN})")
        lines.append(f"   System: {parsed.system} ({trigram.family if trigram else UNKNOWN})")
        lines.append(f"   Installation: [{parsed.installation}]")

    for title, marker, items in (
        ("Errors", "•", result.errors),
        ("Warnings", "⚠", result.warnings),
        ("Suggestions", "💡", result.suggestions),
    ):
        if items:
            lines.append("")
            lines.append(f"{title}:")
            lines.extend(f"   {marker} {item}" for item in items)

    return "\n".join(lines) + "\n"
