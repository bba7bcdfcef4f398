"""Загрузка справочников и настроек движка из YAML."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

import yaml

from utcs.logging_manager import get_logger

from .base import EngineSettings, TrigramInfo, VariantInfo
from .registry import Registries

logger = get_logger(__name__)

DOMAINS_FILE = "domains.yaml"
VARIANTS_FILE = "variants.yaml"
TRIGRAMS_FILE = "trigrams.yaml"
SETTINGS_FILE = "settings.yaml"

_DOMAIN_KEY = re.compile(r"^[0-9]{6}$")
_VARIANT_KEY = re.compile(r"^[A-Z0-9]{7}$")
_TRIGRAM_KEY = re.compile(r"^[A-Z]{3}$")


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level, got {type(data).__name__}")
    return data


def _accept_key(kind: str, key: str, pattern: re.Pattern[str], seen: Mapping[str, Any]) -> bool:
    if not pattern.match(key):
        logger.warning("Пропущена запись %s с недопустимым ключом %r", kind, key)
        return False
    if key in seen:
        logger.warning("Повторная запись %s %s проигнорирована", kind, key)
        return False
    return True


def _as_tuple(raw: Iterable[Any] | str | None) -> Tuple[str, ...]:
    if isinstance(raw, str):
        return (raw,)
    return tuple(str(item) for item in raw or [])


def _parse_domains(raw: Mapping[Any, Any] | None) -> Dict[str, str]:
    domains: Dict[str, str] = {}
    for key, description in (raw or {}).items():
        code = str(key)
        if _accept_key("domain", code, _DOMAIN_KEY, domains):
            domains[code] = str(description or "")
    return domains


def _parse_variants(raw: Iterable[dict] | None) -> Dict[str, VariantInfo]:
    variants: Dict[str, VariantInfo] = {}
    for item in raw or []:
        code = str(item.get("code", "")).upper()
        if not _accept_key("variant", code, _VARIANT_KEY, variants):
            continue
        specs = item.get("specifications") or {}
        variants[code] = VariantInfo(
            code=code,
            name=str(item.get("name", "")),
            description=str(item.get("description", "")),
            type=str(item.get("type", "")),
            category=str(item.get("category", "")),
            status=str(item.get("status", "")),
            specifications={str(k): str(v) for k, v in specs.items()},
        )
    return variants


def _parse_trigrams(raw: Iterable[dict] | None) -> Dict[str, TrigramInfo]:
    trigrams: Dict[str, TrigramInfo] = {}
    for item in raw or []:
        code = str(item.get("code", "")).upper()
        if not _accept_key("trigram", code, _TRIGRAM_KEY, trigrams):
            continue
        trigrams[code] = TrigramInfo(
            code=code,
            name=str(item.get("name", "")),
            family=str(item.get("family", "")),
            description=str(item.get("description", "")),
            domains=_as_tuple(item.get("domains")),
            common=bool(item.get("common", False)),
            status=str(item.get("status", "")),
            examples=_as_tuple(item.get("examples")),
        )
    return trigrams


def load_registries(config_dir: Path) -> Registries:
    """Читает три YAML-справочника из каталога и собирает Registries."""

    config_dir = Path(config_dir)
    domains = _parse_domains(_read_yaml(config_dir / DOMAINS_FILE).get("domains"))
    variants = _parse_variants(_read_yaml(config_dir / VARIANTS_FILE).get("variants"))
    trigrams = _parse_trigrams(_read_yaml(config_dir / TRIGRAMS_FILE).get("trigrams"))
    logger.debug(
        "Загружены справочники из %s: %d доменов, %d вариантов, %d триграмм",
        config_dir,
        len(domains),
        len(variants),
        len(trigrams),
    )
    return Registries(domains=domains, variants=variants, trigrams=trigrams)


def load_engine_settings(path: Optional[Path]) -> EngineSettings:
    """Настройки движка; отсутствующий файл или ключ даёт значение по умолчанию."""

    defaults = EngineSettings()
    if path is None or not Path(path).exists():
        return defaults

    data = _read_yaml(Path(path))
    return EngineSettings(
        special_keywords=_as_tuple(data.get("special_keywords")) or defaults.special_keywords,
        large_range_threshold=int(data.get("large_range_threshold", defaults.large_range_threshold)),
        min_unit=int(data.get("min_unit", defaults.min_unit)),
        version_suffixes=_as_tuple(data.get("version_suffixes", defaults.version_suffixes)),
        suggestion_limit=int(data.get("suggestion_limit", defaults.suggestion_limit)),
        delimiter=str(data.get("delimiter", defaults.delimiter)),
    )
