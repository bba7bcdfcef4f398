"""Пакетная проверка файлов для CI: сводка и отчёт JUnit."""

from __future__ import annotations

import glob
import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence

from utcs.logging_manager import get_logger
from utcs.validation import UTCSEngine, ValidationResult

logger = get_logger(__name__)

IGNORED_DIRS = frozenset({"node_modules", "dist", "build", ".git", ".venv", "__pycache__"})


@dataclass
class FileScanResult:
    """Коды одного файла (или текстового фрагмента) и результаты их проверки."""

    path: str
    codes: List[str]
    results: List[ValidationResult]

    @property
    def errors(self) -> int:
        return sum(1 for r in self.results if not r.is_valid)

    @property
    def warnings(self) -> int:
        return sum(1 for r in self.results if r.is_valid and r.warnings)

    @property
    def details(self) -> List[str]:
        lines: List[str] = []
        for code, result in zip(self.codes, self.results):
            if not result.is_valid:
                lines.append(f"❌ {code}: {', '.join(result.errors)}")
            elif result.warnings:
                lines.append(f"⚠️  {code}: {', '.join(result.warnings)}")
            else:
                lines.append(f"✅ {code}: Valid")
        return lines


@dataclass
class ScanSummary:
    files_scanned: int
    results: List[FileScanResult] = field(default_factory=list)

    @property
    def total_codes(self) -> int:
        return sum(len(r.codes) for r in self.results)

    @property
    def invalid_codes(self) -> int:
        return sum(r.errors for r in self.results)

    @property
    def valid_codes(self) -> int:
        return self.total_codes - self.invalid_codes

    @property
    def files_with_errors(self) -> int:
        return sum(1 for r in self.results if r.errors)

    @property
    def passed(self) -> bool:
        return self.invalid_codes == 0


def scan_text(name: str, content: str, engine: UTCSEngine) -> FileScanResult:
    scan = engine.scan_content(content)
    return FileScanResult(path=name, codes=scan.codes, results=scan.results)


def scan_blobs(blobs: Mapping[str, str], engine: UTCSEngine) -> ScanSummary:
    """Проверяет набор текстов, заданных как имя -> содержимое."""

    results = [scan_text(name, content, engine) for name, content in blobs.items()]
    return ScanSummary(files_scanned=len(results), results=results)


def _is_ignored(path: Path, base: Path) -> bool:
    try:
        parts = path.relative_to(base).parts
    except ValueError:
        parts = path.parts
    return any(part in IGNORED_DIRS for part in parts)


def collect_files(patterns: Iterable[str], root: Optional[Path] = None) -> List[Path]:
    """Раскрывает glob-шаблоны в отсортированный список файлов без служебных каталогов."""

    base = (Path(root) if root else Path.cwd()).resolve()
    found = set()
    for pattern in patterns:
        full_pattern = pattern if os.path.isabs(pattern) else str(base / pattern)
        for match in glob.glob(full_pattern, recursive=True):
            path = Path(match).resolve()
            if path.is_file() and not _is_ignored(path, base):
                found.add(path)
    return sorted(found)


def scan_files(patterns: Sequence[str], engine: UTCSEngine, root: Optional[Path] = None) -> ScanSummary:
    files = collect_files(patterns, root)
    logger.info("Проверка %d файлов на коды UTCS", len(files))

    summary = ScanSummary(files_scanned=len(files))
    for path in files:
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Не удалось прочитать %s: %s", path, exc)
            continue
        summary.results.append(scan_text(str(path), content, engine))
    return summary


def _display_path(path: str, root: Optional[Path]) -> str:
    try:
        return os.path.relpath(path, root or Path.cwd())
    except ValueError:
        return path


def render_summary(summary: ScanSummary, root: Optional[Path] = None) -> List[str]:
    lines: List[str] = []
    for result in summary.results:
        if not result.codes:
            continue
        lines.append(f"📄 {_display_path(result.path, root)}")
        lines.extend(f"   {detail}" for detail in result.details)
        lines.append("")

    lines.extend(
        [
            "📊 UTCS Scan Summary",
            "==================",
            f"Files scanned: {summary.files_scanned}",
            f"Total UTCS codes found: {summary.total_codes}",
            f"Valid codes: {summary.valid_codes}",
            f"Invalid codes: {summary.invalid_codes}",
            f"Files with errors: {summary.files_with_errors}",
        ]
    )

    if summary.passed:
        lines.append("")
        lines.append("✅ All UTCS codes are valid!")
        return lines

    lines.append("")
    lines.append("❌ Validation failed! Found invalid UTCS codes.")
    lines.append("")
    lines.append("Files with invalid codes:")
    for result in summary.results:
        if result.errors:
            lines.append(f"   {_display_path(result.path, root)} ({result.errors} errors)")
    return lines


def build_junit_report(summary: ScanSummary, root: Optional[Path] = None) -> ET.ElementTree:
    suites = ET.Element(
        "testsuites",
        name="UTCS Validation",
        tests=str(summary.total_codes),
        failures=str(summary.invalid_codes),
        errors="0",
    )
    for result in summary.results:
        relative = _display_path(result.path, root)
        suite = ET.SubElement(
            suites,
            "testsuite",
            name=relative,
            tests=str(len(result.codes)),
            failures=str(result.errors),
            errors="0",
        )
        for code, validation in zip(result.codes, result.results):
            case = ET.SubElement(suite, "testcase", name=code, classname=relative)
            if not validation.is_valid:
                failure = ET.SubElement(case, "failure", message="Invalid UTCS code")
                failure.text = f"{code}: {', '.join(validation.errors)}"
    return ET.ElementTree(suites)


def write_junit_report(summary: ScanSummary, output_path: Path, root: Optional[Path] = None) -> None:
    tree = build_junit_report(summary, root)
    tree.write(str(output_path), encoding="UTF-8", xml_declaration=True)
    logger.info("Отчёт JUnit записан в %s", output_path)
