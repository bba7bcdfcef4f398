"""Тесты валидатора: формат, справочники, блок установки, предупреждения."""

from __future__ import annotations

import pytest

from utcs.validation import CodeValidator, EngineSettings, Registries, validate
from utcs.validation.validator import FORMAT_ERRORS, FORMAT_SUGGESTIONS

from .conftest import NB


class TestEmptyAndMalformed:
    @pytest.mark.parametrize("code", ["", "   ", "\t\n"])
    def test_empty_code(self, registries: Registries, code: str) -> None:
        result = validate(code, registries)
        assert not result.is_valid
        assert result.errors == ["UTCS code cannot be empty"]
        assert result.parsed is None

    @pytest.mark.parametrize("code", ["invalid", "090101-BWBQ100-QNS", "090101-BWBQ100-QNS-1-10"])
    def test_format_errors_are_reported_as_a_block(self, registries: Registries, code: str) -> None:
        result = validate(code, registries)
        assert not result.is_valid
        assert result.errors == list(FORMAT_ERRORS)
        assert len(result.errors) == 3
        assert result.suggestions == list(FORMAT_SUGGESTIONS)
        assert result.parsed is None


class TestRegistryChecks:
    def test_valid_code(self, registries: Registries) -> None:
        result = validate(f"090101{NB}BWBQ100{NB}QNS{NB}[1{NB}10,17,54]", registries)
        assert result.is_valid
        assert result.errors == []
        assert result.parsed is not None

    def test_unknown_classification(self, registries: Registries) -> None:
        result = validate("999999-BWBQ100-QNS-[ALL]", registries)
        assert not result.is_valid
        assert result.errors == ["Unknown UTCS domain/category: 999999"]
        assert result.suggestions == ["Verify UTCS classification against the master domain table"]

    def test_unknown_variant(self, registries: Registries) -> None:
        result = validate("090101-INVALID-QNS-[ALL]", registries)
        assert result.errors == ["Unknown product variant: INVALID"]

    def test_unknown_trigram(self, registries: Registries) -> None:
        result = validate("090101-BWBQ100-XYZ-[ALL]", registries)
        assert result.errors == ["Unknown system/technology trigram: XYZ"]

    def test_all_blocks_are_checked_independently(self, registries: Registries) -> None:
        result = validate("999999-INVALID-XYZ-[ALL]", registries)
        assert result.errors == [
            "Unknown UTCS domain/category: 999999",
            "Unknown product variant: INVALID",
            "Unknown system/technology trigram: XYZ",
        ]
        assert len(result.suggestions) == 3
        assert result.parsed is not None
        assert result.parsed.classification == "999999"

    def test_empty_registries_reject_every_block(self) -> None:
        result = validate("090101-BWBQ100-QNS-[ALL]", Registries.empty())
        assert len(result.errors) == 3


class TestInstallationChecks:
    def test_invalid_characters(self, registries: Registries) -> None:
        result = validate("090101-BWBQ100-QNS-[1@2]", registries)
        assert not result.is_valid
        assert result.errors == ["Installation contains invalid characters"]
        assert result.parsed is not None

    def test_lowercase_is_an_invalid_character(self, registries: Registries) -> None:
        result = validate("090101-BWBQ100-QNS-[all]", registries)
        assert "Installation contains invalid characters" in result.errors

    def test_descending_range_is_tolerated(self, registries: Registries) -> None:
        result = validate(f"090101{NB}BWBQ100{NB}QNS{NB}[10{NB}5]", registries)
        assert result.is_valid
        assert result.warnings == []

    def test_overlong_number_does_not_raise(self, registries: Registries) -> None:
        result = validate("090101-BWBQ100-QNS-[" + "1" * 5000 + "]", registries)
        assert result.is_valid
        assert result.warnings == []

    def test_huge_range_is_counted_not_expanded(self, registries: Registries) -> None:
        result = validate("090101-BWBQ100-QNS-[1-10000000000]", registries)
        assert result.is_valid
        assert result.warnings == ["Large installation range detected (10000000000 units)"]

    def test_blank_installation_has_no_units(self, registries: Registries) -> None:
        result = validate("090101-BWBQ100-QNS-[   ]", registries)
        assert result.errors == ["Invalid installation format"]
        assert result.suggestions[-1].startswith("Use formats like:")

    def test_registry_and_installation_errors_accumulate(self, registries: Registries) -> None:
        result = validate("999999-BWBQ100-QNS-[1;2]", registries)
        assert result.errors == [
            "Unknown UTCS domain/category: 999999",
            "Installation contains invalid characters",
        ]


class TestWarnings:
    def test_large_range(self, registries: Registries) -> None:
        result = validate(f"090101{NB}BWBQ100{NB}QNS{NB}[1{NB}150]", registries)
        assert result.is_valid
        assert result.warnings == ["Large installation range detected (150 units)"]

    def test_range_of_exactly_threshold_is_not_large(self, registries: Registries) -> None:
        assert validate("090101-BWBQ100-QNS-[1-100]", registries).warnings == []

    def test_range_starting_at_zero(self, registries: Registries) -> None:
        result = validate("090101-BWBQ100-QNS-[0-5]", registries)
        assert result.is_valid
        assert result.warnings == ["Installation units should typically start from 1"]

    def test_each_range_is_checked(self, registries: Registries) -> None:
        result = validate("090101-BWBQ100-QNS-[0-200,1-101]", registries)
        assert result.warnings == [
            "Installation units should typically start from 1",
            "Large installation range detected (201 units)",
            "Large installation range detected (101 units)",
        ]

    def test_version_suffix(self, mini_registries: Registries) -> None:
        result = validate("090101-TESTAV2-QNS-[1]", mini_registries)
        assert result.is_valid
        assert result.warnings == [
            "Consider using a new product variant code for major redesigns rather than version suffixes"
        ]

    def test_custom_threshold(self, mini_registries: Registries) -> None:
        validator = CodeValidator(mini_registries, EngineSettings(large_range_threshold=10))
        result = validator.validate("090101-BWBQ100-QNS-[1-20]")
        assert result.is_valid
        assert result.warnings == ["Large installation range detected (20 units)"]


def test_results_are_deterministic(registries: Registries) -> None:
    code = "999999-BWBQ100-QNS-[0-500]"
    assert validate(code, registries).to_dict() == validate(code, registries).to_dict()


def test_to_dict(mini_registries: Registries) -> None:
    data = validate("090101-BWBQ100-QNS-[ALL]", mini_registries).to_dict()
    assert data["is_valid"] is True
    assert data["parsed"]["variant"] == "BWBQ100"
    assert data["errors"] == []
