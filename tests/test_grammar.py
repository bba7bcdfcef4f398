from __future__ import annotations

import pytest

from utcs.validation import ParsedCode, extract_codes, parse

from .conftest import NB


class TestParse:
    def test_parses_all_four_blocks(self) -> None:
        code = "090101-BWBQ100-QNS-[1-10,17,54]"
        assert parse(code) == ParsedCode(
            classification="090101",
            variant="BWBQ100",
            system="QNS",
            installation="1-10,17,54",
            source_text=code,
        )

    def test_accepts_non_breaking_hyphen(self) -> None:
        code = f"090101{NB}BWBQ100{NB}QNS{NB}[1{NB}10,17,54]"
        parsed = parse(code)
        assert parsed is not None
        assert parsed.installation == f"1{NB}10,17,54"

    def test_accepts_en_dash(self) -> None:
        parsed = parse("090101–BWBQ100–QNS–[ALL]")
        assert parsed is not None
        assert parsed.system == "QNS"

    def test_mixed_delimiters_parse_identically(self) -> None:
        mixed = parse(f"090101-BWBQ100{NB}QNS-[ALL]")
        plain = parse("090101-BWBQ100-QNS-[ALL]")
        canonical = parse(f"090101{NB}BWBQ100{NB}QNS{NB}[ALL]")
        assert mixed is not None and plain is not None and canonical is not None
        fields = lambda p: (p.classification, p.variant, p.system, p.installation)  # noqa: E731
        assert fields(mixed) == fields(plain) == fields(canonical)

    def test_surrounding_whitespace_is_trimmed(self) -> None:
        raw = "  090101-BWBQ100-QNS-[ALL]\n"
        parsed = parse(raw)
        assert parsed is not None
        assert parsed.installation == "ALL"
        assert parsed.source_text == raw

    @pytest.mark.parametrize(
        "code",
        [
            "",
            "invalid",
            "12345-INVALID",
            "090101-BWBQ100-QNS",
            "090101-BWBQ100-QNS-1-10",
            "ABCDEF-BWBQ100-QNS-[ALL]",
            "090101-BWBQ10-QNS-[ALL]",
            "090101-BWBQ1000-QNS-[ALL]",
            "090101-BWBQ100-QN-[ALL]",
            "090101-BWBQ100-QNSX-[ALL]",
            "090101-bwbq100-QNS-[ALL]",
            "090101-BWBQ100-QNS-[]",
            "090101-BWBQ100-QNS-[ALL",
            "090101-BWBQ100-QNS-[ALL] trailing",
            "x090101-BWBQ100-QNS-[ALL]",
            "090101_BWBQ100-QNS-[ALL]",
            "090101-BWBQ100-QNS-[1]2]",
            "٠٩٠١٠١-BWBQ100-QNS-[ALL]",
        ],
    )
    def test_rejects_malformed_codes(self, code: str) -> None:
        assert parse(code) is None

    def test_canonical_rendering(self) -> None:
        parsed = parse("090101-BWBQ100-QNS-[1-10]")
        assert parsed is not None
        assert parsed.canonical() == f"090101{NB}BWBQ100{NB}QNS{NB}[1-10]"


class TestExtractCodes:
    def test_extracts_codes_in_order_and_skips_near_misses(self) -> None:
        content = f"""
        This document references the following systems:
        - Quantum navigation: 090101{NB}BWBQ100{NB}QNS{NB}[1{NB}10,17,54]
        - Electric propulsion: 431210-HYBE180-EPS-[ALL]
        Some invalid code: 123-INVALID-XYZ-[1]
        """
        assert extract_codes(content) == [
            f"090101{NB}BWBQ100{NB}QNS{NB}[1{NB}10,17,54]",
            "431210-HYBE180-EPS-[ALL]",
        ]

    def test_keeps_duplicates(self) -> None:
        content = "090101-BWBQ100-QNS-[1] and again 090101-BWBQ100-QNS-[1]"
        assert extract_codes(content) == ["090101-BWBQ100-QNS-[1]"] * 2

    def test_adjacent_codes_do_not_overlap(self) -> None:
        content = "090101-BWBQ100-QNS-[1]431210-HYBE180-EPS-[ALL]"
        assert extract_codes(content) == ["090101-BWBQ100-QNS-[1]", "431210-HYBE180-EPS-[ALL]"]

    def test_leftmost_match_inside_longer_digit_run(self) -> None:
        assert extract_codes("1234567-BWBQ100-QNS-[1]") == ["234567-BWBQ100-QNS-[1]"]

    def test_installation_stops_at_first_closing_bracket(self) -> None:
        assert extract_codes("090101-BWBQ100-QNS-[1,2]]") == ["090101-BWBQ100-QNS-[1,2]"]

    def test_no_codes(self) -> None:
        assert extract_codes("nothing to see here [1-2]") == []
