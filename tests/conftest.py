"""Общие фикстуры: справочники из поставки и минимальные справочники в памяти."""

from __future__ import annotations

import pytest

from utcs.validation import (
    Registries,
    TrigramInfo,
    UTCSEngine,
    VariantInfo,
    load_registries,
    validation_config_dir,
)

NB = "‑"  # неразрывный дефис, канонический разделитель


@pytest.fixture(scope="session")
def registries() -> Registries:
    return load_registries(validation_config_dir())


@pytest.fixture
def engine(registries: Registries) -> UTCSEngine:
    return UTCSEngine(registries)


@pytest.fixture
def mini_registries() -> Registries:
    return Registries(
        domains={"090101": "Quantum · Quantum Navigation System", "431210": "Energy · Electric Propulsion System"},
        variants={
            "BWBQ100": VariantInfo(code="BWBQ100", name="Blended Wing Body Quantum 100", type="passenger"),
            "TESTAV2": VariantInfo(code="TESTAV2", name="Test airframe, second revision", type="passenger"),
        },
        trigrams={
            "QNS": TrigramInfo(code="QNS", name="Quantum Navigation System", family="Quantum Navigation", common=True),
            "EPS": TrigramInfo(code="EPS", name="Electric Propulsion System", family="Electric Propulsion", common=True),
        },
    )
