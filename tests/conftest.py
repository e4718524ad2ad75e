"""Shared test matchers and conformance fixture loading.

Conformance fixtures live in tests/fixtures/*.yaml. Each document holds an
optional label, a list of stub components, the description the conjunction
must render, and the expected match result and mismatch text.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from hamcrest.core.base_matcher import BaseMatcher

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"


class StubMatcher(BaseMatcher[Any]):
    """Matcher with a fixed result and fixed texts that counts its calls."""

    def __init__(self, result: bool, description: str, mismatch: str = "") -> None:
        self.result = result
        self.description = description
        self.mismatch = mismatch
        self.calls = 0

    def _matches(self, item: Any) -> bool:
        self.calls += 1
        return self.result

    def describe_to(self, description: Any) -> None:
        description.append_text(self.description)

    def describe_mismatch(self, item: Any, mismatch_description: Any) -> None:
        mismatch_description.append_text(self.mismatch)


@dataclass
class FixtureCase:
    """A single conjunction case from a conformance fixture."""

    fixture_name: str
    case_name: str
    label: str | None
    components: list[dict[str, Any]]
    description: str
    expect: bool
    mismatch: str

    def stubs(self) -> list[StubMatcher]:
        return [
            StubMatcher(c["matches"], c["description"], c.get("mismatch", ""))
            for c in self.components
        ]


# ─── Fixture loading ────────────────────────────────────────────────────────


def load_fixtures() -> list[FixtureCase]:
    """Load every conformance fixture case."""
    cases: list[FixtureCase] = []
    for yaml_file in sorted(FIXTURE_DIR.glob("*.yaml")):
        cases.extend(_load_file(yaml_file))
    return cases


def _load_file(path: Path) -> list[FixtureCase]:
    """Load a single fixture YAML file (may contain multiple documents)."""
    cases: list[FixtureCase] = []
    with path.open() as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            for case in doc["cases"]:
                cases.append(
                    FixtureCase(
                        fixture_name=f"{path.stem}::{doc['name']}",
                        case_name=case["name"],
                        label=case.get("label"),
                        components=case["components"],
                        description=case["description"],
                        expect=case["expect"],
                        mismatch=case.get("mismatch", ""),
                    )
                )
    return cases
