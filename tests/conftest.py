"""
Shared pytest fixtures for the component picker test suite.

Provides:
  - ``kb``: the built-in knowledge base.
  - ``small_kb``: a tiny hand-built knowledge base with two filters and a
    ranking-friendly matrix, for engine ordering tests.
  - ``catalog_toml``: writes a small TOML catalog to ``tmp_path``.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from component_picker.knowledge.base import DEFAULT_KNOWLEDGE_BASE, KnowledgeBase
from component_picker.models.component import ComponentEntry, RefinementFilter
from component_picker.taxonomy.message_taxonomy import (
    MessageType,
    PlacementScope,
    SeverityLevel,
)

TRIGGER_Q = "Who triggers the message?"
PLACEMENT_Q = "Where should it appear?"
ACTION_Q = "Does it require user action?"


@pytest.fixture
def kb() -> KnowledgeBase:
    return DEFAULT_KNOWLEDGE_BASE


def make_filter(
    key: str = "tone",
    question: str = "What tone fits?",
    options: tuple[str, ...] = ("Calm", "Urgent", "Any"),
    wildcard: str | None = "Any",
    expected: dict | None = None,
    explanations: dict | None = None,
) -> RefinementFilter:
    return RefinementFilter(
        key=key,
        question=question,
        options=options,
        wildcard=wildcard,
        expected=expected or {
            MessageType.INDICATOR:    "Calm",
            MessageType.VALIDATION:   "Urgent",
            MessageType.NOTIFICATION: "Any",
        },
        explanations=explanations if explanations is not None else {"Calm": "because it is passive"},
    )


@pytest.fixture
def small_kb() -> KnowledgeBase:
    """Two filters; Minor + Indicator lists three candidates, one undocumented."""
    return KnowledgeBase(
        components={
            "Badge": ComponentEntry(
                name="Badge",
                description="Small count marker.",
                scopes=(PlacementScope.INLINE,),
                doc_link="/docs/badge",
                tags=("count",),
            ),
            "Banner": ComponentEntry(name="Banner", rationale="Hard to miss."),
        },
        matrix={
            (SeverityLevel.MINOR, MessageType.INDICATOR): ("Badge", "Ghost", "Banner"),
            (SeverityLevel.MAJOR, MessageType.INDICATOR): (),
        },
        filters=[
            make_filter(),
            make_filter(
                key="size",
                question="How big?",
                options=("Small", "Large", "Whatever"),
                wildcard="Whatever",
                expected={
                    MessageType.INDICATOR:    "Small",
                    MessageType.VALIDATION:   "Small",
                    MessageType.NOTIFICATION: "Large",
                },
                explanations={},
            ),
        ],
    )


CATALOG_TOML = '''
[severities.minor]
description = "Barely matters"

[components."Badge"]
description = "Small count marker."
usage_triggers = ["Unread counts"]
rationale = "Compact."
scopes = ["inline"]
doc_link = "/docs/badge"
tags = ["count"]

[components."Banner"]
description = "Full-width message."
scopes = ["Global", "page"]

[matrix.minor]
indicator = ["Badge", "Ghost"]
notification = ["Banner"]

[[filters]]
key = "tone"
question = "What tone fits?"
options = ["Calm", "Urgent", "Any"]
wildcard = "Any"

[filters.expected]
indicator = "Calm"
validation = "Urgent"
notification = "Any"

[filters.explanations]
"Calm" = "because it is passive"
'''


@pytest.fixture
def catalog_toml(tmp_path: Path) -> Path:
    path = tmp_path / "catalog.toml"
    path.write_text(CATALOG_TOML, encoding="utf-8")
    return path
