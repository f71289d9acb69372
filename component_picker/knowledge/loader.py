"""
Knowledge base loader: authored TOML catalog → ``KnowledgeBase``.

Lets a design-system team maintain its own catalog without editing code.
The file is read once at start-up; the resulting knowledge base is
immutable like the built-in one.

TOML structure expected
-----------------------
    [severities.critical]
    description = "High impact, blocks users from continuing"

    [types.indicator]
    description = "Shows current state passively"

    [components."Status light"]
    description    = "..."
    usage_triggers = ["Stock level indicators", "System status"]
    rationale      = "..."
    scopes         = ["inline"]
    doc_link       = "/docs/components/status-light"
    tags           = ["indicator", "status"]

    [matrix.minor]
    indicator    = ["Status light"]
    notification = ["Toast", "Alert"]

    [[filters]]
    key      = "trigger"
    question = "Who triggers the message?"
    options  = ["User action", "System event", "Either"]
    wildcard = "Either"
    [filters.expected]
    indicator    = "Either"
    validation   = "User action"
    notification = "System event"
    [filters.explanations]
    "User action" = "because validation typically responds to what users do"

``[severities]`` and ``[types]`` are optional and only override
descriptions; the set of levels and types is fixed.  Matrix cells not
listed are absent (the engine returns no candidates for them).

Usage
-----
    from component_picker.knowledge.loader import load_knowledge_base

    kb = load_knowledge_base(Path("config/knowledge/catalog.toml"))
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from component_picker.knowledge.base import KnowledgeBase
from component_picker.models.component import ComponentEntry, RefinementFilter
from component_picker.taxonomy.message_taxonomy import MessageType, SeverityLevel

log = logging.getLogger(__name__)

_VALID_SEVERITIES: frozenset[str] = frozenset(s.value for s in SeverityLevel)
_VALID_TYPES: frozenset[str] = frozenset(t.value for t in MessageType)


class CatalogError(ValueError):
    """Raised when a catalog file references an unknown severity or message type,
    or a description override is missing its text."""


def load_knowledge_base(path: Path) -> KnowledgeBase:
    """Load and validate a TOML catalog file.

    Args:
        path: Path to the catalog TOML file.

    Returns:
        A new ``KnowledgeBase``.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        tomllib.TOMLDecodeError: If the TOML is malformed.
        CatalogError: If a severity or message type key is unknown, or a
            ``[severities]``/``[types]`` block has no ``description``.
        pydantic.ValidationError: If a component or filter fails validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(
            f"Catalog file not found: {path}\n"
            "Set knowledge.catalog_path in config/default.toml or pass --catalog."
        )

    with open(path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    components = {
        entry.name: entry
        for entry in (
            _parse_component(name, block)
            for name, block in raw.get("components", {}).items()
        )
    }
    matrix = _parse_matrix(raw.get("matrix", {}))
    filters = [_parse_filter(block) for block in raw.get("filters", [])]

    kb = KnowledgeBase(
        components=components,
        matrix=matrix,
        filters=filters,
        severity_descriptions={
            _severity(k): _description("severities", k, v)
            for k, v in raw.get("severities", {}).items()
        },
        type_descriptions={
            _message_type(k): _description("types", k, v)
            for k, v in raw.get("types", {}).items()
        },
    )
    log.info(
        "Loaded catalog %s: %d components, %d matrix cells, %d filters",
        path, len(components), len(matrix), len(filters),
    )
    return kb


# ── Parsers ───────────────────────────────────────────────────────────────────

def _parse_component(name: str, raw: dict[str, Any]) -> ComponentEntry:
    return ComponentEntry(
        name=raw.get("name", name),
        description=raw.get("description", ""),
        usage_triggers=tuple(raw.get("usage_triggers", ())),
        rationale=raw.get("rationale", ""),
        scopes=tuple(s.lower() for s in raw.get("scopes", ())),
        doc_link=raw.get("doc_link", "#"),
        tags=tuple(raw.get("tags", ())),
    )


def _parse_matrix(
    raw: dict[str, dict[str, list[str]]],
) -> dict[tuple[SeverityLevel, MessageType], tuple[str, ...]]:
    matrix: dict[tuple[SeverityLevel, MessageType], tuple[str, ...]] = {}
    for sev_key, row in raw.items():
        severity = _severity(sev_key)
        for type_key, names in row.items():
            matrix[(severity, _message_type(type_key))] = tuple(names)
    return matrix


def _parse_filter(raw: dict[str, Any]) -> RefinementFilter:
    return RefinementFilter(
        key=raw.get("key", ""),
        question=raw.get("question", ""),
        description=raw.get("description", ""),
        options=tuple(raw.get("options", ())),
        wildcard=raw.get("wildcard"),
        expected={
            _message_type(k): v for k, v in raw.get("expected", {}).items()
        },
        explanations=dict(raw.get("explanations", {})),
    )


def _severity(key: str) -> SeverityLevel:
    if key.lower() not in _VALID_SEVERITIES:
        raise CatalogError(
            f"Unknown severity '{key}'. Must be one of {sorted(_VALID_SEVERITIES)}."
        )
    return SeverityLevel(key.lower())


def _message_type(key: str) -> MessageType:
    if key.lower() not in _VALID_TYPES:
        raise CatalogError(
            f"Unknown message type '{key}'. Must be one of {sorted(_VALID_TYPES)}."
        )
    return MessageType(key.lower())


def _description(section: str, key: str, block: Any) -> str:
    if not isinstance(block, dict) or not isinstance(block.get("description"), str):
        raise CatalogError(f"[{section}.{key}] needs a string 'description'.")
    return block["description"]
