"""
Read-only knowledge base: severities, message types, component catalog,
eligibility matrix and refinement filters.

A ``KnowledgeBase`` is built once at process start and never mutated
afterwards, so any number of callers may read it concurrently without
locking.  ``DEFAULT_KNOWLEDGE_BASE`` wraps the built-in tables from
``component_picker.knowledge.catalog``; ``load_knowledge_base()`` in
``component_picker.knowledge.loader`` builds one from an authored TOML file.

Lookups are total:
  - ``component_entry()`` on an undocumented name returns a placeholder
    entry, since the matrix may reference components whose docs are not
    written yet.
  - ``eligible_candidates()`` on a pair with no matrix cell returns an
    empty list ("no known component").
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from component_picker.knowledge.catalog import (
    COMPONENTS,
    ELIGIBILITY_MATRIX,
    REFINEMENT_FILTERS,
)
from component_picker.models.component import (
    ComponentEntry,
    MessageTypeDefinition,
    RefinementFilter,
    SeverityDefinition,
)
from component_picker.taxonomy.message_taxonomy import (
    MESSAGE_TYPE_DESCRIPTIONS,
    SEVERITY_DESCRIPTIONS,
    MessageType,
    SeverityLevel,
)


class KnowledgeBase:
    """Immutable container for the static reference data."""

    def __init__(
        self,
        components: Mapping[str, ComponentEntry],
        matrix: Mapping[tuple[SeverityLevel, MessageType], Iterable[str]],
        filters: Iterable[RefinementFilter],
        severity_descriptions: Optional[Mapping[SeverityLevel, str]] = None,
        type_descriptions: Optional[Mapping[MessageType, str]] = None,
    ) -> None:
        sev_desc = {**SEVERITY_DESCRIPTIONS, **(severity_descriptions or {})}
        type_desc = {**MESSAGE_TYPE_DESCRIPTIONS, **(type_descriptions or {})}

        self._severities: tuple[SeverityDefinition, ...] = tuple(
            SeverityDefinition(level=level, description=sev_desc[level])
            for level in SeverityLevel
        )
        self._types: tuple[MessageTypeDefinition, ...] = tuple(
            MessageTypeDefinition(message_type=t, description=type_desc[t])
            for t in MessageType
        )
        self._components: Mapping[str, ComponentEntry] = MappingProxyType(dict(components))
        self._matrix: Mapping[tuple[SeverityLevel, MessageType], tuple[str, ...]] = (
            MappingProxyType({pair: tuple(names) for pair, names in matrix.items()})
        )
        self._filters: tuple[RefinementFilter, ...] = tuple(filters)

    # ── Accessors ─────────────────────────────────────────────────────────────

    def severity_levels(self) -> list[SeverityDefinition]:
        """Severity definitions, most severe first."""
        return list(self._severities)

    def message_types(self) -> list[MessageTypeDefinition]:
        return list(self._types)

    def component_entry(self, name: str) -> ComponentEntry:
        """Catalog entry for ``name``; a placeholder when it is undocumented."""
        entry = self._components.get(name)
        if entry is None:
            return ComponentEntry.placeholder(name)
        return entry

    def component_names(self) -> list[str]:
        return list(self._components)

    def eligible_candidates(
        self,
        severity: SeverityLevel,
        message_type: MessageType,
    ) -> list[str]:
        """Candidate component names for a pair, in matrix enumeration order."""
        return list(self._matrix.get((severity, message_type), ()))

    def matrix_cells(self) -> Mapping[tuple[SeverityLevel, MessageType], tuple[str, ...]]:
        return self._matrix

    def refinement_filters(self) -> list[RefinementFilter]:
        """Refinement filters in definition (evaluation) order."""
        return list(self._filters)

    def filter_by_key(self, key_or_question: str) -> Optional[RefinementFilter]:
        """Find a filter by its slug (case-insensitive) or exact question text."""
        needle = key_or_question.strip()
        for f in self._filters:
            if f.question == needle or f.key == needle.lower():
                return f
        return None

    def __repr__(self) -> str:
        return (
            f"KnowledgeBase(components={len(self._components)}, "
            f"cells={len(self._matrix)}, filters={len(self._filters)})"
        )


DEFAULT_KNOWLEDGE_BASE = KnowledgeBase(
    components=COMPONENTS,
    matrix=ELIGIBILITY_MATRIX,
    filters=REFINEMENT_FILTERS,
)
