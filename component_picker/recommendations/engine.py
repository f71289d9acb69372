"""
Recommendation engine: (severity, message type, filter answers) →
perfect matches + ranked alternatives.

Usage flow
----------
1. eligible_candidates(severity, message_type)
   -> candidate names from the eligibility matrix (hard gate)

2. score_candidate(name, message_type, answers, filters)
   -> FilterScore per candidate

3. partition
   score == 100      -> matches       (matrix enumeration order)
   0 < score < 100   -> alternatives  (score descending, stable)
   score == 0        -> dropped

Result states
-------------
``RecommendationSet.status`` lets a presentation layer tell apart:
  "incomplete" — severity or message type not selected yet.
  "no_pattern" — both selected, but no component fits the combination.
  "ok"         — at least one result to show.

The engine is a pure function of its inputs and the immutable knowledge
base: no caching, no shared mutable state, safe to call concurrently.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal, Mapping, Optional

from component_picker.knowledge.base import DEFAULT_KNOWLEDGE_BASE, KnowledgeBase
from component_picker.models.recommendation import RecommendationResult
from component_picker.recommendations.scorer import score_candidate
from component_picker.taxonomy.message_taxonomy import (
    MessageType,
    SeverityLevel,
    coerce_message_type,
    coerce_severity,
)

logger = logging.getLogger(__name__)

ResultStatus = Literal["incomplete", "no_pattern", "ok"]


@dataclass(frozen=True)
class RecommendationSet:
    """Engine output for one (severity, message type, answers) input.

    Attributes:
        severity:     Selected severity, or None when unset.
        message_type: Selected message type, or None when unset.
        matches:      Results scoring 100, in matrix enumeration order.
        alternatives: Results scoring 1–99, score descending.
    """

    severity:     Optional[SeverityLevel]
    message_type: Optional[MessageType]
    matches:      tuple[RecommendationResult, ...] = field(default_factory=tuple)
    alternatives: tuple[RecommendationResult, ...] = field(default_factory=tuple)

    @property
    def status(self) -> ResultStatus:
        if self.severity is None or self.message_type is None:
            return "incomplete"
        if not self.matches and not self.alternatives:
            return "no_pattern"
        return "ok"

    @property
    def is_empty(self) -> bool:
        return not self.matches and not self.alternatives


def recommend(
    severity:       SeverityLevel | str | None,
    message_type:   MessageType | str | None,
    filter_answers: Optional[Mapping[str, Optional[str]]] = None,
    kb:             Optional[KnowledgeBase] = None,
) -> RecommendationSet:
    """Recommend feedback components for a message classification.

    Args:
        severity:       Severity level (member or name), or None if unset.
        message_type:   Message type (member or name), or None if unset.
        filter_answers: Question text → selected option.  Read only.
        kb:             Knowledge base to consult.  Defaults to the built-in one.

    Returns:
        RecommendationSet.  Never raises for any input combination.
    """
    if kb is None:
        kb = DEFAULT_KNOWLEDGE_BASE
    sev = coerce_severity(severity)
    msg_type = coerce_message_type(message_type)

    if sev is None or msg_type is None:
        return RecommendationSet(severity=sev, message_type=msg_type)

    candidates = kb.eligible_candidates(sev, msg_type)
    if not candidates:
        logger.debug("No eligible components for %s + %s", sev.label, msg_type.label)
        return RecommendationSet(severity=sev, message_type=msg_type)

    filters = kb.refinement_filters()
    matches: list[RecommendationResult] = []
    alternatives: list[RecommendationResult] = []

    for name in candidates:
        fs = score_candidate(name, msg_type, filter_answers, filters)
        logger.debug(
            "Scored %s for %s + %s: %d (%d/%d filters matched)",
            name, sev.label, msg_type.label, fs.score, fs.matched, fs.applied,
        )
        if fs.score == 0:
            continue

        result = RecommendationResult.from_entry(
            name, kb.component_entry(name), fs.score, fs.reasons,
        )
        if result.is_match:
            matches.append(result)
        else:
            alternatives.append(result)

    # sorted() is stable: equal scores keep matrix enumeration order.
    alternatives = sorted(alternatives, key=lambda r: -r.score)

    return RecommendationSet(
        severity=sev,
        message_type=msg_type,
        matches=tuple(matches),
        alternatives=tuple(alternatives),
    )
