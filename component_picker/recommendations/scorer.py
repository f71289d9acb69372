"""
Candidate scoring: fractional agreement between a user's refinement answers
and the answers a candidate's message type expects.

Score formula (integer, 0–100)
------------------------------
    applied = answered filters
    matched = answered filters whose expected answer is the wildcard
              OR equals the user's answer
    score   = 100                                  if applied == 0
            = round_half_up(100 * matched / applied) otherwise

Every answered filter carries equal weight; unanswered filters neither
reward nor penalise.  The score only modulates confidence among candidates
the eligibility matrix already allows — matrix membership is checked by the
engine before scoring.

Mismatch reasons
----------------
One reason per answered, mismatched filter, in filter definition order::

    Expected "Needs response" for "Does it require user action?" because
    validation errors need to be addressed
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional

from component_picker.models.component import RefinementFilter
from component_picker.models.recommendation import PERFECT_SCORE
from component_picker.taxonomy.message_taxonomy import MessageType


@dataclass(frozen=True)
class FilterScore:
    """Outcome of scoring one candidate against the answered filters.

    Attributes:
        score:   Integer match score in [0, 100].
        reasons: Mismatch reason strings, in filter order.
        applied: Number of filters the user answered.
        matched: Number of answered filters that agreed (wildcards included).
    """

    score:   int
    reasons: tuple[str, ...] = field(default_factory=tuple)
    applied: int = 0
    matched: int = 0


def score_candidate(
    candidate_name: str,
    message_type:   MessageType,
    filter_answers: Optional[Mapping[str, Optional[str]]],
    filters:        Iterable[RefinementFilter],
) -> FilterScore:
    """Score one eligible candidate against the user's filter answers.

    The result depends only on ``message_type`` and the answers; the
    candidate name is carried for symmetry with the engine and for callers
    that log per-candidate outcomes.

    Args:
        candidate_name: Component name being scored.
        message_type:   Active message type (selects each filter's expected answer).
        filter_answers: Question text → selected option.  Missing, None or
                        blank entries count as unanswered.  Never mutated.
        filters:        Refinement filters in definition order.

    Returns:
        FilterScore with score, reasons, applied and matched counts.
    """
    answers = filter_answers or {}
    applied = 0
    matched = 0
    reasons: list[str] = []

    for f in filters:
        answer = answers.get(f.question)
        if not _is_answered(answer):
            continue
        applied += 1

        if f.accepts_any(message_type):
            matched += 1
            continue

        expected = f.expected_answer(message_type)
        if answer == expected:
            matched += 1
        else:
            reasons.append(build_reason(f, expected))

    if applied == 0:
        score = PERFECT_SCORE
    else:
        score = _round_half_up(PERFECT_SCORE * matched, applied)

    return FilterScore(
        score=_clamp(score, 0, PERFECT_SCORE),
        reasons=tuple(reasons),
        applied=applied,
        matched=matched,
    )


def build_reason(f: RefinementFilter, expected: str) -> str:
    """Mismatch reason for a filter whose expected answer was not given."""
    explanation = f.explanation_for(expected)
    return f'Expected "{expected}" for "{f.question}" {explanation}'.rstrip()


# ── Helpers ───────────────────────────────────────────────────────────────────

def _is_answered(answer: Optional[str]) -> bool:
    return answer is not None and bool(str(answer).strip())


def _round_half_up(numerator: int, denominator: int) -> int:
    # Exact integer form of floor(numerator / denominator + 0.5).
    return (2 * numerator + denominator) // (2 * denominator)


def _clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, value))
