"""
Tests for component_picker/recommendations/engine.py.

What we test
------------
recommend():
  - Unset severity or type -> empty, status "incomplete".
  - Pair with an empty or missing matrix cell -> empty, status "no_pattern".
  - No answers -> every eligible candidate in matches at 100, matrix order.
  - Wildcard expectations keep all candidates at 100.
  - A fully mismatched candidate (score 0) is dropped from both lists.
  - A partially matched candidate goes to alternatives with its reasons.
  - Alternatives are score-descending and stable on ties.
  - Undocumented matrix names get placeholder fields.
  - String severity/type names are accepted in any case.
  - Identical inputs give identical results; the answers mapping is not mutated.
"""

from __future__ import annotations

import pytest

from component_picker.knowledge.catalog import ELIGIBILITY_MATRIX
from component_picker.recommendations.engine import RecommendationSet, recommend
from component_picker.taxonomy.message_taxonomy import MessageType, SeverityLevel

TRIGGER_Q = "Who triggers the message?"
PLACEMENT_Q = "Where should it appear?"
ACTION_Q = "Does it require user action?"


def _names(results) -> list[str]:
    return [r.name for r in results]


# ── Incomplete input ──────────────────────────────────────────────────────────

class TestIncompleteInput:
    @pytest.mark.parametrize("severity, msg_type", [
        (None, None),
        (SeverityLevel.MINOR, None),
        (None, MessageType.INDICATOR),
        ("", "indicator"),
    ])
    def test_unset_returns_empty(self, severity, msg_type):
        result = recommend(severity, msg_type, {TRIGGER_Q: "User action"})
        assert result.matches == ()
        assert result.alternatives == ()
        assert result.status == "incomplete"

    def test_unknown_name_treated_as_unset(self):
        result = recommend("catastrophic", "indicator")
        assert result.status == "incomplete"
        assert result.severity is None
        assert result.message_type is MessageType.INDICATOR


# ── No known pattern ──────────────────────────────────────────────────────────

class TestNoPattern:
    def test_critical_indicator_is_empty(self):
        # Scenario D
        result = recommend(SeverityLevel.CRITICAL, MessageType.INDICATOR)
        assert result.is_empty
        assert result.status == "no_pattern"

    def test_critical_indicator_ignores_filters(self):
        result = recommend(
            SeverityLevel.CRITICAL,
            MessageType.INDICATOR,
            {TRIGGER_Q: "User action", PLACEMENT_Q: "Near the problem"},
        )
        assert result.is_empty

    def test_every_empty_cell_is_empty(self):
        for (sev, t), names in ELIGIBILITY_MATRIX.items():
            if not names:
                assert recommend(sev, t).status == "no_pattern"

    def test_missing_cell_is_empty(self, small_kb):
        result = recommend("critical", "notification", kb=small_kb)
        assert result.is_empty
        assert result.status == "no_pattern"


# ── Matches ───────────────────────────────────────────────────────────────────

class TestMatches:
    def test_minor_indicator_no_filters(self):
        # Scenario A
        result = recommend("Minor", "Indicator")
        assert _names(result.matches) == ["Status light"]
        assert result.alternatives == ()
        assert result.status == "ok"

    def test_no_answers_every_candidate_matches(self):
        for (sev, t), names in ELIGIBILITY_MATRIX.items():
            result = recommend(sev, t, {})
            assert _names(result.matches) == list(names)
            for r in result.matches:
                assert r.score == 100
                assert r.reasons == ()

    def test_wildcard_keeps_all_four(self):
        # Scenario B
        result = recommend(
            SeverityLevel.INFORMATIONAL,
            MessageType.INDICATOR,
            {TRIGGER_Q: "User action"},
        )
        assert _names(result.matches) == ["Status light", "Helper text", "Tooltip", "Icon"]
        assert all(r.score == 100 for r in result.matches)
        assert result.alternatives == ()

    def test_catalog_fields_merged(self):
        (toast, alert) = recommend("minor", "notification").matches
        assert toast.name == "Toast"
        assert toast.doc_link == "/docs/components/toast"
        assert "auto-dismiss" in toast.tags
        assert alert.rationale.startswith("Visible without blocking progress")

    def test_matching_answers_stay_in_matches(self):
        result = recommend(
            "major", "notification",
            {TRIGGER_Q: "System event", PLACEMENT_Q: "Page level", ACTION_Q: "Needs response"},
        )
        assert _names(result.matches) == ["Alert"]


# ── Zero score ────────────────────────────────────────────────────────────────

class TestZeroScoreDropped:
    def test_inline_field_error_dropped(self):
        # Scenario C
        result = recommend(
            SeverityLevel.MAJOR,
            MessageType.VALIDATION,
            {ACTION_Q: "Just informative"},
        )
        assert result.matches == ()
        assert result.alternatives == ()

    def test_all_filters_mismatched(self):
        result = recommend(
            "minor", "indicator",
            {PLACEMENT_Q: "Page level", ACTION_Q: "Needs response"},
        )
        assert result.is_empty


# ── Alternatives ──────────────────────────────────────────────────────────────

class TestAlternatives:
    def test_one_match_one_mismatch_is_fifty(self):
        # Scenario E
        result = recommend(
            "major", "validation",
            {TRIGGER_Q: "User action", ACTION_Q: "Just informative"},
        )
        assert result.matches == ()
        (alt,) = result.alternatives
        assert alt.name == "Inline field error"
        assert alt.score == 50
        assert len(alt.reasons) == 1
        assert not alt.is_match

    def test_alternatives_keep_matrix_order_on_ties(self):
        result = recommend(
            "informational", "indicator",
            {PLACEMENT_Q: "Near the problem", ACTION_Q: "Needs response"},
        )
        assert _names(result.alternatives) == ["Status light", "Helper text", "Tooltip", "Icon"]
        assert all(r.score == 50 for r in result.alternatives)

    def test_alternatives_sorted_descending(self):
        result = recommend(
            "minor", "notification",
            {TRIGGER_Q: "User action", PLACEMENT_Q: "Page level"},
        )
        scores = [r.score for r in result.alternatives]
        assert scores == sorted(scores, reverse=True)
        assert all(0 < s < 100 for s in scores)

    def test_no_result_scores_zero(self):
        answers = {TRIGGER_Q: "System event", PLACEMENT_Q: "Near the problem", ACTION_Q: "Depends"}
        for (sev, t) in ELIGIBILITY_MATRIX:
            result = recommend(sev, t, answers)
            for r in result.matches + result.alternatives:
                assert 0 < r.score <= 100

    def test_matches_never_contain_mismatches(self):
        answers = {TRIGGER_Q: "User action", ACTION_Q: "Just informative"}
        for (sev, t) in ELIGIBILITY_MATRIX:
            for r in recommend(sev, t, answers).matches:
                assert r.reasons == ()


# ── Placeholder entries ───────────────────────────────────────────────────────

class TestPlaceholderEntries:
    def test_undocumented_name_gets_placeholder(self, small_kb):
        result = recommend("minor", "indicator", kb=small_kb)
        assert _names(result.matches) == ["Badge", "Ghost", "Banner"]
        ghost = result.matches[1]
        assert ghost.description == ""
        assert ghost.usage_triggers == ()
        assert ghost.rationale == "Direct matrix match"
        assert ghost.scopes == ()
        assert ghost.doc_link == "#"
        assert ghost.tags == ()

    def test_small_kb_partial(self, small_kb):
        # tone expects "Calm" for indicators, size expects "Small"
        result = recommend(
            "minor", "indicator",
            {"What tone fits?": "Urgent", "How big?": "Small"},
            kb=small_kb,
        )
        assert _names(result.alternatives) == ["Badge", "Ghost", "Banner"]
        assert result.alternatives[0].reasons == (
            'Expected "Calm" for "What tone fits?" because it is passive',
        )


# ── Purity ────────────────────────────────────────────────────────────────────

class TestPurity:
    def test_deterministic(self):
        answers = {TRIGGER_Q: "User action", PLACEMENT_Q: "Page level"}
        a = recommend("minor", "notification", answers)
        b = recommend("minor", "notification", answers)
        assert a == b

    def test_answers_not_mutated(self):
        answers = {TRIGGER_Q: "User action", ACTION_Q: None}
        snapshot = dict(answers)
        recommend("major", "validation", answers)
        assert answers == snapshot

    def test_returns_recommendation_set(self):
        result = recommend("minor", "indicator")
        assert isinstance(result, RecommendationSet)
        assert result.severity is SeverityLevel.MINOR
        assert result.message_type is MessageType.INDICATOR
