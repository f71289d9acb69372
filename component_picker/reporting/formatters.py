"""
ASCII terminal formatters for CLI commands.

All formatters accept engine results or knowledge base objects and return
plain multi-line strings suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).

Result states
-------------
``format_recommendations()`` renders one of three screens depending on
``RecommendationSet.status``::

  incomplete  -> "Get started" hint
  no_pattern  -> "No components found for Critical + Indicator" + suggestions
  ok          -> "Perfect matches (n)" / "Possible alternatives (n)" cards
"""

from __future__ import annotations

from component_picker.knowledge.base import KnowledgeBase
from component_picker.models.component import ComponentEntry
from component_picker.models.recommendation import RecommendationResult
from component_picker.recommendations.engine import RecommendationSet
from component_picker.taxonomy.message_taxonomy import MessageType, SeverityLevel

NO_PATTERN_SUGGESTIONS: tuple[str, ...] = (
    'For critical issues, consider "Notification" type instead',
    'For validation, "Major" or "Minor" severity usually works better',
    'For indicators, try "Informational" or "Minor" severity',
)


# ── Recommendations ───────────────────────────────────────────────────────────


def format_recommendations(result: RecommendationSet) -> str:
    """Format an engine result as cards grouped into matches and alternatives.

    Args:
        result: Output of ``recommend()``.

    Returns:
        Multi-line string.
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== Recommended components ===")

    if result.status == "incomplete":
        lines.append("")
        lines.append("  Get started")
        lines.append("  Select severity and message type to see recommendations.")
        return "\n".join(lines)

    combo = f"{result.severity.label} + {result.message_type.label}"  # type: ignore[union-attr]
    lines.append(f"  Classification: {combo}")

    if result.status == "no_pattern":
        lines.append("")
        lines.append(f"  No components found for {combo}")
        lines.append(
            "  This combination typically indicates a design pattern that might "
            "need reconsideration."
        )
        lines.append("  Suggestions:")
        for s in NO_PATTERN_SUGGESTIONS:
            lines.append(f"    - {s}")
        return "\n".join(lines)

    if result.matches:
        lines.append("")
        lines.append(f"  [OK] Perfect matches ({len(result.matches)})")
        for r in result.matches:
            lines.extend(_format_card(r))

    if result.alternatives:
        lines.append("")
        lines.append(f"  [!] Possible alternatives ({len(result.alternatives)})")
        for r in result.alternatives:
            lines.extend(_format_card(r))

    return "\n".join(lines)


def _format_card(r: RecommendationResult) -> list[str]:
    lines = [
        "",
        f"    {r.name}  ({r.score}% match)  {r.doc_link}",
    ]
    if r.description:
        lines.append(f"      {r.description}")

    if r.is_match and r.rationale:
        lines.append("      Why this matches:")
        lines.append(f"        {r.rationale}")

    if not r.is_match and r.reasons:
        lines.append("      Why this may not match perfectly:")
        for reason in r.reasons:
            lines.append(f"        - {reason}")

    lines.append("      Where to place this component:")
    lines.append(f"        {format_scopes(r)}")

    if r.tags:
        lines.append(f"      Tags: {', '.join(r.tags)}")
    return lines


def format_scopes(entry: RecommendationResult | ComponentEntry) -> str:
    """``"Global level, Section level"``, or ``"Not specified"`` with no scopes."""
    if not entry.scopes:
        return "Not specified"
    return ", ".join(f"{s.label} level" for s in entry.scopes)


# ── Knowledge base tables ─────────────────────────────────────────────────────


def format_filters(kb: KnowledgeBase) -> str:
    """List refinement filters with options and the expected answer per type."""
    lines: list[str] = ["", "=== Refinement filters ==="]
    types = list(MessageType)
    for f in kb.refinement_filters():
        lines.append("")
        lines.append(f"  [{f.key}] {f.question}")
        if f.description:
            lines.append(f"    {f.description}")
        opts = [f"{o} (any)" if o == f.wildcard else o for o in f.options]
        lines.append(f"    Options:  {' | '.join(opts)}")
        lines.append("    Expected:")
        for t in types:
            lines.append(f"      {t.label:<14} {f.expected_answer(t)}")
    return "\n".join(lines)


def format_matrix(kb: KnowledgeBase) -> str:
    """Severity × message type eligibility grid; ``-`` marks an empty cell."""
    types = list(MessageType)
    col = 34
    header = f"  {'Severity':<14}" + "".join(f"{t.label:<{col}}" for t in types)
    lines: list[str] = ["", "=== Eligibility matrix ===", header.rstrip()]
    lines.append("  " + "-" * (len(header) - 2))
    for sev in SeverityLevel:
        cells = []
        for t in types:
            names = kb.eligible_candidates(sev, t)
            cells.append(f"{', '.join(names) or '-':<{col}}")
        lines.append((f"  {sev.label:<14}" + "".join(cells)).rstrip())
    return "\n".join(lines)


def format_component(entry: ComponentEntry) -> str:
    """Full catalog card for one component."""
    lines = [
        "",
        f"=== {entry.name} ===",
        f"  Docs: {entry.doc_link}",
    ]
    if entry.description:
        lines.append(f"  {entry.description}")
    if entry.usage_triggers:
        lines.append("  When to use:")
        for w in entry.usage_triggers:
            lines.append(f"    - {w}")
    if entry.rationale:
        lines.append(f"  Why: {entry.rationale}")
    lines.append(f"  Placement: {format_scopes(entry)}")
    if entry.tags:
        lines.append(f"  Tags: {', '.join(entry.tags)}")
    return "\n".join(lines)
