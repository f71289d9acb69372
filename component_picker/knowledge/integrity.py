"""
Knowledge base integrity checks.

Checks performed
----------------
1. ``missing_cell``       — a severity × message type pair has no matrix cell
                            (warning: the engine treats it as "no component").
2. ``undocumented``       — a matrix name has no catalog entry
                            (warning: a placeholder entry is shown instead).
3. ``unreferenced``       — a catalog entry appears in no matrix cell
                            (warning: it can never be recommended).
4. ``duplicate_candidate``— a name appears twice in one cell (error: it would
                            be scored and shown twice).
5. ``duplicate_filter``   — two filters share a key or question (error:
                            answers could not be told apart).

Raising vs returning
--------------------
``check_integrity()`` returns issues and never raises; the CLI decides
whether warnings are fatal (``validate-catalog --strict``).
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Literal

from component_picker.knowledge.base import KnowledgeBase
from component_picker.taxonomy.message_taxonomy import MessageType, SeverityLevel

IssueLevel = Literal["error", "warning"]


@dataclass(frozen=True)
class IntegrityIssue:
    """One finding from ``check_integrity()``.

    Attributes:
        level:   ``"error"`` or ``"warning"``.
        check:   Check name, e.g. ``"undocumented"``.
        message: Human-readable description.
    """

    level: IssueLevel
    check: str
    message: str

    def __str__(self) -> str:
        return f"[{self.level.upper()}] {self.check}: {self.message}"


def check_integrity(kb: KnowledgeBase) -> list[IntegrityIssue]:
    """Run every integrity check against ``kb``.

    Returns:
        Issues in check order; empty when the knowledge base is clean.
    """
    issues: list[IntegrityIssue] = []
    cells = kb.matrix_cells()
    documented = set(kb.component_names())

    for severity in SeverityLevel:
        for msg_type in MessageType:
            if (severity, msg_type) not in cells:
                issues.append(IntegrityIssue(
                    "warning", "missing_cell",
                    f"No matrix cell for {severity.label} + {msg_type.label}.",
                ))

    referenced: set[str] = set()
    for (severity, msg_type), names in cells.items():
        referenced.update(names)
        for name, count in Counter(names).items():
            if count > 1:
                issues.append(IntegrityIssue(
                    "error", "duplicate_candidate",
                    f"'{name}' listed {count} times for "
                    f"{severity.label} + {msg_type.label}.",
                ))

    for name in sorted(referenced - documented):
        issues.append(IntegrityIssue(
            "warning", "undocumented",
            f"'{name}' is in the matrix but has no catalog entry.",
        ))

    for name in sorted(documented - referenced):
        issues.append(IntegrityIssue(
            "warning", "unreferenced",
            f"'{name}' is documented but no matrix cell lists it.",
        ))

    filters = kb.refinement_filters()
    for attr in ("key", "question"):
        for value, count in Counter(getattr(f, attr) for f in filters).items():
            if count > 1:
                issues.append(IntegrityIssue(
                    "error", "duplicate_filter",
                    f"Filter {attr} '{value}' is used by {count} filters.",
                ))

    return issues


def has_errors(issues: list[IntegrityIssue]) -> bool:
    return any(i.level == "error" for i in issues)
