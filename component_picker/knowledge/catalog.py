"""
Built-in knowledge base tables.

``COMPONENTS``         — catalog entries keyed by component name.
``ELIGIBILITY_MATRIX`` — (severity, message type) → candidate component names.
``REFINEMENT_FILTERS`` — the refinement questions, in evaluation order.

The matrix is the sole source of truth for which components are ever valid
for a combination; candidate order within a cell is enumeration order only,
not a ranking.  Cells left empty are deliberate: no component in the design
system fits that combination.

Run ``tests/test_knowledge/test_catalog.py`` to verify these tables.
"""

from __future__ import annotations

from component_picker.models.component import ComponentEntry, RefinementFilter
from component_picker.taxonomy.message_taxonomy import (
    MessageType,
    PlacementScope,
    SeverityLevel,
)

_S = SeverityLevel
_T = MessageType
_P = PlacementScope


# ── Component catalog ─────────────────────────────────────────────────────────

COMPONENTS: dict[str, ComponentEntry] = {
    entry.name: entry
    for entry in (
        ComponentEntry(
            name="UI State",
            description=(
                "This component displays to communicate a full-page empty, "
                "loading or error state."
            ),
            usage_triggers=(
                "Full page errors",
                "Critical flows blocked",
                "Nothing to display due to error or empty state",
            ),
            rationale=(
                "Use when the entire screen needs to shift into an error or empty "
                "mode, keeping users oriented when no content can be shown."
            ),
            scopes=(_P.PAGE, _P.SECTION),
            doc_link="/docs/components/ui-state",
            tags=("full-page", "blocking", "critical"),
        ),
        ComponentEntry(
            name="Dialog",
            description=(
                "Dialogs interrupt the user journey to communicate information "
                "considered most critical."
            ),
            usage_triggers=(
                "Critical confirmations",
                "Destructive actions",
                "Permission or security issues",
            ),
            rationale=(
                "Best for critical issues that must be acknowledged before the "
                "user can continue their workflow."
            ),
            scopes=(_P.GLOBAL, _P.PAGE),
            doc_link="/docs/components/dialog",
            tags=("modal", "blocking", "critical", "confirmation"),
        ),
        ComponentEntry(
            name="Inline field error",
            description=(
                "Validation occurs after the user has finished interacting with the "
                "field to avoid disrupting input. If there's an error, we show an "
                "error message."
            ),
            usage_triggers=(
                "Required field missing",
                "Invalid input format",
                "Validation after submit or blur",
            ),
            rationale=(
                "Keeps feedback close to the problem so users can correct errors "
                "immediately without losing context."
            ),
            scopes=(_P.INLINE,),
            doc_link="/docs/components/field-error",
            tags=("form", "validation", "contextual", "inline"),
        ),
        ComponentEntry(
            name="Alert",
            description=(
                "The Alert is a messaging component designed to alert users about "
                "important information, ensuring they can complete tasks with ease."
            ),
            usage_triggers=(
                "Recoverable issues",
                "Section-level errors",
                "Important but non-blocking updates",
            ),
            rationale=(
                "Visible without blocking progress, ensuring users see and act on "
                "important information while maintaining workflow continuity."
            ),
            scopes=(_P.GLOBAL, _P.SECTION),
            doc_link="/docs/components/alert",
            tags=("banner", "prominent", "non-blocking"),
        ),
        ComponentEntry(
            name="Status light",
            description=(
                "Status light is used to indicate the status of something. Such as "
                "if an item has high or low stock. Status light is non interactive."
            ),
            usage_triggers=(
                "Stock level indicators",
                "System status",
                "Minor or informational signals",
            ),
            rationale=(
                "Provides quick, at-a-glance status without demanding user action "
                "or interrupting their current task."
            ),
            scopes=(_P.INLINE,),
            doc_link="/docs/components/status-light",
            tags=("indicator", "status", "passive", "visual"),
        ),
        ComponentEntry(
            name="Toast",
            description=(
                "A toast notification is best used for brief, non-intrusive messages "
                "that inform about app processes or provide feedback to the user "
                "without requiring immediate interaction."
            ),
            usage_triggers=(
                "Quick success or error feedback",
                "Background process updates",
                "Non-blocking confirmations",
            ),
            rationale=(
                "Lightweight feedback that reassures users without interrupting "
                "their flow or requiring acknowledgment."
            ),
            scopes=(_P.GLOBAL,),
            doc_link="/docs/components/toast",
            tags=("temporary", "auto-dismiss", "feedback", "non-intrusive"),
        ),
        ComponentEntry(
            name="Helper text",
            description="Inline guidance that prevents errors before they happen.",
            usage_triggers=(
                "Field instructions",
                "Password or input rules",
                "Contextual tips before typing",
            ),
            rationale=(
                "Reduces mistakes by clarifying expectations before users act, "
                "improving form completion success rates."
            ),
            scopes=(_P.INLINE,),
            doc_link="/docs/components/helper-text",
            tags=("guidance", "proactive", "form", "preventive"),
        ),
        ComponentEntry(
            name="Tooltip",
            description=(
                "Tooltips display additional information that is contextual, "
                "helpful, and nonessential while providing the ability to "
                "communicate and give clarity to a user."
            ),
            usage_triggers=(
                "Explain icon meaning",
                "Provide nonessential context",
                "On-hover details",
            ),
            rationale=(
                "Good for clarifying controls or icons without adding visual noise "
                "to the interface."
            ),
            scopes=(_P.INLINE,),
            doc_link="/docs/components/tooltip",
            tags=("on-demand", "hover", "contextual", "supplementary"),
        ),
        ComponentEntry(
            name="Icon",
            description="Decorative or semantic icon to signal state alongside text.",
            usage_triggers=(
                "Reinforce message with symbol",
                "Use with labels to clarify meaning",
                "Show status without relying on color only",
            ),
            rationale=(
                "Supports clarity and accessibility when paired with text, enhances "
                "visual hierarchy and comprehension."
            ),
            scopes=(_P.INLINE,),
            doc_link="/docs/components/icon",
            tags=("visual", "reinforcement", "accessibility", "symbolic"),
        ),
    )
}


# ── Eligibility matrix ────────────────────────────────────────────────────────

ELIGIBILITY_MATRIX: dict[tuple[SeverityLevel, MessageType], tuple[str, ...]] = {
    (_S.CRITICAL, _T.INDICATOR):         (),
    (_S.CRITICAL, _T.VALIDATION):        (),
    (_S.CRITICAL, _T.NOTIFICATION):      ("UI State", "Dialog"),
    (_S.MAJOR, _T.INDICATOR):            (),
    (_S.MAJOR, _T.VALIDATION):           ("Inline field error",),
    (_S.MAJOR, _T.NOTIFICATION):         ("Alert",),
    (_S.MINOR, _T.INDICATOR):            ("Status light",),
    (_S.MINOR, _T.VALIDATION):           (),
    (_S.MINOR, _T.NOTIFICATION):         ("Toast", "Alert"),
    (_S.INFORMATIONAL, _T.INDICATOR):    ("Status light", "Helper text", "Tooltip", "Icon"),
    (_S.INFORMATIONAL, _T.VALIDATION):   (),
    (_S.INFORMATIONAL, _T.NOTIFICATION): ("Toast", "Alert"),
}


# ── Refinement filters ────────────────────────────────────────────────────────

REFINEMENT_FILTERS: tuple[RefinementFilter, ...] = (
    RefinementFilter(
        key="trigger",
        question="Who triggers the message?",
        description=(
            "Is this a response to something the user did, or does the system "
            "initiate it?"
        ),
        options=("User action", "System event", "Either"),
        wildcard="Either",
        expected={
            _T.INDICATOR:    "Either",
            _T.VALIDATION:   "User action",
            _T.NOTIFICATION: "System event",
        },
        explanations={
            "User action":  "because validation typically responds to what users do",
            "System event": "because notifications are usually system-initiated",
            "Either": (
                "because indicators can be triggered by both user actions and "
                "system events"
            ),
        },
    ),
    RefinementFilter(
        key="placement",
        question="Where should it appear?",
        description="Think about the scope and positioning of the message",
        options=("Near the problem", "Page level", "Flexible"),
        wildcard="Flexible",
        expected={
            _T.INDICATOR:    "Near the problem",
            _T.VALIDATION:   "Near the problem",
            _T.NOTIFICATION: "Page level",
        },
        explanations={
            "Near the problem": (
                "because validation and indicators work best when placed contextually"
            ),
            "Page level": "because notifications need broader visibility",
            "Flexible":   "because placement can vary based on context",
        },
    ),
    RefinementFilter(
        key="action",
        question="Does it require user action?",
        description="Do users need to do something after seeing this message?",
        options=("Just informative", "Needs response", "Depends"),
        wildcard="Depends",
        expected={
            _T.INDICATOR:    "Just informative",
            _T.VALIDATION:   "Needs response",
            _T.NOTIFICATION: "Depends",
        },
        explanations={
            "Just informative": "because indicators typically don't require user response",
            "Needs response":   "because validation errors need to be addressed",
            "Depends": (
                "because notifications can be either informational or actionable"
            ),
        },
    ),
)
