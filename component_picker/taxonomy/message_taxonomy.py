"""
Message taxonomy for UI feedback classification.

Two orthogonal dimensions classify every message the product shows:
  - ``SeverityLevel`` — the *how bad*: how much does it affect the user?
  - ``MessageType``   — the *how*:     which communication pattern is it?

``PlacementScope`` describes where a feedback component can be placed on
screen, used by catalog entries.

Usage example::

    from component_picker.taxonomy.message_taxonomy import MessageType, SeverityLevel

    severity = SeverityLevel.MINOR
    msg_type = MessageType.INDICATOR

This module has NO imports from any other ``component_picker`` package.
"""

from __future__ import annotations

from enum import StrEnum


class SeverityLevel(StrEnum):
    """Criticality of a message, ordered from most to least severe."""

    CRITICAL = "critical"
    """High impact; the user cannot continue until it is resolved."""

    MAJOR = "major"
    """Significant impact, but the user has a workaround."""

    MINOR = "minor"
    """Low impact; core functionality is unaffected."""

    INFORMATIONAL = "informational"
    """Helpful context only; no action needed."""

    @property
    def label(self) -> str:
        return self.value.title()


class MessageType(StrEnum):
    """Communication pattern of a message."""

    INDICATOR = "indicator"
    """Passively shows current state."""

    VALIDATION = "validation"
    """Responds to errors in user input."""

    NOTIFICATION = "notification"
    """Proactively alerts the user."""

    @property
    def label(self) -> str:
        return self.value.title()


class PlacementScope(StrEnum):
    """Screen region a feedback component occupies."""

    GLOBAL = "global"
    PAGE = "page"
    SECTION = "section"
    INLINE = "inline"

    @property
    def label(self) -> str:
        return self.value.title()


SEVERITY_DESCRIPTIONS: dict[SeverityLevel, str] = {
    SeverityLevel.CRITICAL:      "High impact, blocks users from continuing",
    SeverityLevel.MAJOR:         "Significant impact, user can work around",
    SeverityLevel.MINOR:         "Low impact, doesn't block core functionality",
    SeverityLevel.INFORMATIONAL: "Helpful context, no action needed",
}

MESSAGE_TYPE_DESCRIPTIONS: dict[MessageType, str] = {
    MessageType.INDICATOR:    "Shows current state passively",
    MessageType.VALIDATION:   "Responds to user input errors",
    MessageType.NOTIFICATION: "Proactive messages to alert users",
}


# ── Coercion helpers ──────────────────────────────────────────────────────────

def coerce_severity(value: SeverityLevel | str | None) -> SeverityLevel | None:
    """Return the ``SeverityLevel`` named by ``value``, or None when unset.

    Accepts enum members and names in any letter case.  Blank or
    unrecognised text is treated as "not selected yet".
    """
    if isinstance(value, SeverityLevel):
        return value
    if not value or not str(value).strip():
        return None
    try:
        return SeverityLevel(str(value).strip().lower())
    except ValueError:
        return None


def coerce_message_type(value: MessageType | str | None) -> MessageType | None:
    """Return the ``MessageType`` named by ``value``, or None when unset."""
    if isinstance(value, MessageType):
        return value
    if not value or not str(value).strip():
        return None
    try:
        return MessageType(str(value).strip().lower())
    except ValueError:
        return None
