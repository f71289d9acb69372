"""
Knowledge base record models.

``SeverityDefinition`` and ``MessageTypeDefinition`` pair each taxonomy
member with its human-readable description.

``ComponentEntry`` documents one feedback component in the catalog: what it
is, when to use it, why, where it can be placed and where its docs live.

``RefinementFilter`` is an optional disambiguating question.  For every
``MessageType`` it names the answer a well-matched component would expect;
one option per filter may be designated the *wildcard* ("any answer is
acceptable").

All models are frozen — the knowledge base is reference data and is never
mutated after start-up.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from component_picker.taxonomy.message_taxonomy import (
    MessageType,
    PlacementScope,
    SeverityLevel,
)

PLACEHOLDER_RATIONALE = "Direct matrix match"
PLACEHOLDER_LINK = "#"


class SeverityDefinition(BaseModel):
    """A severity level and its description."""

    model_config = ConfigDict(frozen=True)

    level: SeverityLevel
    description: str

    @property
    def name(self) -> str:
        return self.level.label


class MessageTypeDefinition(BaseModel):
    """A message type and its description."""

    model_config = ConfigDict(frozen=True)

    message_type: MessageType
    description: str

    @property
    def name(self) -> str:
        return self.message_type.label


class ComponentEntry(BaseModel):
    """Catalog record for one feedback component.

    Attributes:
        name: Unique component name, e.g. ``"Status light"``.
        description: What the component is.
        usage_triggers: Short phrases describing when to reach for it.
        rationale: Why it suits the situations it is recommended for.
        scopes: Placement scopes the component supports.
        doc_link: Documentation URI.
        tags: Free-form labels shown alongside the recommendation.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    usage_triggers: tuple[str, ...] = ()
    rationale: str = ""
    scopes: tuple[PlacementScope, ...] = ()
    doc_link: str = PLACEHOLDER_LINK
    tags: tuple[str, ...] = ()

    @field_validator("name")
    @classmethod
    def validate_name_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Component name must not be empty.")
        return v.strip()

    @classmethod
    def placeholder(cls, name: str) -> "ComponentEntry":
        """Return the stand-in entry for a matrix name with no documentation yet."""
        return cls(name=name, rationale=PLACEHOLDER_RATIONALE)


class RefinementFilter(BaseModel):
    """A refinement question evaluated independently of severity.

    Attributes:
        key: Short slug used on the command line, e.g. ``"trigger"``.
        question: Question text; also the key of a caller's answer mapping.
        description: Helper text shown under the question.
        options: Allowed answers, in display order.
        wildcard: The option meaning "any answer is acceptable", or None.
        expected: Expected answer per ``MessageType``.
        explanations: Phrase appended to a mismatch reason, keyed by the
            expected answer that was not given.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    question: str
    description: str = ""
    options: tuple[str, ...]
    wildcard: Optional[str] = None
    expected: dict[MessageType, str]
    explanations: dict[str, str] = {}

    @field_validator("key")
    @classmethod
    def validate_key_slug(cls, v: str) -> str:
        v = v.strip().lower()
        if not v or " " in v:
            raise ValueError(f"Filter key must be a non-empty slug without spaces, got '{v}'.")
        return v

    @field_validator("options")
    @classmethod
    def validate_options(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v:
            raise ValueError("A refinement filter needs at least one option.")
        if len(set(v)) != len(v):
            raise ValueError(f"Filter options must be unique, got {list(v)}.")
        return v

    @model_validator(mode="after")
    def validate_answers_are_options(self) -> "RefinementFilter":
        if self.wildcard is not None and self.wildcard not in self.options:
            raise ValueError(
                f"Wildcard '{self.wildcard}' is not one of the options for "
                f"'{self.question}': {list(self.options)}."
            )
        missing = [t.value for t in MessageType if t not in self.expected]
        if missing:
            raise ValueError(
                f"Filter '{self.question}' has no expected answer for: {missing}."
            )
        for msg_type, answer in self.expected.items():
            if answer not in self.options:
                raise ValueError(
                    f"Expected answer '{answer}' for {msg_type.value} is not one of "
                    f"the options for '{self.question}': {list(self.options)}."
                )
        return self

    def expected_answer(self, message_type: MessageType) -> str:
        return self.expected[message_type]

    def accepts_any(self, message_type: MessageType) -> bool:
        """True when the expected answer for ``message_type`` is this filter's wildcard."""
        return self.wildcard is not None and self.expected[message_type] == self.wildcard

    def explanation_for(self, expected: str) -> str:
        return self.explanations.get(expected, "")
