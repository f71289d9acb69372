"""
Recommendation output model.

``RecommendationResult`` is one scored candidate component with its catalog
documentation merged in.  Results are recomputed on every engine call and
never persisted, so the model is frozen.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from component_picker.models.component import ComponentEntry
from component_picker.taxonomy.message_taxonomy import PlacementScope

PERFECT_SCORE = 100


class RecommendationResult(BaseModel):
    """A candidate component with its match score and explanation.

    Attributes:
        name: Component name from the eligibility matrix.
        score: Integer match score in [0, 100].
        reasons: One mismatch reason per answered filter that disagreed;
            empty when ``score`` is 100.
        description: Catalog description (empty for undocumented names).
        usage_triggers: Catalog "when to use" phrases.
        rationale: Catalog "why" text.
        scopes: Supported placement scopes.
        doc_link: Documentation URI.
        tags: Catalog labels.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    score: int
    reasons: tuple[str, ...] = ()
    description: str = ""
    usage_triggers: tuple[str, ...] = ()
    rationale: str = ""
    scopes: tuple[PlacementScope, ...] = ()
    doc_link: str = "#"
    tags: tuple[str, ...] = ()

    @field_validator("score")
    @classmethod
    def validate_score_range(cls, v: int) -> int:
        if not 0 <= v <= PERFECT_SCORE:
            raise ValueError(f"score must be in [0, {PERFECT_SCORE}], got {v}.")
        return v

    @property
    def is_match(self) -> bool:
        return self.score == PERFECT_SCORE

    @classmethod
    def from_entry(
        cls,
        name: str,
        entry: ComponentEntry,
        score: int,
        reasons: list[str] | tuple[str, ...],
    ) -> "RecommendationResult":
        """Merge a score and its reasons with the catalog entry for ``name``."""
        return cls(
            name=name,
            score=score,
            reasons=tuple(reasons),
            description=entry.description,
            usage_triggers=entry.usage_triggers,
            rationale=entry.rationale,
            scopes=entry.scopes,
            doc_link=entry.doc_link,
            tags=entry.tags,
        )
