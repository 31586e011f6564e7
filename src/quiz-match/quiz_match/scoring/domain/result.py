"""CompatibilityResult — the outcome of comparing two subjects."""

from pydantic import BaseModel, Field

from quiz_match.scoring.domain.tier import CompatibilityTier

type PairKey = tuple[str, str]


class CompatibilityResult(BaseModel, frozen=True):
    """Immutable, derived comparison of two subjects.

    The score is symmetric, so the same result is valid for either ordering
    of the subjects; ``pair_key`` identifies it regardless of order.
    """

    subject_a: str = Field(min_length=1)
    subject_b: str = Field(min_length=1)
    score: int = Field(ge=0, le=100)
    categories: dict[str, int] = Field(default_factory=dict)

    @property
    def pair_key(self) -> PairKey:
        return pair_key(self.subject_a, self.subject_b)

    @property
    def tier(self) -> CompatibilityTier:
        return CompatibilityTier.for_score(self.score)

    def partner_of(self, subject_id: str) -> str:
        """Return the other subject of the pair.

        Raises:
            ValueError: if subject_id is not part of this result.
        """
        if subject_id == self.subject_a:
            return self.subject_b
        if subject_id == self.subject_b:
            return self.subject_a
        raise ValueError(f"'{subject_id}' is not part of this result")


def pair_key(subject_a: str, subject_b: str) -> PairKey:
    """Return the unordered subject pair as a sorted tuple."""
    first, second = sorted((subject_a, subject_b))
    return first, second
