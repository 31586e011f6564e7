"""The canonical five-point Likert scale shared by answers and scoring.

Direction is fixed: value 1 is the "not at all" end and value 5 the "very
much" end. Labels are indexed by ``value - 1``. Nothing downstream flips a
value; comparisons use the raw values directly.
"""

LIKERT_MIN = 1
LIKERT_MAX = 5
MAX_DIFFERENCE = LIKERT_MAX - LIKERT_MIN

LIKERT_LABELS: tuple[str, ...] = (
    "Not at all",
    "Not really",
    "Neutral",
    "Somewhat",
    "Very much",
)


def label_for(value: int) -> str:
    """Return the user-facing label for a Likert value.

    Raises:
        ValueError: if value is outside [LIKERT_MIN, LIKERT_MAX].
    """
    if not LIKERT_MIN <= value <= LIKERT_MAX:
        raise ValueError(
            f"Likert value must be between {LIKERT_MIN} and {LIKERT_MAX}, got {value}"
        )
    return LIKERT_LABELS[value - LIKERT_MIN]
