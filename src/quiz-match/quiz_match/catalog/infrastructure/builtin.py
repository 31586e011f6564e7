"""Built-in static question catalog, used when no question source is configured or reachable."""

from quiz_match.catalog.domain.catalog import QuestionCatalog
from quiz_match.catalog.domain.observer import CatalogObserver
from quiz_match.catalog.domain.question import Question

BUILTIN_SOURCE = "builtin"

_QUESTIONS: list[tuple[str, str]] = [
    ("How much do you value spending your days off together?", "lifestyle"),
    ("Is a carefully planned date important to you?", "romance"),
    ("Is it important to talk about your goals for the future?", "values"),
    ("Is it important to respect each other's hobbies?", "lifestyle"),
    ("Do you want to be in touch with your partner every day?", "communication"),
    ("Can you accept differences in each other's values?", "values"),
    ("Is it important to support each other's personal growth?", "growth"),
    ("Is complete honesty essential to building trust?", "trust"),
    ("Should partners face hard times side by side?", "support"),
    ("Is it important to respect each other's time?", "respect"),
    ("Is it important to express your feelings openly?", "communication"),
    ("Should partners be close to each other's family and friends?", "social"),
    ("Is it important to plan your future lifestyle together?", "future"),
    ("Is it important to respect each other's individuality?", "respect"),
    ("Is it important to talk about how you show affection?", "romance"),
]


def builtin_catalog() -> QuestionCatalog:
    """Return the built-in fifteen-question catalog."""
    return QuestionCatalog(
        questions=tuple(
            Question(id=index, prompt=prompt, category=category)
            for index, (prompt, category) in enumerate(_QUESTIONS, start=1)
        )
    )


class BuiltinCatalogLoader:
    """CatalogLoader that always returns the built-in catalog."""

    def __init__(self, observer: CatalogObserver) -> None:
        self._observer = observer

    def load(self) -> QuestionCatalog:
        self._observer.catalog_loading_started(source=BUILTIN_SOURCE)
        catalog = builtin_catalog()
        self._observer.catalog_loaded(
            source=BUILTIN_SOURCE,
            total_questions=len(catalog),
            categories=catalog.categories,
        )
        return catalog
