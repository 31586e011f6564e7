"""JSON report builder for a single compatibility comparison."""

import json
from pathlib import Path
from typing import Any

from quiz_match.catalog.domain.catalog import QuestionCatalog
from quiz_match.scoring.domain.result import CompatibilityResult

SCHEMA_VERSION = "compatibility_report_1"

type JsonRecord = dict[str, Any]


def build_report(result: CompatibilityResult, catalog: QuestionCatalog) -> JsonRecord:
    """Build the JSON-serialisable report for one comparison.

    ``pair`` is the unordered subject pair, suitable as a storage key.
    """
    question_counts: dict[str, int] = {}
    for question in catalog.questions:
        category = question.category
        question_counts[category] = question_counts.get(category, 0) + 1

    tier = result.tier
    return {
        "schema_version": SCHEMA_VERSION,
        "pair": list(result.pair_key),
        "subject_a": result.subject_a,
        "subject_b": result.subject_b,
        "score": result.score,
        "tier": {
            "name": tier.value,
            "headline": tier.headline,
            "message": tier.message,
        },
        "categories": [
            {
                "category": category,
                "score": category_score,
                "catalog_questions": question_counts.get(category, 0),
            }
            for category, category_score in result.categories.items()
        ],
        "catalog_size": len(catalog),
    }


def write_report(path: Path, report: JsonRecord) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(report, indent=2, ensure_ascii=False)
    path.write_text(text + "\n", encoding="utf-8")
