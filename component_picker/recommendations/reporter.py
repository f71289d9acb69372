"""
Recommendation report writer: CSV and JSON output for one engine result.

All functions are pure I/O — no scoring.  They consume a RecommendationSet
and write human-readable + machine-readable files.

Output files (written by ``component-picker recommend --write``)
-----------------------------------------------------------------
  data/outputs/recommendations/
    recommendations_{severity}_{type}_{date}.csv   -- one row per result
    recommendations_{severity}_{type}_{date}.json  -- same data, structured JSON
"""

from __future__ import annotations

import csv
import json
import logging
from datetime import date
from pathlib import Path
from typing import Mapping, Optional

from component_picker.models.recommendation import RecommendationResult
from component_picker.recommendations.engine import RecommendationSet

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "v1.0.0"


def build_payload(
    result: RecommendationSet,
    filter_answers: Optional[Mapping[str, Optional[str]]] = None,
    run_date: date | None = None,
) -> dict:
    """JSON-serialisable view of a result; shared by the file writer and ``--json``."""
    if run_date is None:
        run_date = date.today()
    return {
        "schema_version": SCHEMA_VERSION,
        "generated_at":   run_date.isoformat(),
        "severity":       result.severity.value if result.severity else None,
        "message_type":   result.message_type.value if result.message_type else None,
        "status":         result.status,
        "filter_answers": {
            q: a for q, a in (filter_answers or {}).items() if a
        },
        "matches":      [_result_dict(r) for r in result.matches],
        "alternatives": [_result_dict(r) for r in result.alternatives],
    }


def write_recommendation_json(
    result: RecommendationSet,
    output_dir: Path,
    filter_answers: Optional[Mapping[str, Optional[str]]] = None,
    run_date: date | None = None,
) -> Path:
    """Write a recommendation result to a structured JSON file.

    Args:
        result:         Output of ``recommend()``.
        output_dir:     Directory to write the file (created if missing).
        filter_answers: The answers the result was computed from (provenance).
        run_date:       Date label for the filename. Defaults to today.

    Returns:
        Path to the written JSON file.
    """
    if run_date is None:
        run_date = date.today()

    output_dir.mkdir(parents=True, exist_ok=True)
    json_path = output_dir / f"{_file_stem(result, run_date)}.json"

    payload = build_payload(result, filter_answers, run_date)
    json_path.write_text(json.dumps(payload, indent=2, default=str), encoding="utf-8")
    logger.info("Recommendation JSON written: %s", json_path)
    return json_path


def write_recommendation_csv(
    result: RecommendationSet,
    output_dir: Path,
    run_date: date | None = None,
) -> Path:
    """Write matches then alternatives to a CSV file.

    Columns: group, rank, name, score, reasons, scopes, tags, doc_link.
    List-valued cells are joined with ``"; "``.

    Args:
        result:     Output of ``recommend()``.
        output_dir: Target directory.
        run_date:   Date label. Defaults to today.

    Returns:
        Path to the written CSV file.
    """
    if run_date is None:
        run_date = date.today()

    output_dir.mkdir(parents=True, exist_ok=True)
    csv_path = output_dir / f"{_file_stem(result, run_date)}.csv"

    fieldnames = ["group", "rank", "name", "score", "reasons", "scopes", "tags", "doc_link"]

    rows = 0
    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for group, items in (("match", result.matches), ("alternative", result.alternatives)):
            for rank, r in enumerate(items, start=1):
                writer.writerow(
                    {
                        "group":    group,
                        "rank":     rank,
                        "name":     r.name,
                        "score":    r.score,
                        "reasons":  "; ".join(r.reasons),
                        "scopes":   "; ".join(s.value for s in r.scopes),
                        "tags":     "; ".join(r.tags),
                        "doc_link": r.doc_link,
                    }
                )
                rows += 1

    logger.info("Recommendation CSV written: %s (%d rows)", csv_path, rows)
    return csv_path


# ── Helpers ───────────────────────────────────────────────────────────────────

def _file_stem(result: RecommendationSet, run_date: date) -> str:
    sev = result.severity.value if result.severity else "unset"
    msg_type = result.message_type.value if result.message_type else "unset"
    return f"recommendations_{sev}_{msg_type}_{run_date}"


def _result_dict(r: RecommendationResult) -> dict:
    return {
        "name":           r.name,
        "score":          r.score,
        "reasons":        list(r.reasons),
        "description":    r.description,
        "usage_triggers": list(r.usage_triggers),
        "rationale":      r.rationale,
        "scopes":         [s.value for s in r.scopes],
        "doc_link":       r.doc_link,
        "tags":           list(r.tags),
    }
