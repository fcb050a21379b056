"""JSON export of analysis reports for download."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from ..models import AnalysisResult
from .aggregator import iso_timestamp

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def build_export(result: AnalysisResult, now: Optional[datetime] = None) -> dict:
    """The report's fields plus an ``exportedAt`` timestamp."""
    data = result.to_dict()
    data["exportedAt"] = iso_timestamp(now or _now())
    return data


def export_json(result: AnalysisResult, now: Optional[datetime] = None) -> str:
    return json.dumps(build_export(result, now), indent=2, ensure_ascii=False)


def export_filename(now: Optional[datetime] = None) -> str:
    """File name for an export, e.g. quality-analysis-2026-10-19.json (UTC date)."""
    moment = now or _now()
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return f"quality-analysis-{moment.strftime('%Y-%m-%d')}.json"


def write_export(
    result: AnalysisResult,
    directory: Path,
    now: Optional[datetime] = None,
) -> Path:
    """Write the export document into ``directory`` and return its path."""
    now = now or _now()
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    path = directory / export_filename(now)
    path.write_text(export_json(result, now), encoding="utf-8")
    logger.info(f"Exported analysis of {result.page_info.url} to {path}")
    return path
