"""Report aggregation, rendering and export."""

from .aggregator import ReportAggregator, iso_timestamp, score_tier
from .export import build_export, export_filename, export_json, write_export

__all__ = [
    "ReportAggregator",
    "iso_timestamp",
    "score_tier",
    "build_export",
    "export_filename",
    "export_json",
    "write_export",
]
