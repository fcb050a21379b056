"""Top-level page analysis.

``analyze`` runs the accessibility, SEO and performance analyzers over one
snapshot and aggregates their results. It is synchronous, read-only and
never raises for document content.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from .analyzers import AccessibilityAnalyzer, PerformanceAnalyzer, SEOAnalyzer
from .dom import DocumentSnapshot
from .models import AnalysisResult
from .reporting import ReportAggregator

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

accessibility_analyzer = AccessibilityAnalyzer()
seo_analyzer = SEOAnalyzer()
performance_analyzer = PerformanceAnalyzer()
aggregator = ReportAggregator()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def analyze(document: DocumentSnapshot, clock: Optional[Clock] = None) -> AnalysisResult:
    """Score a document on accessibility, SEO and performance.

    Args:
        document: Read-only snapshot of the page
        clock: Returns the instant stamped on the report (defaults to now, UTC)

    Returns:
        AnalysisResult with all three categories and the overall score
    """
    accessibility = accessibility_analyzer.analyze(document)
    seo = seo_analyzer.analyze(document)
    performance = performance_analyzer.analyze(document)

    result = aggregator.aggregate(
        document,
        accessibility,
        seo,
        performance,
        now=(clock or utc_now)(),
    )
    logger.info(f"Analyzed {document.url or '<document>'}: score {result.score}")
    return result
