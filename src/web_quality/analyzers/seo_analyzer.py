"""SEO analyzer for detecting search engine optimization issues.

Checks for:
- Missing, short or long page titles
- Missing, short or long meta descriptions
- Missing or multiple H1 tags
- Canonical URL (advisory)
- Open Graph tags (advisory)
"""

from ..dom import DocumentSnapshot
from ..models import IssueCategory, Severity
from .base import BaseAnalyzer, Findings

TITLE_MIN_LENGTH = 10
TITLE_MAX_LENGTH = 60
DESCRIPTION_MIN_LENGTH = 120
DESCRIPTION_MAX_LENGTH = 160


class SEOAnalyzer(BaseAnalyzer):
    """Analyzer for SEO-related issues."""

    category = IssueCategory.SEO

    def _run_rules(self, document: DocumentSnapshot, findings: Findings) -> None:
        # Check title tag
        self._check_title(document, findings)

        # Check meta description
        self._check_meta_description(document, findings)

        # Check H1 tags
        self._check_h1(document, findings)

        # Check canonical URL
        self._check_canonical(document, findings)

        # Check Open Graph tags
        self._check_open_graph(document, findings)

    def _check_title(self, document: DocumentSnapshot, findings: Findings) -> None:
        """Check for title tag issues."""
        title = document.title

        if not title.strip():
            findings.flag(
                "Page Title",
                "Page has no title",
                Severity.HIGH,
                "Add a descriptive page title (50-60 characters recommended)",
                25,
            )
        elif len(title) < TITLE_MIN_LENGTH:
            findings.flag(
                "Page Title",
                "Page title is too short",
                Severity.MEDIUM,
                "Make page title more descriptive (50-60 characters recommended)",
                15,
            )
        elif len(title) > TITLE_MAX_LENGTH:
            findings.flag(
                "Page Title",
                "Page title is too long",
                Severity.LOW,
                "Shorten page title to 50-60 characters for better search results",
                5,
            )

    def _check_meta_description(self, document: DocumentSnapshot, findings: Findings) -> None:
        """Check for meta description issues."""
        meta_desc = document.select_one('meta[name="description"]')
        content = meta_desc.get_attribute("content") if meta_desc else None

        if not content:
            findings.flag(
                "Meta Description",
                "Missing meta description",
                Severity.HIGH,
                "Add a meta description (150-160 characters recommended)",
                20,
            )
        elif len(content) < DESCRIPTION_MIN_LENGTH:
            findings.flag(
                "Meta Description",
                "Meta description is too short",
                Severity.MEDIUM,
                "Expand meta description to 150-160 characters",
                10,
            )
        elif len(content) > DESCRIPTION_MAX_LENGTH:
            findings.flag(
                "Meta Description",
                "Meta description is too long",
                Severity.LOW,
                "Shorten meta description to 150-160 characters",
                5,
            )

    def _check_h1(self, document: DocumentSnapshot, findings: Findings) -> None:
        """Check for H1 tag issues."""
        h1_count = len(document.select("h1"))

        if h1_count == 0:
            findings.flag(
                "H1 Heading",
                "No H1 heading found",
                Severity.HIGH,
                "Add a main H1 heading to improve SEO and accessibility",
                20,
            )
        elif h1_count > 1:
            findings.flag(
                "H1 Heading",
                f"Multiple H1 headings found ({h1_count})",
                Severity.MEDIUM,
                "Use only one H1 heading per page",
                15,
            )

    def _check_canonical(self, document: DocumentSnapshot, findings: Findings) -> None:
        if document.select_one('link[rel="canonical" i]') is None:
            findings.suggest("Consider adding a canonical URL to prevent duplicate content issues")

    def _check_open_graph(self, document: DocumentSnapshot, findings: Findings) -> None:
        og_title = document.select_one('meta[property="og:title"]')
        og_description = document.select_one('meta[property="og:description"]')
        if og_title is None or og_description is None:
            findings.suggest("Add Open Graph meta tags for better social media sharing")
