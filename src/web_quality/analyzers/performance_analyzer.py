"""Performance analyzer using markup heuristics.

Checks for:
- Images larger than full HD
- Images without a loading attribute
- Too many external scripts and stylesheets
- Heavy use of inline styles
- External links without rel attributes
"""

from ..dom import DocumentSnapshot
from ..models import IssueCategory, Severity
from .base import BaseAnalyzer, Findings

MAX_IMAGE_WIDTH = 1920
MAX_IMAGE_HEIGHT = 1080
MAX_EAGER_IMAGES = 3
MAX_EXTERNAL_RESOURCES = 10
MAX_INLINE_STYLES = 20

GENERAL_SUGGESTIONS = [
    "Consider using a Content Delivery Network (CDN) for static assets",
    "Enable gzip compression on your server",
    "Minify CSS and JavaScript files",
]


class PerformanceAnalyzer(BaseAnalyzer):
    """Analyzer for performance issues."""

    category = IssueCategory.PERFORMANCE

    def _run_rules(self, document: DocumentSnapshot, findings: Findings) -> None:
        self._check_image_sizes(document, findings)
        self._check_lazy_loading(document, findings)
        self._check_external_resources(document, findings)
        self._check_inline_styles(document, findings)
        self._check_external_links(document, findings)

        for suggestion in GENERAL_SUGGESTIONS:
            findings.suggest(suggestion)

    def _check_image_sizes(self, document: DocumentSnapshot, findings: Findings) -> None:
        """Check for images whose intrinsic size exceeds 1920x1080."""
        large = [
            img for img in document.select("img")
            if img.natural_width > MAX_IMAGE_WIDTH or img.natural_height > MAX_IMAGE_HEIGHT
        ]
        if not large:
            return

        findings.flag(
            "Image Optimization",
            f"{len(large)} images larger than {MAX_IMAGE_WIDTH}x{MAX_IMAGE_HEIGHT}",
            Severity.MEDIUM,
            "Optimize large images and use appropriate formats (WebP, AVIF)",
            min(20, len(large) * 3),
            element=large[0].src or "Unknown image",
        )

    def _check_lazy_loading(self, document: DocumentSnapshot, findings: Findings) -> None:
        """Check for images with a missing or empty loading attribute."""
        eager = [img for img in document.select("img") if not img.get_attribute("loading")]
        if len(eager) <= MAX_EAGER_IMAGES:
            return

        findings.flag(
            "Lazy Loading",
            f"{len(eager)} images without lazy loading",
            Severity.LOW,
            'Add loading="lazy" to images below the fold',
            10,
        )

    def _check_external_resources(self, document: DocumentSnapshot, findings: Findings) -> None:
        """Check for too many absolute-URL scripts and link tags."""
        scripts = document.select('script[src^="http"]')
        styles = document.select('link[href^="http"]')
        total = len(scripts) + len(styles)
        if total <= MAX_EXTERNAL_RESOURCES:
            return

        findings.flag(
            "External Resources",
            f"{total} external resources detected",
            Severity.MEDIUM,
            "Consider bundling or reducing external resources to improve load times",
            min(15, (total - MAX_EXTERNAL_RESOURCES) * 2),
        )

    def _check_inline_styles(self, document: DocumentSnapshot, findings: Findings) -> None:
        styled = document.select("[style]")
        if len(styled) <= MAX_INLINE_STYLES:
            return

        findings.flag(
            "Inline Styles",
            f"{len(styled)} elements with inline styles",
            Severity.LOW,
            "Move inline styles to CSS files for better caching",
            5,
        )

    def _check_external_links(self, document: DocumentSnapshot, findings: Findings) -> None:
        """Check for off-site links with a missing or empty rel attribute."""
        hostname = document.hostname
        # Substring test on the hostname; www. prefixes and ports are not normalized.
        external = [
            link for link in document.select('a[href^="http"]')
            if hostname not in link.get_attribute("href")
        ]
        without_rel = [link for link in external if not link.get_attribute("rel")]
        if not without_rel:
            return

        findings.flag(
            "External Links",
            f"{len(without_rel)} external links without rel attributes",
            Severity.LOW,
            'Add rel="noopener noreferrer" to external links for security and performance',
            min(10, len(without_rel)),
        )
