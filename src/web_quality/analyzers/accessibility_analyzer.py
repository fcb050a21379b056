"""Accessibility analyzer for common screen-reader and keyboard problems.

Checks for:
- Images without alt text
- Form inputs without labels
- Inline colors (contrast advisory)
- Interactive elements (focus indicator advisory)
- Skipped heading levels
"""

from ..dom import DocumentSnapshot
from ..models import IssueCategory, Severity
from .base import BaseAnalyzer, Findings

FORM_CONTROLS = 'input[type="text"], input[type="email"], input[type="password"], textarea, select'
INTERACTIVE_ELEMENTS = "button, a, input, select, textarea"
HEADINGS = "h1, h2, h3, h4, h5, h6"


class AccessibilityAnalyzer(BaseAnalyzer):
    """Analyzer for accessibility issues."""

    category = IssueCategory.ACCESSIBILITY

    def _run_rules(self, document: DocumentSnapshot, findings: Findings) -> None:
        self._check_images_alt(document, findings)
        self._check_form_labels(document, findings)
        self._check_color_contrast(document, findings)
        self._check_focus_indicators(document, findings)
        self._check_heading_hierarchy(document, findings)

    def _check_images_alt(self, document: DocumentSnapshot, findings: Findings) -> None:
        """Check for images with missing or blank alt text."""
        missing = [img for img in document.select("img") if not img.alt.strip()]
        if not missing:
            return

        findings.flag(
            "Missing Alt Text",
            f"{len(missing)} images missing alt text",
            Severity.HIGH,
            "Add descriptive alt text to all images for screen readers",
            min(25, len(missing) * 3),
            element=missing[0].src or "Unknown image",
        )

    def _check_form_labels(self, document: DocumentSnapshot, findings: Findings) -> None:
        """Check for form controls with neither a <label for> nor aria-label."""
        unlabelled = []
        for control in document.select(FORM_CONTROLS):
            label = document.find_label_for(control.id)
            if label is None and not control.get_attribute("aria-label"):
                unlabelled.append(control)

        if not unlabelled:
            return

        findings.flag(
            "Form Accessibility",
            f"{len(unlabelled)} form inputs without labels",
            Severity.HIGH,
            "Add labels or aria-label attributes to all form inputs",
            min(20, len(unlabelled) * 4),
            element=f"{unlabelled[0].tag_name} element",
        )

    def _check_color_contrast(self, document: DocumentSnapshot, findings: Findings) -> None:
        # Contrast needs computed styles; inline colors only trigger an advisory.
        if document.select('[style*="color"]'):
            findings.suggest(
                "Verify color contrast ratios meet WCAG guidelines (4.5:1 for normal text)"
            )

    def _check_focus_indicators(self, document: DocumentSnapshot, findings: Findings) -> None:
        if document.select(INTERACTIVE_ELEMENTS):
            findings.suggest("Ensure all interactive elements have visible focus indicators")

    def _check_heading_hierarchy(self, document: DocumentSnapshot, findings: Findings) -> None:
        """Check for headings that jump more than one level deeper."""
        levels = [int(h.tag_name[1]) for h in document.select(HEADINGS)]

        previous = 0
        skipped = False
        for level in levels:
            if level > previous + 1:
                skipped = True
                break
            previous = level

        if skipped:
            findings.flag(
                "Heading Hierarchy",
                "Heading levels are not in proper order",
                Severity.MEDIUM,
                "Use heading levels in sequential order (h1, h2, h3, etc.)",
                10,
            )
