"""Tests for analyzer modules."""

import pytest

from conftest import build_page
from web_quality.analyzers import (
    AccessibilityAnalyzer,
    PerformanceAnalyzer,
    SEOAnalyzer,
)
from web_quality.analyzers.performance_analyzer import GENERAL_SUGGESTIONS
from web_quality.dom import DocumentSnapshot
from web_quality.models import Severity


def snapshot(body: str = "", head: str = "", url: str = "https://example.com/page", **kwargs):
    html = f"<html><head>{head}</head><body>{body}</body></html>"
    return DocumentSnapshot.from_html(html, url=url, **kwargs)


def issues_of(result, issue_type: str):
    return [i for i in result.issues if i.type == issue_type]


class TestAccessibilityAnalyzer:
    """Tests for accessibility analyzer."""

    def setup_method(self):
        self.analyzer = AccessibilityAnalyzer()

    def test_empty_page(self):
        """Test that an empty page scores 100 with no issues."""
        result = self.analyzer.analyze(snapshot())

        assert result.score == 100
        assert result.issues == []
        assert result.suggestions == []

    def test_image_missing_alt(self):
        """Test detection of images without alt text."""
        result = self.analyzer.analyze(snapshot('<img src="test.jpg">'))

        alt_issues = issues_of(result, "Missing Alt Text")
        assert len(alt_issues) == 1
        assert alt_issues[0].severity == Severity.HIGH
        assert alt_issues[0].message == "1 images missing alt text"
        assert alt_issues[0].element == "https://example.com/test.jpg"
        assert "Add descriptive alt text to all images for screen readers" in result.suggestions

    @pytest.mark.parametrize("alt", ['alt=""', 'alt="   "'])
    def test_blank_alt_is_missing(self, alt):
        """Test that empty and whitespace-only alt text count as missing."""
        result = self.analyzer.analyze(snapshot(f'<img src="test.jpg" {alt}>'))
        assert issues_of(result, "Missing Alt Text")

    def test_image_with_alt(self):
        """Test that images with alt don't trigger issues."""
        result = self.analyzer.analyze(snapshot('<img src="test.jpg" alt="A dog playing">'))
        assert not issues_of(result, "Missing Alt Text")
        assert result.score == 100

    def test_alt_deduction_per_image(self):
        result = self.analyzer.analyze(snapshot('<img src="a.jpg"><img src="b.jpg">'))
        assert result.score == 94

    def test_alt_deduction_capped(self):
        """Test that 10 images (30 points) are capped at 25."""
        result = self.analyzer.analyze(snapshot('<img src="x.jpg">' * 10))

        assert result.score == 75
        assert issues_of(result, "Missing Alt Text")[0].message == "10 images missing alt text"

    def test_alt_element_fallback(self):
        result = self.analyzer.analyze(snapshot("<img>"))
        assert issues_of(result, "Missing Alt Text")[0].element == "Unknown image"

    def test_alt_element_without_page_url(self):
        result = self.analyzer.analyze(snapshot('<img src="photo.jpg">', url=""))
        assert issues_of(result, "Missing Alt Text")[0].element == "photo.jpg"

    @pytest.mark.parametrize("control", [
        '<input type="text">',
        '<input type="email">',
        '<input type="password">',
    ])
    def test_form_without_label(self, control):
        """Test detection of form inputs without labels."""
        result = self.analyzer.analyze(snapshot(control))

        label_issues = issues_of(result, "Form Accessibility")
        assert len(label_issues) == 1
        assert label_issues[0].severity == Severity.HIGH
        assert label_issues[0].message == "1 form inputs without labels"
        assert label_issues[0].element == "INPUT element"
        assert result.score == 96

    def test_textarea_and_select_without_label(self):
        result = self.analyzer.analyze(snapshot("<textarea></textarea><select></select>"))

        issue = issues_of(result, "Form Accessibility")[0]
        assert issue.message == "2 form inputs without labels"
        assert issue.element == "TEXTAREA element"
        assert result.score == 92

    def test_form_with_label_for(self):
        result = self.analyzer.analyze(
            snapshot('<label for="email">Email</label><input type="email" id="email">')
        )
        assert not issues_of(result, "Form Accessibility")

    def test_form_with_aria_label(self):
        result = self.analyzer.analyze(snapshot('<input type="text" aria-label="Search">'))
        assert not issues_of(result, "Form Accessibility")

    def test_label_for_other_id(self):
        result = self.analyzer.analyze(
            snapshot('<label for="other">Other</label><input type="text" id="name">')
        )
        assert issues_of(result, "Form Accessibility")

    def test_untyped_input_not_checked(self):
        result = self.analyzer.analyze(snapshot('<input><input type="checkbox">'))
        assert not issues_of(result, "Form Accessibility")

    def test_form_deduction_capped(self):
        """Test that 6 unlabelled inputs (24 points) are capped at 20."""
        result = self.analyzer.analyze(snapshot('<input type="text">' * 6))
        assert result.score == 80

    def test_color_contrast_advisory(self):
        """Test that inline colors add a suggestion but no issue."""
        result = self.analyzer.analyze(snapshot('<p style="color: #777">Grey text</p>'))

        assert result.issues == []
        assert result.score == 100
        assert result.suggestions == [
            "Verify color contrast ratios meet WCAG guidelines (4.5:1 for normal text)"
        ]

    def test_focus_indicator_advisory(self):
        result = self.analyzer.analyze(snapshot('<a href="/about">About</a>'))

        assert result.issues == []
        assert result.suggestions == ["Ensure all interactive elements have visible focus indicators"]

    def test_skipped_heading_level(self):
        result = self.analyzer.analyze(snapshot("<h1>Title</h1><h3>Deep</h3>"))

        heading_issues = issues_of(result, "Heading Hierarchy")
        assert len(heading_issues) == 1
        assert heading_issues[0].severity == Severity.MEDIUM
        assert heading_issues[0].message == "Heading levels are not in proper order"
        assert heading_issues[0].element is None
        assert result.score == 90

    def test_multiple_skips_flagged_once(self):
        result = self.analyzer.analyze(snapshot("<h1>A</h1><h3>B</h3><h2>C</h2><h6>D</h6>"))

        assert len(issues_of(result, "Heading Hierarchy")) == 1
        assert result.score == 90

    def test_sequential_headings(self):
        """Test that siblings and decreasing levels are fine."""
        result = self.analyzer.analyze(
            snapshot("<h1>A</h1><h2>B</h2><h2>C</h2><h3>D</h3><h1>E</h1><h2>F</h2>")
        )
        assert not issues_of(result, "Heading Hierarchy")

    def test_first_heading_below_h1(self):
        """Test that a page opening with h2 counts as a skip from level 0."""
        result = self.analyzer.analyze(snapshot("<h2>Section</h2>"))
        assert issues_of(result, "Heading Hierarchy")

    def test_issue_order_follows_rules(self):
        result = self.analyzer.analyze(snapshot('<h1>A</h1><h4>B</h4><input type="text"><img src="a.png">'))

        assert [i.type for i in result.issues] == [
            "Missing Alt Text",
            "Form Accessibility",
            "Heading Hierarchy",
        ]
        assert result.score == 100 - 3 - 4 - 10


class TestSEOAnalyzer:
    """Tests for SEO analyzer."""

    def setup_method(self):
        self.analyzer = SEOAnalyzer()

    def analyze(self, **kwargs):
        return self.analyzer.analyze(DocumentSnapshot.from_html(build_page(**kwargs)))

    def test_valid_seo(self):
        """Test that valid SEO doesn't generate issues or advisories."""
        result = self.analyze()

        assert result.score == 100
        assert result.issues == []
        assert result.suggestions == []

    def test_missing_title(self):
        result = self.analyze(title="")

        title_issues = issues_of(result, "Page Title")
        assert len(title_issues) == 1
        assert title_issues[0].message == "Page has no title"
        assert title_issues[0].severity == Severity.HIGH
        assert result.score == 75

    def test_whitespace_title(self):
        result = self.analyze(title="   \n  ")
        assert issues_of(result, "Page Title")[0].message == "Page has no title"

    def test_no_title_element(self):
        html = "<html><head></head><body><h1>Hello</h1></body></html>"
        result = self.analyzer.analyze(DocumentSnapshot.from_html(html))
        assert issues_of(result, "Page Title")[0].message == "Page has no title"

    @pytest.mark.parametrize("length", [10, 35, 60])
    def test_title_length_in_range(self, length):
        result = self.analyze(title="t" * length)
        assert not issues_of(result, "Page Title")

    def test_title_too_short(self):
        result = self.analyze(title="t" * 9)

        issue = issues_of(result, "Page Title")[0]
        assert issue.message == "Page title is too short"
        assert issue.severity == Severity.MEDIUM
        assert result.score == 85

    def test_title_too_long(self):
        result = self.analyze(title="t" * 61)

        issue = issues_of(result, "Page Title")[0]
        assert issue.message == "Page title is too long"
        assert issue.severity == Severity.LOW
        assert result.score == 95

    def test_missing_meta_description(self):
        result = self.analyze(description=None)

        issue = issues_of(result, "Meta Description")[0]
        assert issue.message == "Missing meta description"
        assert issue.severity == Severity.HIGH
        assert result.score == 80

    def test_empty_meta_description(self):
        result = self.analyze(description="")
        assert issues_of(result, "Meta Description")[0].message == "Missing meta description"

    @pytest.mark.parametrize("length", [120, 160])
    def test_meta_description_boundaries(self, length):
        result = self.analyze(description="d" * length)
        assert not issues_of(result, "Meta Description")

    def test_meta_description_too_short(self):
        result = self.analyze(description="d" * 119)

        assert issues_of(result, "Meta Description")[0].message == "Meta description is too short"
        assert result.score == 90

    def test_meta_description_too_long(self):
        result = self.analyze(description="d" * 161)

        assert issues_of(result, "Meta Description")[0].message == "Meta description is too long"
        assert result.score == 95

    def test_missing_h1(self):
        result = self.analyze(body="<p>Content</p>")

        issue = issues_of(result, "H1 Heading")[0]
        assert issue.message == "No H1 heading found"
        assert issue.severity == Severity.HIGH
        assert result.score == 80

    def test_multiple_h1(self):
        result = self.analyze(body="<h1>First</h1><h1>Second</h1>")

        issue = issues_of(result, "H1 Heading")[0]
        assert issue.message == "Multiple H1 headings found (2)"
        assert issue.severity == Severity.MEDIUM
        assert result.score == 85

    def test_canonical_rel_is_case_insensitive(self):
        result = self.analyze(head_extra=(
            '<link rel="Canonical" href="/page">'
            '<meta property="og:title" content="T">'
            '<meta property="og:description" content="D">'
        ))

        assert result.suggestions == []

    def test_missing_canonical_is_advisory(self):
        result = self.analyze(head_extra=(
            '<meta property="og:title" content="T">'
            '<meta property="og:description" content="D">'
        ))

        assert result.score == 100
        assert result.suggestions == [
            "Consider adding a canonical URL to prevent duplicate content issues"
        ]

    @pytest.mark.parametrize("og_tags", [
        '<meta property="og:title" content="T">',
        '<meta property="og:description" content="D">',
        "",
    ])
    def test_open_graph_single_suggestion(self, og_tags):
        result = self.analyze(head_extra='<link rel="canonical" href="/page">' + og_tags)

        assert result.score == 100
        assert result.suggestions == ["Add Open Graph meta tags for better social media sharing"]

    def test_everything_missing(self):
        result = self.analyzer.analyze(DocumentSnapshot.from_html("<html></html>"))

        assert [i.type for i in result.issues] == ["Page Title", "Meta Description", "H1 Heading"]
        assert result.score == 35
        assert len(result.suggestions) == 5


class TestPerformanceAnalyzer:
    """Tests for performance analyzer."""

    def setup_method(self):
        self.analyzer = PerformanceAnalyzer()

    def test_empty_page(self):
        """Test that only the general suggestions are present for an empty page."""
        result = self.analyzer.analyze(snapshot())

        assert result.score == 100
        assert result.issues == []
        assert result.suggestions == GENERAL_SUGGESTIONS

    def test_image_at_limit_not_flagged(self):
        result = self.analyzer.analyze(
            snapshot('<img src="hero.jpg" loading="lazy">', image_sizes=[(1920, 1080)])
        )
        assert not issues_of(result, "Image Optimization")

    @pytest.mark.parametrize("size", [(1921, 1080), (1920, 1081)])
    def test_large_image(self, size):
        result = self.analyzer.analyze(
            snapshot('<img src="hero.jpg" loading="lazy">', image_sizes=[size])
        )

        issue = issues_of(result, "Image Optimization")[0]
        assert issue.message == "1 images larger than 1920x1080"
        assert issue.severity == Severity.MEDIUM
        assert issue.element == "https://example.com/hero.jpg"
        assert result.score == 97

    def test_large_image_element_is_first_offender(self):
        body = '<img src="small.jpg" loading="lazy"><img src="big.jpg" loading="lazy">'
        result = self.analyzer.analyze(snapshot(body, image_sizes=[(800, 600), (4000, 3000)]))
        assert issues_of(result, "Image Optimization")[0].element == "https://example.com/big.jpg"

    def test_large_images_capped(self):
        body = '<img src="x.jpg" loading="lazy">' * 7
        result = self.analyzer.analyze(snapshot(body, image_sizes=[(4000, 3000)] * 7))
        assert result.score == 80

    def test_noscript_fallback_in_live_snapshot(self):
        """Test that a noscript fallback image neither shifts sizes nor gets counted."""
        html = (
            '<html><body><noscript><img src="fallback.png"></noscript>'
            '<img src="hero.jpg" alt="h" loading="lazy" data-wqa-index="0"></body></html>'
        )
        doc = DocumentSnapshot.from_html(
            html, url="https://example.com/", image_sizes=[(4000, 3000)], rendered=True
        )

        performance = self.analyzer.analyze(doc)
        accessibility = AccessibilityAnalyzer().analyze(doc)

        assert issues_of(performance, "Image Optimization")[0].element == "https://example.com/hero.jpg"
        assert not issues_of(accessibility, "Missing Alt Text")

    def test_static_snapshot_has_no_sizes(self):
        result = self.analyzer.analyze(snapshot('<img src="x.jpg" width="5000" loading="lazy">'))
        assert not issues_of(result, "Image Optimization")

    def test_three_eager_images_ok(self):
        result = self.analyzer.analyze(snapshot('<img src="x.jpg">' * 3))
        assert not issues_of(result, "Lazy Loading")

    @pytest.mark.parametrize("count", [4, 40])
    def test_lazy_loading_flat_deduction(self, count):
        result = self.analyzer.analyze(snapshot('<img src="x.jpg">' * count))

        issue = issues_of(result, "Lazy Loading")[0]
        assert issue.message == f"{count} images without lazy loading"
        assert issue.severity == Severity.LOW
        assert result.score == 90

    def test_any_loading_value_counts(self):
        result = self.analyzer.analyze(snapshot('<img src="x.jpg" loading="eager">' * 5))
        assert not issues_of(result, "Lazy Loading")

    def test_empty_loading_counts_as_missing(self):
        result = self.analyzer.analyze(snapshot('<img src="x.jpg" alt="x" loading="">' * 4))

        assert issues_of(result, "Lazy Loading")[0].message == "4 images without lazy loading"
        assert result.score == 90

    def test_ten_external_resources_ok(self):
        body = '<script src="https://cdn.example.org/a.js"></script>' * 10
        result = self.analyzer.analyze(snapshot(body))
        assert not issues_of(result, "External Resources")

    def test_external_resources(self):
        head = '<link rel="stylesheet" href="https://cdn.example.org/a.css">' * 5
        body = '<script src="https://cdn.example.org/a.js"></script>' * 6
        result = self.analyzer.analyze(snapshot(body, head=head))

        issue = issues_of(result, "External Resources")[0]
        assert issue.message == "11 external resources detected"
        assert issue.severity == Severity.MEDIUM
        assert result.score == 98

    def test_external_resources_capped(self):
        body = '<script src="http://cdn.example.org/a.js"></script>' * 20
        result = self.analyzer.analyze(snapshot(body))
        assert result.score == 85

    def test_relative_resources_ignored(self):
        body = '<script src="/static/app.js"></script>' * 15
        result = self.analyzer.analyze(snapshot(body))
        assert not issues_of(result, "External Resources")

    def test_inline_styles(self):
        ok = self.analyzer.analyze(snapshot('<div style="margin: 0"></div>' * 20))
        flagged = self.analyzer.analyze(snapshot('<div style="margin: 0"></div>' * 21))

        assert not issues_of(ok, "Inline Styles")
        issue = issues_of(flagged, "Inline Styles")[0]
        assert issue.message == "21 elements with inline styles"
        assert flagged.score == 95

    def test_external_link_without_rel(self):
        result = self.analyzer.analyze(snapshot('<a href="https://other.org/">Other</a>'))

        issue = issues_of(result, "External Links")[0]
        assert issue.message == "1 external links without rel attributes"
        assert issue.severity == Severity.LOW
        assert result.score == 99

    def test_external_link_with_rel(self):
        body = '<a href="https://other.org/" rel="noopener noreferrer">Other</a>'
        result = self.analyzer.analyze(snapshot(body))
        assert not issues_of(result, "External Links")

    def test_external_link_with_empty_rel(self):
        result = self.analyzer.analyze(snapshot('<a href="https://other.org/" rel="">Other</a>'))

        assert issues_of(result, "External Links")[0].message == "1 external links without rel attributes"
        assert result.score == 99

    def test_same_host_and_relative_links(self):
        body = '<a href="https://example.com/about">About</a><a href="/contact">Contact</a>'
        result = self.analyzer.analyze(snapshot(body))
        assert not issues_of(result, "External Links")

    def test_external_links_capped(self):
        result = self.analyzer.analyze(snapshot('<a href="https://other.org/">x</a>' * 15))
        assert result.score == 90

    def test_links_ignored_without_page_hostname(self):
        """Every href contains the empty hostname, so nothing is external."""
        result = self.analyzer.analyze(snapshot('<a href="https://other.org/">x</a>', url=""))
        assert not issues_of(result, "External Links")

    def test_general_suggestions_always_last(self):
        result = self.analyzer.analyze(snapshot('<img src="x.jpg">' * 4))

        assert result.suggestions[-3:] == GENERAL_SUGGESTIONS
        assert len(result.suggestions) == 4
