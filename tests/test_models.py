"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from web_quality.models import (
    AnalysisResult,
    Categories,
    CategoryResult,
    Issue,
    IssueCategory,
    PageInfo,
    Severity,
)


def make_result(**overrides) -> AnalysisResult:
    category = CategoryResult(score=100)
    data = dict(
        score=100,
        page_info=PageInfo(url="https://example.com/", title="Example", timestamp="2026-10-19T08:30:00.000Z"),
        categories=Categories(accessibility=category, seo=category, performance=category),
    )
    data.update(overrides)
    return AnalysisResult(**data)


class TestIssue:
    """Tests for Issue model."""

    def test_create_issue(self):
        """Test creating a basic issue."""
        issue = Issue(type="Page Title", message="Page has no title", severity=Severity.HIGH)

        assert issue.severity == "high"
        assert issue.element is None

    def test_issue_with_element(self):
        issue = Issue(
            type="Missing Alt Text",
            message="1 images missing alt text",
            severity=Severity.HIGH,
            element="https://example.com/a.png",
        )
        assert issue.element == "https://example.com/a.png"

    def test_issue_is_immutable(self):
        issue = Issue(type="H1 Heading", message="No H1 heading found", severity=Severity.HIGH)
        with pytest.raises(ValidationError):
            issue.message = "changed"

    def test_invalid_severity(self):
        with pytest.raises(ValidationError):
            Issue(type="X", message="Y", severity="critical")


class TestCategoryResult:
    """Tests for CategoryResult model."""

    def test_defaults(self):
        result = CategoryResult(score=87)

        assert result.issues == []
        assert result.suggestions == []
        assert result.issue_count == 0

    @pytest.mark.parametrize("score", [-1, 101])
    def test_score_out_of_range(self, score):
        with pytest.raises(ValidationError):
            CategoryResult(score=score)


class TestAnalysisResult:
    """Tests for AnalysisResult model."""

    def test_categories_in_fixed_order(self):
        result = make_result()
        assert [c for c, _ in result.categories.items()] == [
            IssueCategory.ACCESSIBILITY,
            IssueCategory.SEO,
            IssueCategory.PERFORMANCE,
        ]

    def test_to_dict_uses_report_field_names(self):
        data = make_result().to_dict()

        assert set(data) == {"score", "pageInfo", "categories"}
        assert data["pageInfo"] == {
            "url": "https://example.com/",
            "title": "Example",
            "timestamp": "2026-10-19T08:30:00.000Z",
        }
        assert set(data["categories"]) == {"accessibility", "seo", "performance"}

    def test_to_dict_omits_missing_element(self):
        seo = CategoryResult(
            score=80,
            issues=[Issue(type="H1 Heading", message="No H1 heading found", severity=Severity.HIGH)],
            suggestions=["Add a main H1 heading to improve SEO and accessibility"],
        )
        result = make_result(categories=Categories(
            accessibility=CategoryResult(score=100), seo=seo, performance=CategoryResult(score=100),
        ))

        issue = result.to_dict()["categories"]["seo"]["issues"][0]
        assert issue == {"type": "H1 Heading", "message": "No H1 heading found", "severity": "high"}

    def test_parse_from_report_json(self):
        data = make_result(score=42).to_dict()

        parsed = AnalysisResult.model_validate(data)

        assert parsed.score == 42
        assert parsed.page_info.title == "Example"

    def test_overall_score_bounds(self):
        with pytest.raises(ValidationError):
            make_result(score=120)
