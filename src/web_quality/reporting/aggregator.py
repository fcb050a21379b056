"""Report aggregator for combining category results.

Composes the three category results into one AnalysisResult and renders
finished reports as text or HTML.
"""

import html as html_module
import math
from datetime import datetime, timezone

from ..dom import DocumentSnapshot
from ..models import (
    AnalysisResult,
    Categories,
    CategoryResult,
    IssueCategory,
    PageInfo,
    ScoreTier,
)

CATEGORY_LABELS = {
    IssueCategory.ACCESSIBILITY: ("🎯", "♿", "Accessibility"),
    IssueCategory.SEO: ("🔍", "🔍", "SEO"),
    IssueCategory.PERFORMANCE: ("⚡", "⚡", "Performance"),
}

TIER_BACKGROUNDS = {
    ScoreTier.EXCELLENT: "linear-gradient(135deg, #4facfe 0%, #00f2fe 100%)",
    ScoreTier.GOOD: "linear-gradient(135deg, #43e97b 0%, #38f9d7 100%)",
    ScoreTier.FAIR: "linear-gradient(135deg, #fa709a 0%, #fee140 100%)",
    ScoreTier.POOR: "linear-gradient(135deg, #ff6b6b 0%, #ee5a24 100%)",
}


def score_tier(score: float) -> ScoreTier:
    """Map a score to its display tier. Never used for scoring."""
    if score >= 90:
        return ScoreTier.EXCELLENT
    if score >= 80:
        return ScoreTier.GOOD
    if score >= 60:
        return ScoreTier.FAIR
    return ScoreTier.POOR


def iso_timestamp(moment: datetime) -> str:
    """Format an instant as UTC ISO-8601 with milliseconds, e.g. 2026-10-19T08:30:00.000Z."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class ReportAggregator:
    """Aggregates category results into a page report."""

    def aggregate(
        self,
        document: DocumentSnapshot,
        accessibility: CategoryResult,
        seo: CategoryResult,
        performance: CategoryResult,
        now: datetime,
    ) -> AnalysisResult:
        """Combine the three category results into one report.

        Args:
            document: The analyzed snapshot, source of URL and title
            accessibility: Accessibility analyzer output
            seo: SEO analyzer output
            performance: Performance analyzer output
            now: Instant recorded as the report timestamp

        Returns:
            AnalysisResult with the rounded mean as overall score
        """
        total = accessibility.score + seo.score + performance.score

        return AnalysisResult(
            score=round_half_up(total / 3),
            page_info=PageInfo(
                url=document.url,
                title=document.title,
                timestamp=iso_timestamp(now),
            ),
            categories=Categories(
                accessibility=accessibility,
                seo=seo,
                performance=performance,
            ),
        )

    def generate_text_report(self, result: AnalysisResult) -> str:
        """Generate a plain text report."""
        lines = [
            "=" * 80,
            "PAGE QUALITY REPORT",
            "=" * 80,
            "",
            f"URL: {result.page_info.url}",
            f"Title: {result.page_info.title}",
            f"Date: {result.page_info.timestamp}",
            "",
            f"Overall Score: {result.score}/100 ({score_tier(result.score).value})",
            "",
        ]

        for category, category_result in result.categories.items():
            _, _, label = CATEGORY_LABELS[category]
            lines.extend([
                "-" * 40,
                f"{label.upper()}: {category_result.score}/100 "
                f"({category_result.issue_count} issues)",
                "-" * 40,
            ])
            for issue in category_result.issues:
                lines.append(f"  [{issue.severity.upper()}] {issue.type}: {issue.message}")
                if issue.element:
                    lines.append(f"      Element: {issue.element}")
            for suggestion in category_result.suggestions:
                lines.append(f"  * {suggestion}")
            lines.append("")

        return "\n".join(lines)

    def generate_html_report(self, result: AnalysisResult) -> str:
        """Generate a standalone HTML report with an overview and one section per category."""
        esc = html_module.escape

        overview_cards = ""
        category_sections = ""
        for category, category_result in result.categories.items():
            overview_icon, section_icon, label = CATEGORY_LABELS[category]
            count_class = "success" if category_result.issue_count == 0 else ""
            overview_cards += f"""
    <div class="metric-card">
      <div class="metric-header">
        <div class="metric-title">{overview_icon} {label}</div>
        <div class="metric-count {count_class}">{category_result.issue_count} issues</div>
      </div>
      <div class="metric-score">Score: {category_result.score}/100</div>
    </div>"""
            category_sections += self._category_section_html(
                category.value, label, section_icon, category_result
            )

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Quality Report - {esc(result.page_info.title or result.page_info.url)}</title>
  <style>
    body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; max-width: 720px; margin: 0 auto; padding: 20px; background: #f8f9fa; }}
    .score-card {{ color: white; border-radius: 12px; padding: 20px; text-align: center; margin-bottom: 15px; }}
    .score-number {{ font-size: 48px; font-weight: 700; }}
    .metric-card {{ background: white; border-radius: 8px; padding: 15px; margin-bottom: 12px; box-shadow: 0 1px 3px rgba(0,0,0,0.1); }}
    .metric-header {{ display: flex; justify-content: space-between; }}
    .metric-title {{ font-weight: 600; }}
    .metric-count {{ color: #dc3545; }}
    .metric-count.success {{ color: #28a745; }}
    .metric-score {{ font-size: 12px; color: #6c757d; }}
    .issue-list {{ list-style: none; padding: 0; }}
    .issue-item, .suggestion-item {{ padding: 8px 0; border-bottom: 1px solid #eee; }}
    .empty-state {{ text-align: center; padding: 30px; color: #6c757d; }}
  </style>
</head>
<body>
  <div class="page-info">
    <div class="page-url">{esc(result.page_info.url)}</div>
    <div class="page-timestamp">{esc(result.page_info.timestamp)}</div>
  </div>
  <section id="overview">
    {self._score_card_html(result.score, "Overall Quality Score")}{overview_cards}
  </section>{category_sections}
</body>
</html>
"""

    def _score_card_html(self, score: int, label: str) -> str:
        tier = score_tier(score)
        return (
            f'<div class="score-card tier-{tier.value}" style="background: {TIER_BACKGROUNDS[tier]};">'
            f'<div class="score-number">{score}</div>'
            f'<div class="score-label">{label}</div></div>'
        )

    def _category_section_html(
        self,
        section_id: str,
        label: str,
        icon: str,
        category_result: CategoryResult,
    ) -> str:
        esc = html_module.escape

        if not category_result.issues and not category_result.suggestions:
            return f"""
  <section id="{section_id}">
    <h2>{label}</h2>
    <div class="empty-state">
      <div style="font-size: 48px; margin-bottom: 15px;">{icon}</div>
      <div style="color: #28a745; font-weight: 600;">Perfect Score!</div>
      <div>No issues found in this category</div>
    </div>
  </section>"""

        content = self._score_card_html(category_result.score, "Category Score")

        if category_result.issues:
            items = ""
            for issue in category_result.issues:
                element_html = ""
                if issue.element:
                    element_html = f'<br><small style="color: #6c757d;">Element: {esc(issue.element)}</small>'
                items += (
                    f'<li class="issue-item severity-{issue.severity}">'
                    f"<strong>{esc(issue.type)}:</strong> {esc(issue.message)}{element_html}</li>"
                )
            content += f"""
    <div class="metric-card">
      <div class="metric-title">🚨 Issues Found</div>
      <ul class="issue-list">{items}</ul>
    </div>"""

        if category_result.suggestions:
            items = "".join(
                f'<li class="suggestion-item">{esc(s)}</li>' for s in category_result.suggestions
            )
            content += f"""
    <div class="metric-card">
      <div class="metric-title">💡 Suggestions</div>
      <ul class="issue-list">{items}</ul>
    </div>"""

        return f"""
  <section id="{section_id}">
    <h2>{label}</h2>
    {content}
  </section>"""
