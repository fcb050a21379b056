"""Pydantic models for Web Quality Analyzer.

Defines the issues, per-category results and the top-level analysis report.
Serialized field names follow the report's JSON shape (``pageInfo``), while
Python code uses snake_case attributes.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Severity(str, Enum):
    """Issue severity levels. A display label only, never a scoring weight."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class IssueCategory(str, Enum):
    """The three quality dimensions."""
    ACCESSIBILITY = "accessibility"
    SEO = "seo"
    PERFORMANCE = "performance"


class ScoreTier(str, Enum):
    """Presentational bucket for a 0-100 score."""
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class Issue(BaseModel):
    """A single problem detected by one rule."""
    type: str = Field(..., description="Short category label, e.g. 'Missing Alt Text'")
    message: str = Field(..., description="Human-readable description")
    severity: Severity
    element: Optional[str] = Field(None, description="Resource URL or tag hint of the first offender")

    class Config:
        use_enum_values = True
        frozen = True


class CategoryResult(BaseModel):
    """Output of one analyzer."""
    score: int = Field(..., ge=0, le=100, description="Score from 0-100")
    issues: list[Issue] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)

    @property
    def issue_count(self) -> int:
        return len(self.issues)


class PageInfo(BaseModel):
    """Metadata about the analyzed page."""
    url: str
    title: str
    timestamp: str = Field(..., description="ISO-8601 instant captured at analysis time")


class Categories(BaseModel):
    """Exactly one result per quality dimension."""
    accessibility: CategoryResult
    seo: CategoryResult
    performance: CategoryResult

    def items(self) -> list[tuple[IssueCategory, CategoryResult]]:
        return [
            (IssueCategory.ACCESSIBILITY, self.accessibility),
            (IssueCategory.SEO, self.seo),
            (IssueCategory.PERFORMANCE, self.performance),
        ]


class AnalysisResult(BaseModel):
    """Complete quality report for one page."""
    score: int = Field(..., ge=0, le=100, description="Rounded mean of the category scores")
    page_info: PageInfo = Field(..., alias="pageInfo")
    categories: Categories

    class Config:
        populate_by_name = True

    def to_dict(self) -> dict:
        """Serialize with the report's field names, dropping absent elements."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
