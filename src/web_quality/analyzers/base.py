"""Base analyzer interface.

All analyzers inherit from this base class to ensure consistent interface.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ..dom import DocumentSnapshot
from ..models import CategoryResult, Issue, IssueCategory, Severity

logger = logging.getLogger(__name__)

MAX_SCORE = 100


class Findings:
    """Issues, suggestions and deductions collected during one analysis."""

    def __init__(self):
        self.issues: list[Issue] = []
        self.suggestions: list[str] = []
        self.deductions = 0

    def flag(
        self,
        issue_type: str,
        message: str,
        severity: Severity,
        suggestion: str,
        deduction: int,
        element: Optional[str] = None,
    ) -> None:
        """Record a triggered rule: one issue, one suggestion, one deduction."""
        self.issues.append(Issue(
            type=issue_type,
            message=message,
            severity=severity,
            element=element,
        ))
        self.suggestions.append(suggestion)
        self.deductions += deduction

    def suggest(self, suggestion: str) -> None:
        """Record an advisory suggestion with no score impact."""
        self.suggestions.append(suggestion)

    def to_result(self) -> CategoryResult:
        return CategoryResult(
            score=max(0, MAX_SCORE - self.deductions),
            issues=self.issues,
            suggestions=self.suggestions,
        )


class BaseAnalyzer(ABC):
    """Base class for all analyzers.

    Each analyzer runs a fixed sequence of rules over a document snapshot and
    returns one CategoryResult. Rules never raise for missing elements or
    attributes; absence simply yields zero counts.
    """

    category: IssueCategory

    def analyze(self, document: DocumentSnapshot) -> CategoryResult:
        """Analyze a document and return its scored findings.

        Args:
            document: Read-only snapshot of the page

        Returns:
            CategoryResult with score, issues and suggestions
        """
        findings = Findings()
        self._run_rules(document, findings)
        result = findings.to_result()
        logger.debug(
            "%s score %d (%d issues)", self.category.value, result.score, result.issue_count
        )
        return result

    @abstractmethod
    def _run_rules(self, document: DocumentSnapshot, findings: Findings) -> None:
        """Evaluate every rule in order, recording into ``findings``."""
        pass
