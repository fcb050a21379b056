"""Analyzer modules for Web Quality Analyzer."""

from .base import BaseAnalyzer, Findings
from .accessibility_analyzer import AccessibilityAnalyzer
from .seo_analyzer import SEOAnalyzer
from .performance_analyzer import PerformanceAnalyzer

__all__ = [
    "BaseAnalyzer",
    "Findings",
    "AccessibilityAnalyzer",
    "SEOAnalyzer",
    "PerformanceAnalyzer",
]
