"""Web Quality Analyzer - heuristic accessibility, SEO and performance scoring."""

__version__ = "0.1.0"
