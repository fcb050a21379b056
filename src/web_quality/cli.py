"""Command-line interface for Web Quality Analyzer.

Usage:
    web-quality analyze <url-or-file> [--base-url URL] [--output text|json|html]
                        [--export DIR] [--live]
    web-quality serve [--port N]
"""

import argparse
import json
import logging
import re
import sys
from datetime import datetime
from pathlib import Path
from urllib.parse import urlparse

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import API_HOST, API_PORT, LOG_LEVEL
from .crawler import ANALYSIS_FAILED_MESSAGE, PageLoadError, load_snapshot
from .dom import DocumentSnapshot
from .engine import analyze
from .lifecycle import ensure_installed
from .models import AnalysisResult, ScoreTier
from .reporting import ReportAggregator, score_tier, write_export
from .reporting.aggregator import CATEGORY_LABELS

console = Console()
logger = logging.getLogger(__name__)

TIER_STYLES = {
    ScoreTier.EXCELLENT: "bold cyan",
    ScoreTier.GOOD: "bold green",
    ScoreTier.FAIR: "bold yellow",
    ScoreTier.POOR: "bold red",
}

SEVERITY_STYLES = {"high": "red", "medium": "yellow", "low": "dim"}


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="web-quality",
        description="Web Quality Analyzer - heuristic accessibility, SEO and performance scoring",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # analyze command
    analyze_parser = subparsers.add_parser("analyze", help="Analyze a page")
    analyze_parser.add_argument("target", help="URL to fetch, or path to a local HTML file")
    analyze_parser.add_argument(
        "--base-url", "-b",
        help="Page location to assume for a local file (drives external link checks)",
    )
    analyze_parser.add_argument(
        "--output", "-o", choices=["text", "json", "html"], default="text",
        help="Output format (default: text)"
    )
    analyze_parser.add_argument(
        "--export", "-e", metavar="DIR",
        help="Also write quality-analysis-<date>.json into DIR"
    )
    analyze_parser.add_argument(
        "--live", "-l", action="store_true", default=None,
        help="Render the page with Playwright (measures image sizes)"
    )

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument(
        "--port", "-p", type=int, default=API_PORT,
        help=f"Port to listen on (default: {API_PORT})"
    )

    return parser


def url_to_filename_slug(url: str) -> str:
    """Convert URL to a clean filename-safe slug.

    Examples:
        https://example.com -> example
        https://www.example.com/path -> example
    """
    parsed = urlparse(url)
    domain = parsed.netloc or Path(parsed.path).stem

    if domain.startswith("www."):
        domain = domain[4:]

    name = domain.split(".")[0]
    name = re.sub(r"[^a-zA-Z0-9]", "", name)

    return name[:20].lower() if name else "page"


def load_target(target: str, base_url: str = None, live: bool = None) -> DocumentSnapshot:
    """Snapshot of a URL or a local HTML file."""
    path = Path(target)
    if urlparse(target).scheme in ("http", "https") or not path.exists():
        return load_snapshot(target, live=live)

    html = path.read_text(encoding="utf-8", errors="replace")
    return DocumentSnapshot.from_html(html, url=base_url or path.resolve().as_uri())


def print_result(result: AnalysisResult) -> None:
    """Print a report as rich tables."""
    tier = score_tier(result.score)
    console.print(f"\n[bold]{result.page_info.title or result.page_info.url}[/bold]")
    console.print(f"[dim]{result.page_info.url}[/dim]")
    console.print(
        f"Overall Quality Score: [{TIER_STYLES[tier]}]{result.score}/100[/] ({tier.value})\n"
    )

    overview = Table(title="Scores by Category")
    overview.add_column("Category", style="cyan")
    overview.add_column("Score", justify="right")
    overview.add_column("Issues", justify="right")
    for category, category_result in result.categories.items():
        category_tier = score_tier(category_result.score)
        overview.add_row(
            CATEGORY_LABELS[category][2],
            f"[{TIER_STYLES[category_tier]}]{category_result.score}[/]",
            str(category_result.issue_count),
        )
    console.print(overview)

    for category, category_result in result.categories.items():
        if category_result.issues:
            issues = Table(title=f"{CATEGORY_LABELS[category][2]} Issues")
            issues.add_column("Severity")
            issues.add_column("Type", style="bold")
            issues.add_column("Message")
            issues.add_column("Element", style="dim", overflow="fold")
            for issue in category_result.issues:
                style = SEVERITY_STYLES.get(issue.severity, "")
                issues.add_row(
                    f"[{style}]{issue.severity.upper()}[/]",
                    issue.type,
                    issue.message,
                    issue.element or "",
                )
            console.print(issues)

        for suggestion in category_result.suggestions:
            console.print(f"  💡 {suggestion}")
        console.print()


def cmd_analyze(args):
    """Handle analyze command."""
    try:
        document = load_target(args.target, base_url=args.base_url, live=args.live)
    except PageLoadError as e:
        logger.error(f"Failed to load {args.target}: {e}")
        console.print(f"[red]{ANALYSIS_FAILED_MESSAGE}[/red]")
        sys.exit(1)

    result = analyze(document)

    if args.output == "text":
        print_result(result)
    elif args.output == "html":
        aggregator = ReportAggregator()
        html = aggregator.generate_html_report(result)
        url_slug = url_to_filename_slug(result.page_info.url or args.target)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M")
        report_filename = f"report_{url_slug}_{timestamp}.html"
        Path(report_filename).write_text(html, encoding="utf-8")
        console.print(f"\n[green]HTML report saved to: {report_filename}[/green]")
    else:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))

    if args.export:
        path = write_export(result, Path(args.export))
        console.print(f"[green]Exported to: {path}[/green]")


def cmd_serve(args):
    """Handle serve command."""
    console.print(f"[bold]Starting API server on port {args.port}...[/bold]")

    import uvicorn
    from .api import app

    uvicorn.run(app, host=API_HOST, port=args.port)


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging()
    ensure_installed()

    commands = {
        "analyze": cmd_analyze,
        "serve": cmd_serve,
    }

    cmd_func = commands.get(args.command)
    if cmd_func:
        cmd_func(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
