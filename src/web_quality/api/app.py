"""FastAPI web service for Web Quality Analyzer.

Provides REST API endpoints for:
- Analyzing a page from an ``analyze`` message
- Exporting a finished report as a JSON download
- Rendering a finished report as HTML
"""

import logging

from fastapi import Body, FastAPI, HTTPException, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import ValidationError

from ..crawler import ANALYSIS_FAILED_MESSAGE, PageLoadError, load_snapshot
from ..dom import DocumentSnapshot
from ..models import AnalysisResult
from ..reporting import ReportAggregator, export_filename, export_json
from .messages import handle_message

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Web Quality Analyzer",
    description="Heuristic accessibility, SEO and performance scoring for web pages",
    version="0.1.0",
)

# Browser extensions and local tools post from arbitrary origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

aggregator = ReportAggregator()


def _load(url: str) -> DocumentSnapshot:
    return load_snapshot(url)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/messages")
def receive_message(payload: dict = Body(...)):
    """Handle one transport message.

    ``{"action": "analyze", ...}`` returns the full analysis; any other
    action is ignored with an empty 204 response.
    """
    try:
        result = handle_message(payload, loader=_load)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.errors(include_url=False, include_context=False, include_input=False),
        )
    except PageLoadError as e:
        logger.warning(f"Analysis failed for {payload.get('url')}: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=ANALYSIS_FAILED_MESSAGE,
        )

    if result is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return JSONResponse(result.to_dict())


@app.post("/export")
def export_report(result: AnalysisResult):
    """Return a report as a downloadable JSON document with ``exportedAt``."""
    return Response(
        content=export_json(result).encode("utf-8"),
        media_type="application/json; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{export_filename()}"'},
    )


@app.post("/report", response_class=HTMLResponse)
def render_report(result: AnalysisResult):
    """Render a report as a standalone HTML page."""
    return aggregator.generate_html_report(result)
