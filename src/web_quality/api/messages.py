"""Request/response messages for the analysis endpoint.

A message is a JSON object tagged with an ``action``. Only ``"analyze"`` is
understood; any other action is ignored and gets no response.
"""

import logging
from typing import Callable, Literal, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field, model_validator

from ..dom import DocumentSnapshot
from ..engine import analyze
from ..models import AnalysisResult

logger = logging.getLogger(__name__)

ANALYZE_ACTION = "analyze"
FETCHABLE_SCHEMES = ("http", "https")


class AnalyzeCommand(BaseModel):
    """Ask for a full analysis of one page.

    Either ``html`` (analyzed as-is, located at ``url`` if given) or ``url``
    alone (fetched by the server) must be present.
    """
    action: Literal["analyze"] = ANALYZE_ACTION
    url: Optional[str] = Field(None, description="Page location; fetched when html is absent")
    html: Optional[str] = Field(None, description="Rendered page markup")
    image_sizes: list[tuple[int, int]] = Field(
        default_factory=list,
        alias="imageSizes",
        description="Intrinsic (width, height) of each <img> in document order",
    )
    rendered: bool = Field(False, description="html was serialized from a browser with scripting on")

    class Config:
        populate_by_name = True

    @model_validator(mode="after")
    def _require_source(self) -> "AnalyzeCommand":
        if self.html is None and not self.url:
            raise ValueError("analyze requires either url or html")
        if self.html is None and urlparse(self.url).scheme.lower() not in FETCHABLE_SCHEMES:
            raise ValueError("only http and https pages can be fetched")
        return self


def parse_command(payload: dict) -> Optional[AnalyzeCommand]:
    """Return the command for an ``analyze`` message, ``None`` for any other action.

    Raises:
        ValidationError: The message is an analyze request with a bad body
    """
    if not isinstance(payload, dict) or payload.get("action") != ANALYZE_ACTION:
        logger.debug("Ignoring non-analyze message")
        return None
    return AnalyzeCommand.model_validate(payload)


SnapshotLoader = Callable[[str], DocumentSnapshot]


def command_snapshot(command: AnalyzeCommand, loader: SnapshotLoader) -> DocumentSnapshot:
    """Snapshot described by a command, fetching through ``loader`` when needed."""
    if command.html is not None:
        return DocumentSnapshot.from_html(
            command.html,
            url=command.url or "",
            image_sizes=command.image_sizes,
            rendered=command.rendered,
        )
    return loader(command.url)


def handle_message(payload: dict, loader: SnapshotLoader) -> Optional[AnalysisResult]:
    """Dispatch one message. Returns ``None`` when no response should be sent."""
    command = parse_command(payload)
    if command is None:
        return None
    return analyze(command_snapshot(command, loader))

