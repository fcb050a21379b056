"""Installation lifecycle hook.

The first run against a data directory fires a one-time notice. A marker
file records that it has fired; nothing here touches the analysis engine.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from . import __version__
from .config import ensure_data_dir
from .slack import notify_installed

logger = logging.getLogger(__name__)

MARKER_NAME = ".installed"


def ensure_installed(data_dir: Optional[Path] = None) -> bool:
    """Fire the installation notice if it has never fired for ``data_dir``.

    Returns:
        True if this call fired the notice, False if it had already fired.
    """
    directory = ensure_data_dir(data_dir)
    marker = directory / MARKER_NAME
    if marker.exists():
        return False

    marker.write_text(datetime.now(timezone.utc).isoformat(), encoding="utf-8")
    logger.info(f"Web Quality Analyzer {__version__} installed")
    notify_installed(__version__)
    return True
