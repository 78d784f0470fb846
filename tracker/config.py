"""Settings for the page, read from the environment.

A ``.env`` file in the working directory is loaded first, so the same
variables can be kept there during development.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "₹"
DEFAULT_CHART_HEIGHT = 250
DEFAULT_RECENT_COUNT = 3
DEFAULT_PAGE_TITLE = "Personal Finance Visualizer"
DEFAULT_LOG_LEVEL = "INFO"

# Plotly rejects layout heights below this
MIN_CHART_HEIGHT = 10

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    currency: str = DEFAULT_CURRENCY
    chart_height: int = DEFAULT_CHART_HEIGHT
    recent_count: int = DEFAULT_RECENT_COUNT
    page_title: str = DEFAULT_PAGE_TITLE
    log_level: str = DEFAULT_LOG_LEVEL


def _int_env(name: str, default: int, minimum: int = 0) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("ignoring %s=%r, not an integer; using %s", name, raw, default)
        return default
    if value < minimum:
        logger.warning("ignoring %s=%r, below %s; using %s", name, raw, minimum, default)
        return default
    return value


def load_settings(dotenv: bool = True) -> Settings:
    if dotenv:
        load_dotenv()
    return Settings(
        currency=os.getenv("FINVIS_CURRENCY", DEFAULT_CURRENCY),
        chart_height=_int_env("FINVIS_CHART_HEIGHT", DEFAULT_CHART_HEIGHT, MIN_CHART_HEIGHT),
        recent_count=_int_env("FINVIS_RECENT_COUNT", DEFAULT_RECENT_COUNT),
        page_title=os.getenv("FINVIS_PAGE_TITLE", DEFAULT_PAGE_TITLE),
        log_level=os.getenv("FINVIS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Attach one stream handler to the ``tracker`` logger.

    Streamlit re-executes the page on every interaction, so this must be safe
    to call repeatedly.
    """
    root = logging.getLogger("tracker")
    if not any(getattr(h, "_tracker_handler", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._tracker_handler = True
        root.addHandler(handler)
    resolved = logging.getLevelName(level)
    if not isinstance(resolved, int):
        logger.warning("unknown log level %r; using %s", level, DEFAULT_LOG_LEVEL)
        resolved = logging.INFO
    root.setLevel(resolved)
    return root
