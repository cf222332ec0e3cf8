# helpers_config.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

import streamlit as st

ROOT = Path(__file__).resolve().parent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardConfig:
    regular_data_path: Path
    franchise_data_path: Path
    leaderboard_size: int = 10
    chart_highlight: int = 3
    map_center_lat: float = 3.5952   # Medan
    map_center_lng: float = 98.6722
    map_zoom: int = 11
    data_cache_ttl: int = 3600
    log_level: str = "INFO"


def _resolve(p: str | Path) -> Path:
    path = Path(p)
    return path if path.is_absolute() else ROOT / path


def _secrets() -> Mapping[str, Any]:
    # no secrets.toml -> run on defaults
    try:
        has_toml = getattr(st.secrets, "load_if_toml_exists", None)
        if has_toml is not None and not has_toml():
            return {}
        return dict(st.secrets)
    except Exception as e:
        logger.warning("Could not read st.secrets, using defaults (%s)", e)
        return {}


def load_config(secrets: Optional[Mapping[str, Any]] = None) -> DashboardConfig:
    s = _secrets() if secrets is None else secrets
    return DashboardConfig(
        regular_data_path=_resolve(s.get("REGULAR_DATA_PATH", "data/dashboard_data.json")),
        franchise_data_path=_resolve(s.get("FRANCHISE_DATA_PATH", "data/franchise_data.json")),
        leaderboard_size=int(s.get("LEADERBOARD_SIZE", 10)),
        chart_highlight=int(s.get("CHART_HIGHLIGHT", 3)),
        map_center_lat=float(s.get("MAP_CENTER_LAT", 3.5952)),
        map_center_lng=float(s.get("MAP_CENTER_LNG", 98.6722)),
        map_zoom=int(s.get("MAP_ZOOM", 11)),
        data_cache_ttl=int(s.get("DATA_CACHE_TTL", 3600)),
        log_level=str(s.get("LOG_LEVEL", "INFO")).upper(),
    )


def setup_logging(level: str = "INFO") -> None:
    """basicConfig is a no-op once the root logger has handlers, so reruns are safe."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
