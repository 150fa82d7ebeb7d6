"""Application settings for the point annotator."""

import logging

from dataclasses import dataclass, fields
from typing import Any, Mapping

from geometry import COLORS

logger = logging.getLogger(__name__)


@dataclass
class AppSettings:
    canvas_width: int = 1280
    canvas_height: int = 720
    marker_radius: float = 5.0
    default_color: str = COLORS[0]
    show_trace: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AppSettings":
        """
        Build settings from a mapping. Unknown keys are skipped with a warning.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown settings: %s", ", ".join(unknown))
        settings = cls(**{k: v for k, v in data.items() if k in known})
        if settings.default_color not in COLORS:
            raise ValueError(f"Unsupported default color: {settings.default_color!r}")
        return settings
