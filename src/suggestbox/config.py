"""
Runtime configuration for SuggestBox.

Settings come from environment variables and can be overridden by
command-line flags (see cli_commands).
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger('SuggestBox.Config')

# Query-driven matching only starts at this many characters
MIN_QUERY_LENGTH = 2

# Cap on non-selected matches per category (selected items are never capped)
MAX_SUGGESTIONS = 5

# Seconds to wait after blur before closing, so in-panel clicks land first
BLUR_GRACE_DELAY = 0.15

ENV_AUTO_REFRESH = 'SUGGESTBOX_AUTO_REFRESH'
ENV_GRACE_DELAY = 'SUGGESTBOX_GRACE_DELAY'
ENV_CATALOG = 'SUGGESTBOX_CATALOG'

_TRUTHY = ('1', 'true', 'yes', 'on')


@dataclass
class SuggestBoxSettings:
    """Settings shared by the controller and the TUI."""
    auto_refresh: bool = False
    blur_grace_delay: float = BLUR_GRACE_DELAY
    catalog_path: Optional[str] = None


def _parse_flag(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY


def _parse_grace_delay(value: Optional[str]) -> float:
    if value is None or not value.strip():
        return BLUR_GRACE_DELAY
    try:
        delay = float(value)
    except ValueError:
        logger.warning(f"Ignoring invalid {ENV_GRACE_DELAY}={value!r}, using {BLUR_GRACE_DELAY}s")
        return BLUR_GRACE_DELAY
    if delay < 0:
        logger.warning(f"Ignoring negative {ENV_GRACE_DELAY}={value!r}, using {BLUR_GRACE_DELAY}s")
        return BLUR_GRACE_DELAY
    return delay


def get_settings() -> SuggestBoxSettings:
    """
    Build settings from the environment.

    Returns:
        SuggestBoxSettings: Settings with environment overrides applied
    """
    return SuggestBoxSettings(
        auto_refresh=_parse_flag(os.getenv(ENV_AUTO_REFRESH)),
        blur_grace_delay=_parse_grace_delay(os.getenv(ENV_GRACE_DELAY)),
        catalog_path=os.getenv(ENV_CATALOG) or None,
    )
