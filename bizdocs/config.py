"""
Runtime configuration for bizdocs.

This module provides the settings layer for the browser-print backend:
- Loads settings from BIZDOCS_* environment variables
- Caches the loaded settings for the lifetime of the process
- Allows the cache to be dropped when the environment changes (tests)

Page layout configuration lives in bizdocs.geometry; this module only covers
process-level settings that are not part of a document.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple


ENV_PREFIX = "BIZDOCS_"
DEFAULT_TIMEOUT_MS = 30000
DEFAULT_LAUNCH_ARGS = ('--no-sandbox', '--disable-setuid-sandbox')


@dataclass(frozen=True)
class BrowserSettings:
    """Settings for launching the headless browser."""
    headless: bool = True
    launch_args: Tuple[str, ...] = DEFAULT_LAUNCH_ARGS
    executable_path: Optional[str] = None
    timeout_ms: int = DEFAULT_TIMEOUT_MS


def _env(name: str) -> Optional[str]:
    value = os.environ.get(f"{ENV_PREFIX}{name}")
    if value is None or not value.strip():
        return None
    return value.strip()


def _env_bool(name: str, default: bool) -> bool:
    value = _env(name)
    if value is None:
        return default
    return value.lower() in ('1', 'true', 'yes', 'on')


@lru_cache(maxsize=1)
def get_browser_settings() -> BrowserSettings:
    """
    Get the browser settings.

    Reads:
        BIZDOCS_BROWSER_HEADLESS: "false" to show the browser window
        BIZDOCS_BROWSER_ARGS: space separated Chromium launch arguments
        BIZDOCS_BROWSER_EXECUTABLE: path to a Chromium executable
        BIZDOCS_BROWSER_TIMEOUT_MS: timeout for content load and font waits

    Returns:
        BrowserSettings instance (cached)

    Raises:
        ValueError: If BIZDOCS_BROWSER_TIMEOUT_MS is not an integer
    """
    args = _env("BROWSER_ARGS")
    timeout = _env("BROWSER_TIMEOUT_MS")

    return BrowserSettings(
        headless=_env_bool("BROWSER_HEADLESS", True),
        launch_args=tuple(args.split()) if args else DEFAULT_LAUNCH_ARGS,
        executable_path=_env("BROWSER_EXECUTABLE"),
        timeout_ms=int(timeout) if timeout else DEFAULT_TIMEOUT_MS,
    )


def invalidate_browser_settings() -> None:
    """
    Drop the cached browser settings.

    The next call to get_browser_settings() re-reads the environment.
    """
    get_browser_settings.cache_clear()
