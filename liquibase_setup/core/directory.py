"""
Directory resolution for liquibase-setup.

CI runners advertise a persistent tool cache and a per-job scratch area through
environment variables. Outside a runner we fall back to a directory in the
user's home and the system temp directory.

Directory Structure:
    Tool cache ($RUNNER_TOOL_CACHE or ~/.liquibase-setup/tool-cache):
        - <tool>/<version>/<arch>/        : Cached installations
        - <tool>/<version>/<arch>.complete: Marker written once an entry is usable
        - <tool>/<version>/<arch>.lock    : Per-entry write lock

    Temp ($RUNNER_TEMP or system temp):
        - <uuid>        : Downloaded archives
        - <uuid>/       : Extraction directories
"""

import os
import tempfile
from pathlib import Path


def get_global_cache_dir() -> Path:
    """
    Get the platform-specific base directory for liquibase-setup state.

    Returns:
        - Windows: %USERPROFILE%\\.liquibase-setup
        - Linux/macOS: ~/.liquibase-setup
    """
    if os.name == "nt":
        user_profile = os.environ.get("USERPROFILE")
        if user_profile:
            return Path(user_profile) / ".liquibase-setup"
    return Path.home() / ".liquibase-setup"


def get_tool_cache_dir() -> Path:
    """Root of the tool cache, honouring RUNNER_TOOL_CACHE."""
    runner_cache = os.environ.get("RUNNER_TOOL_CACHE")
    if runner_cache:
        return Path(runner_cache)
    return get_global_cache_dir() / "tool-cache"


def get_temp_dir() -> Path:
    """Scratch directory for downloads and extraction, honouring RUNNER_TEMP."""
    runner_temp = os.environ.get("RUNNER_TEMP")
    if runner_temp:
        return Path(runner_temp)
    return Path(tempfile.gettempdir())


__all__ = ["get_global_cache_dir", "get_tool_cache_dir", "get_temp_dir"]
