from __future__ import annotations

import os


def env_flag(name: str, default: str = "0") -> bool:
    """Reads a boolean switch from the environment ('1', 'true', 'yes', 'on')."""
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


def debug_enabled() -> bool:
    """Set HIVE_DEBUG=1 to print [hive] trace lines from the CLI and the app."""
    return env_flag("HIVE_DEBUG")


def server_port() -> int:
    return int(os.getenv("PORT", "5000"))
