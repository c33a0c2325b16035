"""Session services."""

from apps.market.application.session.services.access_gate import (
    ALLOWED_PATHS,
    CREATE_CHARACTER_PATH,
    HOME_PATH,
    LOGIN_PATH,
    AccessDecision,
    AccessGate,
    AccessState,
    normalize_path,
)

__all__ = [
    "ALLOWED_PATHS",
    "AccessDecision",
    "AccessGate",
    "AccessState",
    "CREATE_CHARACTER_PATH",
    "HOME_PATH",
    "LOGIN_PATH",
    "normalize_path",
]
