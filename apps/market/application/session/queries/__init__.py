"""Session queries."""

from apps.market.application.session.queries.get_session_context import (
    GetSessionContextQuery,
)

__all__ = ["GetSessionContextQuery"]
