"""Application Exceptions."""

from apps.market.application.common.exceptions.auth import (
    AuthenticationRequiredError,
    InvalidTokenError,
    TokenExpiredError,
)
from apps.market.application.common.exceptions.base import (
    ApplicationError,
    AuthenticationError,
    ConflictError,
    FeatureDisabledError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from apps.market.application.common.exceptions.character import ActiveCharacterNotFoundError
from apps.market.application.common.exceptions.gateway import GatewayError
from apps.market.application.common.exceptions.permit import PermitRequiredError

__all__ = [
    "ActiveCharacterNotFoundError",
    "ApplicationError",
    "AuthenticationError",
    "AuthenticationRequiredError",
    "ConflictError",
    "FeatureDisabledError",
    "ForbiddenError",
    "GatewayError",
    "InvalidTokenError",
    "NotFoundError",
    "PermitRequiredError",
    "TokenExpiredError",
    "ValidationError",
]
