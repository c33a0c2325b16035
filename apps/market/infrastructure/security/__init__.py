"""Security infrastructure."""

from apps.market.infrastructure.security.jwt_token_service import JwtTokenService
from apps.market.infrastructure.security.password_hasher import BcryptPasswordHasher

__all__ = ["BcryptPasswordHasher", "JwtTokenService"]
