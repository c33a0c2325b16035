"""Auth ports."""

from apps.market.application.auth.ports.account_gateway import AccountGateway
from apps.market.application.auth.ports.password_hasher import PasswordHasher
from apps.market.application.auth.ports.token_issuer import IssuedToken, TokenIssuer

__all__ = ["AccountGateway", "IssuedToken", "PasswordHasher", "TokenIssuer"]
