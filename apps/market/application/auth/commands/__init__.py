"""Auth commands."""

from apps.market.application.auth.commands.sign_in import SignInInteractor
from apps.market.application.auth.commands.sign_up import SignUpInteractor

__all__ = ["SignInInteractor", "SignUpInteractor"]
