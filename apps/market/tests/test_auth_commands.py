"""Auth command 단위 테스트."""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from apps.market.application.auth.commands import SignInInteractor, SignUpInteractor
from apps.market.application.auth.dto import SignInRequest, SignUpRequest
from apps.market.application.auth.exceptions import (
    AccountAlreadyExistsError,
    InvalidCredentialsError,
    WeakPasswordError,
)
from apps.market.application.auth.ports import IssuedToken
from apps.market.domain.entities import Account
from apps.market.domain.exceptions import InvalidEmailError

pytestmark = pytest.mark.asyncio


@pytest.fixture
def mock_account_gateway() -> AsyncMock:
    gateway = AsyncMock()
    gateway.get_by_email = AsyncMock(return_value=None)
    return gateway


@pytest.fixture
def mock_hasher() -> MagicMock:
    hasher = MagicMock()
    hasher.hash.return_value = "hashed"
    hasher.verify.return_value = True
    return hasher


@pytest.fixture
def mock_token_issuer() -> MagicMock:
    issuer = MagicMock()
    issuer.issue.return_value = IssuedToken(access_token="token", expires_at=1_900_000_000)
    return issuer


@pytest.fixture
def sign_up(
    mock_account_gateway: AsyncMock,
    mock_hasher: MagicMock,
    mock_token_issuer: MagicMock,
    mock_tx: AsyncMock,
) -> SignUpInteractor:
    return SignUpInteractor(
        account_gateway=mock_account_gateway,
        password_hasher=mock_hasher,
        token_issuer=mock_token_issuer,
        transaction_manager=mock_tx,
        min_password_length=8,
    )


class TestSignUp:
    async def test_creates_account(
        self,
        sign_up: SignUpInteractor,
        mock_account_gateway: AsyncMock,
        mock_tx: AsyncMock,
    ) -> None:
        result = await sign_up.execute(
            SignUpRequest(email=" Ada@Example.com ", password="correct-horse", first_name="Ada")
        )

        account = mock_account_gateway.add.await_args.args[0]
        assert account.email == "ada@example.com"
        assert account.password_hash == "hashed"
        assert account.first_name == "Ada"
        assert account.last_name is None
        assert result.user_id == account.id
        assert result.access_token == "token"
        mock_tx.commit.assert_awaited_once()

    async def test_weak_password(
        self, sign_up: SignUpInteractor, mock_account_gateway: AsyncMock
    ) -> None:
        with pytest.raises(WeakPasswordError):
            await sign_up.execute(SignUpRequest(email="ada@example.com", password="short"))

        mock_account_gateway.add.assert_not_awaited()

    async def test_invalid_email(self, sign_up: SignUpInteractor) -> None:
        with pytest.raises(InvalidEmailError):
            await sign_up.execute(SignUpRequest(email="not-an-email", password="correct-horse"))

    async def test_duplicate_email(
        self, sign_up: SignUpInteractor, mock_account_gateway: AsyncMock, mock_tx: AsyncMock
    ) -> None:
        mock_account_gateway.get_by_email.return_value = Account(
            email="ada@example.com", password_hash="x"
        )

        with pytest.raises(AccountAlreadyExistsError):
            await sign_up.execute(SignUpRequest(email="ada@example.com", password="correct-horse"))

        mock_tx.commit.assert_not_awaited()


class TestSignIn:
    async def test_valid_credentials(
        self,
        mock_account_gateway: AsyncMock,
        mock_hasher: MagicMock,
        mock_token_issuer: MagicMock,
    ) -> None:
        account = Account(email="ada@example.com", password_hash="hashed", id=uuid4())
        mock_account_gateway.get_by_email.return_value = account
        interactor = SignInInteractor(mock_account_gateway, mock_hasher, mock_token_issuer)

        result = await interactor.execute(
            SignInRequest(email="ADA@example.com", password="correct-horse")
        )

        assert result.user_id == account.id
        mock_account_gateway.get_by_email.assert_awaited_once_with("ada@example.com")
        mock_token_issuer.issue.assert_called_once_with(account.id)

    async def test_wrong_password(
        self,
        mock_account_gateway: AsyncMock,
        mock_hasher: MagicMock,
        mock_token_issuer: MagicMock,
    ) -> None:
        mock_account_gateway.get_by_email.return_value = Account(
            email="ada@example.com", password_hash="hashed"
        )
        mock_hasher.verify.return_value = False
        interactor = SignInInteractor(mock_account_gateway, mock_hasher, mock_token_issuer)

        with pytest.raises(InvalidCredentialsError) as exc_info:
            await interactor.execute(SignInRequest(email="ada@example.com", password="nope"))

        assert exc_info.value.message == "Invalid login credentials"
        mock_token_issuer.issue.assert_not_called()

    @pytest.mark.parametrize("email", ["unknown@example.com", "garbage"])
    async def test_unknown_or_malformed_email(
        self,
        mock_account_gateway: AsyncMock,
        mock_hasher: MagicMock,
        mock_token_issuer: MagicMock,
        email: str,
    ) -> None:
        interactor = SignInInteractor(mock_account_gateway, mock_hasher, mock_token_issuer)

        with pytest.raises(InvalidCredentialsError):
            await interactor.execute(SignInRequest(email=email, password="whatever"))
