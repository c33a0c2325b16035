"""AccountGateway Port."""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from apps.market.domain.entities import Account


class AccountGateway(Protocol):
    """계정 저장소 인터페이스.

    구현체:
        - SqlaAccountGateway (infrastructure/persistence_postgres/adapters/)
    """

    async def get_by_email(self, email: str) -> Account | None:
        """이메일로 계정을 조회합니다."""
        ...

    async def add(self, account: Account) -> None:
        """계정을 추가합니다."""
        ...

    async def get_display_names(self, user_ids: list[UUID]) -> dict[UUID, str]:
        """사용자 ID별 표시 이름을 조회합니다.

        Args:
            user_ids: 사용자 ID 목록

        Returns:
            계정이 존재하는 사용자에 대한 {user_id: display_name}
        """
        ...
