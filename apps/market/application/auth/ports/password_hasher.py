"""PasswordHasher Port."""

from __future__ import annotations

from typing import Protocol


class PasswordHasher(Protocol):
    """비밀번호 해시 인터페이스."""

    def hash(self, password: str) -> str:
        ...

    def verify(self, password: str, password_hash: str) -> bool:
        ...
