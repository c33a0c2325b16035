"""bcrypt password hasher."""

from __future__ import annotations

import bcrypt


class BcryptPasswordHasher:
    """PasswordHasher 포트의 bcrypt 구현체."""

    def __init__(self, rounds: int = 12) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(self._rounds)).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            # 손상된 해시
            return False
