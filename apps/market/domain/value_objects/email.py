"""Email Value Object."""

from __future__ import annotations

import re
from dataclasses import dataclass

from apps.market.domain.exceptions.validation import InvalidEmailError

# RFC 5322 간소화 버전
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+$")


@dataclass(frozen=True, slots=True)
class Email:
    """이메일 Value Object.

    소문자로 정규화된 유효한 이메일만 존재합니다.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise InvalidEmailError("Email cannot be empty")
        if len(self.value) > 320:
            raise InvalidEmailError("Email too long (max 320 characters)")
        if not EMAIL_PATTERN.match(self.value):
            raise InvalidEmailError(f"Invalid email format: {self.value}")

    @classmethod
    def parse(cls, raw: str) -> Email:
        return cls((raw or "").strip().lower())

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        local, domain = self.value.split("@")
        return f"Email({local[:2]}***@{domain})"
