"""Money Value Object.

crowns/pennies 이중 단위 화폐입니다. 1 crown = 12 pennies.
"""

from __future__ import annotations

from dataclasses import dataclass

from apps.market.domain.exceptions.money import InvalidMoneyError

PENNIES_PER_CROWN = 12


@dataclass(frozen=True, slots=True, order=True)
class Money:
    """화폐 Value Object.

    생성 시점에 불변식(crowns >= 0, 0 <= pennies < 12)을 검증하므로
    항상 정규화된 금액만 존재합니다. 정규화되어 있으므로 필드 순서 비교가
    총액 비교와 같습니다.

    Attributes:
        crowns: 크라운 (0 이상)
        pennies: 페니 (0~11)
    """

    crowns: int
    pennies: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.crowns, bool) or not isinstance(self.crowns, int):
            raise InvalidMoneyError("Crowns must be an integer.")
        if isinstance(self.pennies, bool) or not isinstance(self.pennies, int):
            raise InvalidMoneyError("Pennies must be an integer.")
        if self.crowns < 0:
            raise InvalidMoneyError("Crowns cannot be negative.")
        if not 0 <= self.pennies < PENNIES_PER_CROWN:
            raise InvalidMoneyError(
                f"Pennies must be between 0 and {PENNIES_PER_CROWN - 1}."
            )

    @classmethod
    def zero(cls) -> Money:
        return cls(0, 0)

    @classmethod
    def from_pennies(cls, total: int) -> Money:
        """총 페니 수를 crowns/pennies로 분할합니다."""
        if total < 0:
            raise InvalidMoneyError("Amount cannot be negative.")
        crowns, pennies = divmod(total, PENNIES_PER_CROWN)
        return cls(crowns, pennies)

    @classmethod
    def normalized(cls, crowns: int, pennies: int) -> Money:
        """pennies >= 12 로 저장된 잔액을 총액 보존하며 올림 처리합니다."""
        return cls.from_pennies(crowns * PENNIES_PER_CROWN + pennies)

    @property
    def total_pennies(self) -> int:
        return self.crowns * PENNIES_PER_CROWN + self.pennies

    @property
    def is_zero(self) -> bool:
        return self.total_pennies == 0

    def __add__(self, other: object) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return Money.from_pennies(self.total_pennies + other.total_pennies)

    def __sub__(self, other: object) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        # 음수 결과는 from_pennies에서 InvalidMoneyError
        return Money.from_pennies(self.total_pennies - other.total_pennies)

    def __str__(self) -> str:
        return f"{self.crowns} Crowns, {self.pennies} Pennies"
