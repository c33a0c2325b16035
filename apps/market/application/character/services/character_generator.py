"""Random character generator (dev tool)."""

from __future__ import annotations

import random
from datetime import datetime, timezone
from uuid import uuid4

from apps.market.domain.entities import Character
from apps.market.domain.enums import Branch, Guild, Race

NAME_PREFIXES = ("Ael", "Bor", "Cael", "Dra", "Elara", "Fen", "Gareth", "Hael", "Isolde", "Jor")
NAME_SUFFIXES = ("dan", "ian", "wyn", "dor", "iel", "ric", "mond", "lyn", "us", "a")

MIN_CROWNS = 10
MAX_CROWNS = 59


class RandomCharacterGenerator:
    """임의 캐릭터 생성기.

    각 캐릭터는 새 사용자 ID를 가지므로 활성 캐릭터 단일성 규칙과 충돌하지 않습니다.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def generate_name(self) -> str:
        return self._rng.choice(NAME_PREFIXES) + self._rng.choice(NAME_SUFFIXES)

    def generate(self, count: int) -> list[Character]:
        now = datetime.now(timezone.utc)
        return [
            Character(
                user_id=uuid4(),
                name=self.generate_name(),
                race=self._rng.choice(list(Race)).value,
                guild=self._rng.choice(list(Guild)).value,
                branch=self._rng.choice(list(Branch)).value,
                crowns=self._rng.randint(MIN_CROWNS, MAX_CROWNS),
                pennies=self._rng.randint(0, 11),
                created_at=now,
            )
            for _ in range(count)
        ]
