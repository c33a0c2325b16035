"""AccessGate.

세션 상태(인증 여부, 활성 캐릭터 여부)와 현재 경로로부터
리다이렉트 여부를 결정하는 유한 상태 기계입니다.

상태:
- ANONYMOUS: 로그인 세션 없음 → /login 외 모든 경로는 /login 으로
- NEEDS_CHARACTER: 세션 있음, 활성 캐릭터 없음 → /create-character 로
- READY: 세션과 활성 캐릭터 있음 → 허용 목록 밖의 경로는 /home 으로
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

LOGIN_PATH = "/login"
CREATE_CHARACTER_PATH = "/create-character"
HOME_PATH = "/home"

ALLOWED_PATHS: frozenset[str] = frozenset(
    {
        "/",
        HOME_PATH,
        "/character-inventory",
        "/marketplace",
        "/branch-members",
        "/the-recently-dead",
        "/local-marketplace",
        "/blacksmith",
    }
)


class AccessState(str, Enum):
    """세션 상태."""

    ANONYMOUS = "anonymous"
    NEEDS_CHARACTER = "needs_character"
    READY = "ready"


@dataclass(frozen=True, slots=True)
class AccessDecision:
    """게이트 판정 결과.

    Attributes:
        state: 현재 세션 상태
        redirect_to: 이동할 경로 (머무르면 None)
    """

    state: AccessState
    redirect_to: str | None = None

    @property
    def allowed(self) -> bool:
        return self.redirect_to is None


def normalize_path(path: str) -> str:
    """끝 슬래시를 제거합니다 (루트는 유지)."""
    if not path:
        return "/"
    if not path.startswith("/"):
        path = f"/{path}"
    stripped = path.rstrip("/")
    return stripped or "/"


class AccessGate:
    """세션/경로 접근 게이트."""

    def __init__(self, allowed_paths: frozenset[str] = ALLOWED_PATHS) -> None:
        self._allowed_paths = frozenset(normalize_path(p) for p in allowed_paths)

    @staticmethod
    def resolve_state(authenticated: bool, has_character: bool) -> AccessState:
        if not authenticated:
            return AccessState.ANONYMOUS
        if not has_character:
            return AccessState.NEEDS_CHARACTER
        return AccessState.READY

    def decide(self, authenticated: bool, has_character: bool, path: str) -> AccessDecision:
        """경로 이동 여부를 판정합니다.

        Args:
            authenticated: 로그인 세션 존재 여부
            has_character: 활성 캐릭터 존재 여부
            path: 현재 경로

        Returns:
            AccessDecision
        """
        state = self.resolve_state(authenticated, has_character)
        current = normalize_path(path)

        if state is AccessState.ANONYMOUS:
            target = None if current == LOGIN_PATH else LOGIN_PATH
        elif state is AccessState.NEEDS_CHARACTER:
            target = None if current == CREATE_CHARACTER_PATH else CREATE_CHARACTER_PATH
        else:
            target = None if current in self._allowed_paths else HOME_PATH

        return AccessDecision(state=state, redirect_to=target)
