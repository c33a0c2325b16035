"""AccessGate 테스트.

검증 포인트:
1. 익명 → /login 외 모든 경로는 /login
2. 캐릭터 없음 → /create-character
3. 캐릭터 있음 → 허용 목록 밖은 /home
4. 끝 슬래시 무시
"""

import pytest

from apps.market.application.session.services import (
    ALLOWED_PATHS,
    AccessGate,
    AccessState,
    normalize_path,
)


@pytest.fixture
def gate() -> AccessGate:
    return AccessGate()


class TestAnonymous:
    @pytest.mark.parametrize("path", ["/", "/home", "/marketplace", "/create-character", "/nope"])
    def test_redirects_to_login(self, gate: AccessGate, path: str) -> None:
        decision = gate.decide(authenticated=False, has_character=False, path=path)

        assert decision.state is AccessState.ANONYMOUS
        assert decision.redirect_to == "/login"

    def test_stays_on_login(self, gate: AccessGate) -> None:
        decision = gate.decide(authenticated=False, has_character=False, path="/login")

        assert decision.allowed

    def test_character_without_session_is_anonymous(self, gate: AccessGate) -> None:
        decision = gate.decide(authenticated=False, has_character=True, path="/home")

        assert decision.state is AccessState.ANONYMOUS
        assert decision.redirect_to == "/login"


class TestNeedsCharacter:
    @pytest.mark.parametrize("path", ["/", "/login", "/home", "/blacksmith", "/unknown"])
    def test_redirects_to_create_character(self, gate: AccessGate, path: str) -> None:
        decision = gate.decide(authenticated=True, has_character=False, path=path)

        assert decision.state is AccessState.NEEDS_CHARACTER
        assert decision.redirect_to == "/create-character"

    def test_stays_on_create_character(self, gate: AccessGate) -> None:
        decision = gate.decide(authenticated=True, has_character=False, path="/create-character/")

        assert decision.allowed


class TestReady:
    @pytest.mark.parametrize("path", sorted(ALLOWED_PATHS))
    def test_allowed_paths_pass(self, gate: AccessGate, path: str) -> None:
        decision = gate.decide(authenticated=True, has_character=True, path=path)

        assert decision.state is AccessState.READY
        assert decision.allowed

    @pytest.mark.parametrize("path", ["/login", "/create-character", "/admin", "/home/extra"])
    def test_other_paths_go_home(self, gate: AccessGate, path: str) -> None:
        decision = gate.decide(authenticated=True, has_character=True, path=path)

        assert decision.redirect_to == "/home"

    def test_trailing_slash_is_ignored(self, gate: AccessGate) -> None:
        assert gate.decide(authenticated=True, has_character=True, path="/home/").allowed
        assert gate.decide(authenticated=True, has_character=True, path="/marketplace//").allowed


def test_normalize_path() -> None:
    assert normalize_path("") == "/"
    assert normalize_path("/") == "/"
    assert normalize_path("home/") == "/home"
    assert normalize_path("/branch-members/") == "/branch-members"


def test_resolve_state() -> None:
    assert AccessGate.resolve_state(False, False) is AccessState.ANONYMOUS
    assert AccessGate.resolve_state(True, False) is AccessState.NEEDS_CHARACTER
    assert AccessGate.resolve_state(True, True) is AccessState.READY
