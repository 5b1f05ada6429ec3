from __future__ import annotations

import json
from pathlib import Path

import pytest

from rd_claims.auth import (
    CURRENT_USER_KEY,
    AuthContextError,
    AuthProvider,
    InMemoryStorage,
    JsonFileStorage,
    dump_user,
    load_user,
    use_auth,
)
from rd_claims.domain import MOCK_USERS, User

ALICE = MOCK_USERS["user-1"]
BOB = MOCK_USERS["user-2"]


def test_use_auth_outside_provider_fails_loudly() -> None:
    with pytest.raises(AuthContextError, match="use_auth must be used within an AuthProvider"):
        use_auth()


def test_starts_without_user_when_storage_is_empty() -> None:
    with AuthProvider(InMemoryStorage()):
        auth = use_auth()
        assert auth.current_user is None
        assert not auth.is_submitter
        assert not auth.is_reviewer


def test_restores_persisted_user() -> None:
    storage = InMemoryStorage()
    storage.set_item(CURRENT_USER_KEY, json.dumps({"userId": "user-2", "name": "Bob", "role": "reviewer"}))

    with AuthProvider(storage) as auth:
        assert auth.current_user == BOB
        assert auth.is_reviewer
        assert not auth.is_submitter


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "null",
        "{invalid json",
        '"just a string"',
        '{"foo": 1}',
        '{"userId": "user-3", "name": "Eve", "role": "admin"}',
    ],
)
def test_corrupt_stored_user_is_treated_as_absent(raw: str) -> None:
    storage = InMemoryStorage()
    storage.set_item(CURRENT_USER_KEY, raw)

    with AuthProvider(storage) as auth:
        assert auth.current_user is None


def test_setting_user_persists_it() -> None:
    storage = InMemoryStorage()

    with AuthProvider(storage) as auth:
        auth.set_current_user(ALICE)
        assert use_auth().current_user == ALICE

    assert json.loads(storage.get_item(CURRENT_USER_KEY) or "") == {
        "userId": "user-1",
        "name": "Alice",
        "role": "submitter",
    }


def test_clearing_user_removes_persisted_value() -> None:
    storage = InMemoryStorage()

    with AuthProvider(storage) as auth:
        auth.set_current_user(ALICE)
        auth.set_current_user(None)
        assert auth.current_user is None
        assert not auth.is_submitter

    assert storage.get_item(CURRENT_USER_KEY) is None


def test_switching_users_flips_both_role_flags() -> None:
    with AuthProvider(InMemoryStorage()) as auth:
        auth.set_current_user(ALICE)
        assert (auth.is_submitter, auth.is_reviewer) == (True, False)

        auth.set_current_user(BOB)
        assert (auth.is_submitter, auth.is_reviewer) == (False, True)


def test_user_without_role_has_no_role_flags() -> None:
    with AuthProvider(InMemoryStorage()) as auth:
        auth.set_current_user(User(user_id="user-9", name="Nobody"))
        assert auth.current_user is not None
        assert not auth.is_submitter
        assert not auth.is_reviewer


def test_providers_hold_independent_state() -> None:
    outer_storage, inner_storage = InMemoryStorage(), InMemoryStorage()

    with AuthProvider(outer_storage) as outer:
        outer.set_current_user(ALICE)
        with AuthProvider(inner_storage) as inner:
            assert use_auth() is inner
            assert inner.current_user is None
            inner.set_current_user(BOB)
        assert use_auth() is outer
        assert outer.current_user == ALICE

    with pytest.raises(AuthContextError):
        use_auth()


def test_stored_user_round_trip_is_stable() -> None:
    raw = dump_user(ALICE)
    parsed = load_user(raw)

    assert parsed == ALICE
    assert parsed is not None
    assert load_user(dump_user(parsed)) == parsed
    assert load_user(None) is None


def test_json_file_storage_survives_restart(tmp_path: Path) -> None:
    path = tmp_path / "state" / "state.json"

    with AuthProvider(JsonFileStorage(path)) as auth:
        auth.set_current_user(BOB)

    assert path.exists()
    with AuthProvider(JsonFileStorage(path)) as auth:
        assert auth.current_user == BOB
        auth.set_current_user(None)

    assert JsonFileStorage(path).get_item(CURRENT_USER_KEY) is None


def test_json_file_storage_ignores_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    path.write_text("not json", encoding="utf-8")

    storage = JsonFileStorage(path)
    assert storage.get_item(CURRENT_USER_KEY) is None

    storage.set_item("other", "value")
    assert json.loads(path.read_text(encoding="utf-8")) == {"other": "value"}
