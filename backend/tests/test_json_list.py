"""Tests for the JSONList column type and its decode fallback."""

import json

import pytest
from sqlalchemy import text
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.dialects.postgresql import JSONB

from models.types import JSONList, decode_list
from models.user import User
from services.user_service import UserService


class TestDecodeList:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            (None, []),
            ("[]", []),
            ("[1, 2.5, 3]", [1, 2.5, 3]),
            (b"[4]", [4]),
            ([5, 6], [5, 6]),
            ("not json", []),
            ('{"a": 1}', []),
            ("42", []),
            ("", []),
        ],
    )
    def test_values(self, raw, expected):
        assert decode_list(raw) == expected

    def test_returns_a_copy(self):
        stored = [1, 2]
        decoded = decode_list(stored)
        decoded.append(3)
        assert stored == [1, 2]


class TestDialects:
    def test_postgres_uses_jsonb(self):
        impl = JSONList().load_dialect_impl(postgresql.dialect())
        assert isinstance(impl, JSONB)

    def test_postgres_binds_the_list_itself(self):
        assert JSONList().process_bind_param([1, 2], postgresql.dialect()) == [1, 2]

    @pytest.mark.parametrize("dialect", [sqlite.dialect(), mysql.dialect()])
    def test_text_dialects_bind_json_strings(self, dialect):
        bound = JSONList().process_bind_param((1, "high"), dialect)
        assert json.loads(bound) == [1, "high"]

    def test_none_binds_empty_list(self):
        assert JSONList().process_bind_param(None, sqlite.dialect()) == "[]"


def test_corrupt_stored_scores_read_as_empty(db_session):
    user = UserService.register(db_session, "Lin", "lin@example.com", "pw-lin")
    db_session.execute(
        text("UPDATE users SET scores = :bad WHERE id = :id"),
        {"bad": "{broken", "id": user.id},
    )
    db_session.commit()
    db_session.expire_all()

    assert db_session.get(User, user.id).scores == []
    # Appending starts a fresh ledger rather than failing
    assert UserService.add_score(db_session, user.id, 2) == [2]
