"""Tests for shared/models.py."""

import pytest
from pydantic import ValidationError

from shared.models import SessionUser


class TestSessionUser:
    def test_create(self):
        user = SessionUser(email="alex@student.csulb.edu")
        assert user.email == "alex@student.csulb.edu"

    def test_frozen(self):
        """SessionUser should be immutable."""
        user = SessionUser(email="alex@student.csulb.edu")
        with pytest.raises(ValidationError):
            user.email = "other@student.csulb.edu"

    def test_ignores_extra_fields(self):
        user = SessionUser(email="alex@student.csulb.edu", password="secret")
        assert not hasattr(user, "password")

    def test_equality_by_value(self):
        assert SessionUser(email="a@b") == SessionUser(email="a@b")
