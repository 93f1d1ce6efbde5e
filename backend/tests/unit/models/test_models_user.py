"""
Unit tests for User model.
"""

import uuid
from datetime import datetime

import pytest
from sqlalchemy.exc import IntegrityError

from notekeeper.core.models.user import User


class TestUserModel:
    """Test User model functionality."""

    @pytest.mark.asyncio
    async def test_create_user(self, test_session):
        """Test creating a user."""
        user = User(full_name="Test User", email="test@example.com", password_hash="hashed_password")

        test_session.add(user)
        await test_session.commit()
        await test_session.refresh(user)

        assert isinstance(user.id, uuid.UUID)
        assert user.full_name == "Test User"
        assert user.email == "test@example.com"
        assert isinstance(user.created_on, datetime)
        assert isinstance(user.updated_at, datetime)

    @pytest.mark.asyncio
    async def test_email_must_be_unique(self, test_session):
        test_session.add(User(full_name="A", email="same@example.com", password_hash="h"))
        await test_session.commit()

        test_session.add(User(full_name="B", email="same@example.com", password_hash="h"))
        with pytest.raises(IntegrityError):
            await test_session.commit()
        await test_session.rollback()

    @pytest.mark.asyncio
    async def test_emails_differing_in_case_are_distinct(self, test_session):
        test_session.add(User(full_name="A", email="Mixed@example.com", password_hash="h"))
        test_session.add(User(full_name="B", email="mixed@example.com", password_hash="h"))
        await test_session.commit()

    def test_repr(self):
        assert repr(User(full_name="A", email="a@example.com", password_hash="h")) == (
            "<User(email='a@example.com')>"
        )
