"""
Unit tests for the auth dependency helpers in todo_api.api.v1.dependencies
"""
from unittest.mock import MagicMock, patch

import pytest
from fastapi import HTTPException

from todo_api.api.v1.dependencies import extract_token, get_current_user
from todo_api.application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from todo_api.core.security import issue_token


class TestExtractToken:
    """Tests for extract_token"""

    @pytest.mark.parametrize(
        "header, expected",
        [
            ("Bearer abc.def.ghi", "abc.def.ghi"),
            ("bearer abc.def.ghi", "abc.def.ghi"),
            ("abc.def.ghi", "abc.def.ghi"),
            ("  abc.def.ghi  ", "abc.def.ghi"),
            ("Bearer ", None),
            ("", None),
            (None, None),
        ],
    )
    def test_extract(self, header, expected):
        assert extract_token(header) == expected


class TestGetCurrentUser:
    """Tests for get_current_user"""

    @pytest.fixture
    def container(self):
        container = MagicMock()
        container.get.return_value = GetCurrentUserUseCase()
        with patch("todo_api.api.v1.dependencies.get_container", return_value=container):
            yield container

    @pytest.mark.asyncio
    async def test_missing_token_is_401(self, container):
        with pytest.raises(HTTPException) as exc_info:
            await get_current_user(None)
        assert exc_info.value.status_code == 401
        container.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_token_is_401(self, container, mock_settings):
        with pytest.raises(HTTPException) as exc_info:
            await get_current_user("Bearer not.a.token")
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_valid_token_yields_identity(self, container, mock_settings):
        token = issue_token("user-1", "user@example.com")
        user = await get_current_user(token)
        assert user.id == "user-1"
        assert user.email == "user@example.com"
