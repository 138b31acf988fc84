import asyncio

import pytest

from app.config.app_config import DEFAULT_USER_ID
from app.dependencies import get_request_context


@pytest.mark.parametrize(
    "header, expected",
    [
        ("7", 7),
        (" 7 ", 7),
        (None, DEFAULT_USER_ID),
        ("", DEFAULT_USER_ID),
        ("abc", DEFAULT_USER_ID),
        ("0", DEFAULT_USER_ID),
        ("-4", DEFAULT_USER_ID),
        ("²", DEFAULT_USER_ID),
    ],
)
def test_request_context_user_id(header, expected):
    context = asyncio.run(get_request_context(header))

    assert context.user_id == expected
