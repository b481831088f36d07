"""Tests for the application lifecycle."""

import pytest

from config import Settings
from main import create_app


async def test_session_closed_on_shutdown():
    app = create_app(Settings(supabase_url="http://store.test", supabase_key="test-key"))

    async with app.router.lifespan_context(app):
        session = app.state.session
        assert not session.closed

    assert session.closed


async def test_session_closed_when_lifespan_exits_with_error():
    app = create_app(Settings(supabase_url="http://store.test", supabase_key="test-key"))

    with pytest.raises(RuntimeError):
        async with app.router.lifespan_context(app):
            session = app.state.session
            raise RuntimeError("server crashed")

    assert session.closed
