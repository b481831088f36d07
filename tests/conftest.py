from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app
from services.errors import StoreError


class FakeStore:
    """In-memory stand-in for PostStore with the table's NOT NULL rules"""

    def __init__(self):
        self.rows: List[Dict[str, Any]] = []
        self.next_id = 1
        self.fail_with: Optional[str] = None

    async def list_posts(self) -> List[Dict[str, Any]]:
        if self.fail_with:
            raise StoreError(self.fail_with)
        return [dict(row) for row in self.rows]

    async def insert_post(self, title, content, author) -> Dict[str, Any]:
        if self.fail_with:
            raise StoreError(self.fail_with)
        for column, value in (("title", title), ("content", content)):
            if value is None:
                raise StoreError(
                    f'null value in column "{column}" of relation "posts" violates not-null constraint',
                    400,
                )
        row = {
            "id": self.next_id,
            "title": title,
            "content": content,
            "author": author,
            "created_at": datetime.now(timezone.utc).replace(tzinfo=None).isoformat(),
        }
        self.next_id += 1
        self.rows.append(row)
        return dict(row)

    async def check_health(self) -> bool:
        return self.fail_with is None


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def client(store):
    settings = Settings(supabase_url="http://store.test", supabase_key="test-key")
    with TestClient(create_app(settings, store=store)) as test_client:
        yield test_client
