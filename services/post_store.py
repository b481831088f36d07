import asyncio
import logging
from typing import Any, Dict, List, Optional

import aiohttp

from services.errors import StoreError

logger = logging.getLogger(__name__)


class PostStore:
    """Client for the hosted posts table, spoken to over its REST interface"""

    def __init__(self, session: aiohttp.ClientSession, url: str, key: str, table: str = "posts"):
        self.session = session
        self.base_url = f"{url.rstrip('/')}/rest/v1/{table}"
        self.headers = {
            "apikey": key,
            "Authorization": f"Bearer {key}",
            "Content-Type": "application/json",
        }

    async def list_posts(self) -> List[Dict[str, Any]]:
        """Get all posts in whatever order the store returns them"""
        rows = await self._request("GET", params={"select": "*"})
        if not isinstance(rows, list) or not all(isinstance(row, dict) for row in rows):
            raise StoreError("Store returned something other than a list of rows")
        return rows

    async def insert_post(self, title: Any, content: Any, author: Any) -> Dict[str, Any]:
        """
        Insert a post and return the stored row

        The store assigns id and created_at; asking for the representation back
        guarantees the caller always receives the full inserted row.
        """
        rows = await self._request(
            "POST",
            json=[{"title": title, "content": content, "author": author}],
            headers={"Prefer": "return=representation"},
        )
        if not isinstance(rows, list) or not rows or not isinstance(rows[0], dict):
            raise StoreError("Store did not return the inserted post")
        return rows[0]

    async def check_health(self) -> bool:
        """Check whether the store answers a minimal query"""
        try:
            await self._request("GET", params={"select": "id", "limit": "1"})
            return True
        except StoreError as e:
            logger.warning("Store health check failed: %s", e.message)
            return False

    async def _request(self, method: str, params: Optional[Dict[str, str]] = None,
                       json: Any = None, headers: Optional[Dict[str, str]] = None):
        try:
            async with self.session.request(
                    method,
                    self.base_url,
                    params=params,
                    json=json,
                    headers={**self.headers, **(headers or {})},
            ) as response:
                if response.status >= 400:
                    raise StoreError(await self._error_message(response), response.status)
                return await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise StoreError(str(e) or type(e).__name__)
        except ValueError as e:
            raise StoreError(f"Store returned malformed JSON: {e}")

    @staticmethod
    async def _error_message(response: aiohttp.ClientResponse) -> str:
        text = await response.text()
        try:
            body = await response.json(content_type=None)
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return body["message"]
        return text or f"Store responded with status {response.status}"
