import asyncio
import logging
from typing import List, Optional

import aiohttp
from pydantic import TypeAdapter, ValidationError

from client.result import Err, Ok, Result
from models.post import Post

logger = logging.getLogger(__name__)

API_BASE_URL = "http://localhost:4000"

post_list = TypeAdapter(List[Post])


class BlogApiClient:
    """HTTP client for the blog API service"""

    def __init__(self, session: aiohttp.ClientSession, base_url: str = API_BASE_URL):
        self.session = session
        self.posts_url = f"{base_url.rstrip('/')}/posts"

    async def fetch_posts(self) -> Result[List[Post]]:
        """
        Fetch the full post list

        Returns:
            Ok with the posts, or Err with the server's error message
        """
        try:
            async with self.session.get(self.posts_url) as response:
                if response.status != 200:
                    return Err(await self._error_message(response))
                data = await response.json(content_type=None)
                return Ok(post_list.validate_python(data))
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            return Err(self._describe(e))

    async def create_post(self, title: str, content: str, author: Optional[str]) -> Result[Post]:
        """
        Create a post

        Returns:
            Ok with the stored post, or Err with the server's error message
        """
        payload = {"title": title, "content": content, "author": author}
        try:
            async with self.session.post(self.posts_url, json=payload) as response:
                if response.status != 201:
                    return Err(await self._error_message(response))
                data = await response.json(content_type=None)
                return Ok(Post.model_validate(data))
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            return Err(self._describe(e))

    @staticmethod
    async def _error_message(response: aiohttp.ClientResponse) -> str:
        """Use the API's {error} body when there is one, else the status"""
        fallback = f"Request failed with status {response.status}"
        try:
            data = await response.json(content_type=None)
        except ValueError:
            return fallback
        if isinstance(data, dict) and data.get("error"):
            return str(data["error"])
        return fallback

    @staticmethod
    def _describe(error: Exception) -> str:
        if isinstance(error, ValidationError):
            return f"Malformed response: {error.error_count()} validation error(s)"
        return str(error) or type(error).__name__
