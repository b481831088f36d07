import logging
from typing import List

from client.api import BlogApiClient
from models.post import Post

logger = logging.getLogger(__name__)


class BlogApp:
    """
    View state for the blog page: the post list plus the new-post form fields

    The list is loaded once on mount; each submit appends the created post.
    Failures are logged and leave the state untouched.
    """

    def __init__(self, api: BlogApiClient):
        self.api = api
        self.posts: List[Post] = []
        self.title = ""
        self.content = ""
        self.author = ""
        self._mounted = False

    async def mount(self) -> None:
        """Load the post list; only the first call does anything"""
        if self._mounted:
            return
        self._mounted = True

        result = await self.api.fetch_posts()
        if result.is_ok():
            self.posts = result.value
        else:
            logger.error("Failed to load posts: %s", result.error)

    async def submit(self) -> None:
        """Create a post from the current form fields"""
        result = await self.api.create_post(self.title, self.content, self.author)
        if result.is_ok():
            # form fields are kept as they were
            self.posts = [*self.posts, result.value]
        else:
            logger.error("Failed to create post: %s", result.error)
