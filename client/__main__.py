"""
Interactive blog client

    python -m client

Loads the post list once, then prompts for new posts until an empty title
is entered.
"""

import asyncio
import logging

import aiohttp

from client.api import BlogApiClient
from client.app import BlogApp
from client.view import render
from config import setup_logging

logger = logging.getLogger(__name__)


async def run() -> None:
    async with aiohttp.ClientSession() as session:
        app = BlogApp(BlogApiClient(session))
        await app.mount()
        print(render(app))

        while True:
            title = (await asyncio.to_thread(input, "\nTitle (empty to quit): ")).strip()
            if not title:
                break
            app.title = title
            app.content = await asyncio.to_thread(input, "Content: ")
            app.author = await asyncio.to_thread(input, "Author: ")
            await app.submit()
            print(render(app))


if __name__ == "__main__":
    setup_logging("WARNING")
    try:
        asyncio.run(run())
    except (KeyboardInterrupt, EOFError):
        logger.info("Client stopped")
