import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_PORT = 4000


@dataclass(frozen=True)
class Settings:
    """Environment-provided settings for the API service"""
    supabase_url: str
    supabase_key: str
    port: int = DEFAULT_PORT
    posts_table: str = "posts"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            supabase_url=os.getenv("SUPABASE_URL", ""),
            supabase_key=os.getenv("SUPABASE_ANON_KEY", ""),
            port=int(os.getenv("PORT") or DEFAULT_PORT),
            posts_table=os.getenv("POSTS_TABLE", "posts"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO),
                        format="%(levelname)s: %(name)s: %(message)s")
