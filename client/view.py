from typing import List

from models.post import Post


def render_post(post: Post) -> str:
    return "\n".join([
        f"[{post.id}] {post.title}",
        f"    {post.content}",
        f"    By {post.author or ''}",
    ])


def render_posts(posts: List[Post]) -> str:
    lines = ["Blog Posts", "=========="]
    lines.extend(render_post(post) for post in posts)
    return "\n".join(lines)


def render_form(title: str, content: str, author: str) -> str:
    return "\n".join([
        "Create a new post",
        f"  Title:   {title}",
        f"  Content: {content}",
        f"  Author:  {author}",
        "  [Submit]",
    ])


def render(app) -> str:
    """Render the whole page for a BlogApp"""
    return "\n\n".join([
        render_posts(app.posts),
        render_form(app.title, app.content, app.author),
    ])
