import logging
from collections.abc import Callable
from pathlib import Path

from blogger_client.account import Blogger
from blogger_client.blog import Blog
from blogger_client.config import Credentials, load_credentials
from blogger_client.types import BloggerError


def connect(credentials: Credentials) -> Blogger:
    return Blogger(
        login_id=credentials.login_id,
        password=credentials.password,
        auth_token=credentials.auth_token,
    )


def select_blog(blogger: Blogger, blog_index: int) -> Blog:
    blogs = blogger.blogs()
    if not 0 <= blog_index < len(blogs):
        raise BloggerError(
            f"No blog number {blog_index}; the account has {len(blogs)} blog(s)."
        )
    return blogs[blog_index]


def rename_entries(blog: Blog, title: str, new_title: str) -> tuple[int, int, int]:
    entries = blog.entries()
    matched = 0
    saved = 0
    for entry in entries:
        if entry.title != title:
            continue
        matched += 1
        entry.title = new_title
        entry.save()
        logging.info("Renamed: %s -> %s", title, new_title)
        saved += 1
    return len(entries), matched, saved


def run(
    title: str,
    new_title: str,
    blog_index: int = 0,
    env_path: Path = Path(".env"),
    environ: dict[str, str] | None = None,
    connector: Callable[[Credentials], Blogger] | None = None,
) -> str:
    credentials = load_credentials(env_path, environ)
    connector = connector or connect
    blogger = connector(credentials)

    blogs = blogger.blogs()
    logging.info("Found %d blog(s).", len(blogs))
    blog = select_blog(blogger, blog_index)
    entry_count, matched, saved = rename_entries(blog, title, new_title)
    if not matched:
        logging.info("No entry titled %r in %s", title, blog.title)

    return (
        f"Blogs: {len(blogs)}; Entries: {entry_count}; "
        f"Matched: {matched}; Saved: {saved}"
    )


def list_entries(
    env_path: Path = Path(".env"),
    environ: dict[str, str] | None = None,
    connector: Callable[[Credentials], Blogger] | None = None,
) -> str:
    credentials = load_credentials(env_path, environ)
    connector = connector or connect
    blogger = connector(credentials)

    lines: list[str] = []
    for index, blog in enumerate(blogger.blogs()):
        lines.append(f"[{index}] {blog.title} ({blog.public_url})")
        for entry in blog.entries():
            lines.append(f"    {entry.published} {entry.title or '(untitled)'}")
    return "\n".join(lines)
