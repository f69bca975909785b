from blogger_client.account import BLOGS_FEED_URL, Blogger
from blogger_client.adapters.blogger_http import BloggerHttp
from blogger_client.app import connect, list_entries, rename_entries, run, select_blog
from blogger_client.blog import Blog
from blogger_client.cli import main, parse_args
from blogger_client.config import Credentials, load_credentials, load_env
from blogger_client.core.atom import (
    ATOM_NAMESPACE,
    CATEGORY_SCHEME,
    THREADING_NAMESPACE,
    entry_fields,
    link_href,
    merge_entry_fields,
    xml_for_creation,
)
from blogger_client.core.document import (
    Node,
    entries_from_feed,
    parse_document,
    render_document,
)
from blogger_client.entry import Entry
from blogger_client.types import (
    AuthenticationError,
    BloggerError,
    ConfigError,
    DeleteFailed,
    HttpResponse,
    MalformedDocument,
    MissingLinkError,
    SaveFailed,
    TransportError,
    UnsavedEntryError,
)

__all__ = [
    "ATOM_NAMESPACE",
    "AuthenticationError",
    "BLOGS_FEED_URL",
    "Blog",
    "Blogger",
    "BloggerError",
    "BloggerHttp",
    "CATEGORY_SCHEME",
    "ConfigError",
    "Credentials",
    "DeleteFailed",
    "Entry",
    "HttpResponse",
    "MalformedDocument",
    "MissingLinkError",
    "Node",
    "SaveFailed",
    "THREADING_NAMESPACE",
    "TransportError",
    "UnsavedEntryError",
    "connect",
    "entries_from_feed",
    "entry_fields",
    "link_href",
    "list_entries",
    "load_credentials",
    "load_env",
    "merge_entry_fields",
    "parse_args",
    "parse_document",
    "render_document",
    "rename_entries",
    "run",
    "select_blog",
    "xml_for_creation",
]


if __name__ == "__main__":
    raise SystemExit(main())
