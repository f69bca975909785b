import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from blogger_client.core.atom import POST_REL, link_href, xml_for_creation
from blogger_client.core.document import Node, entries_from_feed, parse_document
from blogger_client.entry import Entry
from blogger_client.types import (
    BloggerError,
    DeleteFailed,
    MissingLinkError,
    SaveFailed,
)

if TYPE_CHECKING:
    from blogger_client.account import Blogger


@dataclass(eq=False)
class Blog:
    blogger: "Blogger"
    id: str = ""
    numeric_id: str = ""
    title: str = ""
    public_url: str = ""
    id_url: str = ""
    post_url: str = ""
    source: Node | None = field(default=None, repr=False)
    _entries: list[Entry] | None = field(default=None, init=False, repr=False)

    @classmethod
    def build(cls, blogger: "Blogger", source: Node) -> "Blog":
        blog_id = source.find_text("id") or ""
        _, _, numeric_id = blog_id.rpartition("blog-")
        return cls(
            blogger=blogger,
            id=blog_id,
            numeric_id=numeric_id,
            title=source.find_text("title") or "",
            public_url=link_href(source, "alternate") or "",
            id_url=link_href(source, "self") or "",
            post_url=link_href(source, POST_REL) or "",
            source=source.copy(),
        )

    def entries(self, refresh: bool = False) -> list[Entry]:
        if self._entries is not None and not refresh:
            return self._entries
        if not self.post_url:
            raise MissingLinkError(f"Blog {self.title!r} has no posts feed link.")

        response = self.blogger.http_get(self.post_url)
        if not response.is_success:
            raise BloggerError(
                f"Unable to fetch entries of {self.title!r}: {response.status_line}"
            )
        self._entries = [
            Entry.build(self, source=node) for node in entries_from_feed(response.body)
        ]
        logging.info("Fetched %d entries from %s", len(self._entries), self.title)
        return self._entries

    def add_entry(
        self,
        title: str | None,
        content: str | None,
        categories: Iterable[str] = (),
    ) -> Entry:
        if not self.post_url:
            raise MissingLinkError(f"Blog {self.title!r} has no post link; cannot add entries.")
        body = xml_for_creation(title, content, categories)
        response = self.blogger.http_post(self.post_url, body)
        if not response.is_success:
            raise SaveFailed(response.status_line)

        entry = Entry.build(self, source=parse_document(response.body))
        if self._entries is not None:
            self._entries.append(entry)
        logging.info("Entry created: %s", entry.id)
        return entry

    def delete_entry(self, entry: Entry) -> None:
        if not entry.edit_url:
            raise MissingLinkError(f"Entry {entry.id!r} has no edit link; cannot delete.")
        response = self.blogger.http_delete(entry.edit_url)
        if not response.is_success:
            raise DeleteFailed(response.status_line)

        if self._entries is not None:
            self._entries = [item for item in self._entries if item is not entry]
        logging.info("Entry deleted: %s", entry.id)
