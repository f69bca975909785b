import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from blogger_client.core.atom import entry_fields, merge_entry_fields
from blogger_client.core.document import Node, render_document
from blogger_client.types import (
    HttpResponse,
    MissingLinkError,
    SaveFailed,
    UnsavedEntryError,
)

if TYPE_CHECKING:
    from blogger_client.blog import Blog


class Entry:
    """One blog post.

    ``title``, ``content`` and ``categories`` are editable. The remaining
    fields are read-only: they are filled from ``source`` when the entry is
    built. ``source`` is the entry document as Blogger returned it and stays
    ``None`` for an entry that was never saved.
    """

    def __init__(
        self,
        blog: "Blog",
        title: str | None = None,
        content: str | None = None,
        categories: Iterable[str] = (),
        id: str = "",
        author: str = "",
        published: str = "",
        updated: str = "",
        edit_url: str = "",
        id_url: str = "",
        public_url: str = "",
        source: Node | None = None,
    ) -> None:
        self.blog = blog
        self.title = title
        self.content = content
        self.categories = categories
        self._id = id
        self._author = author
        self._published = published
        self._updated = updated
        self._edit_url = edit_url
        self._id_url = id_url
        self._public_url = public_url
        self._source = source

    @classmethod
    def build(cls, blog: "Blog", source: Node | None = None, **overrides: Any) -> "Entry":
        values: dict[str, Any] = {}
        if source is not None:
            source = source.copy()
            values.update(entry_fields(source))
        values.update(overrides)
        return cls(blog, source=source, **values)

    @property
    def categories(self) -> list[str]:
        return self._categories

    @categories.setter
    def categories(self, value: Iterable[str]) -> None:
        if isinstance(value, str):
            raise TypeError("categories must be a list of tags, not a single string")
        self._categories = list(value or [])

    @property
    def id(self) -> str:
        return self._id

    @property
    def author(self) -> str:
        return self._author

    @property
    def published(self) -> str:
        return self._published

    @property
    def updated(self) -> str:
        return self._updated

    @property
    def edit_url(self) -> str:
        return self._edit_url

    @property
    def id_url(self) -> str:
        return self._id_url

    @property
    def public_url(self) -> str:
        return self._public_url

    @property
    def source(self) -> Node | None:
        return self._source

    def __repr__(self) -> str:
        return f"Entry(id={self.id!r}, title={self.title!r})"

    def as_xml(self) -> str:
        if self.source is None:
            raise UnsavedEntryError(
                "Entry has no source document; create it with Blog.add_entry first."
            )
        merged = merge_entry_fields(
            self.source,
            title=self.title,
            content=self.content,
            categories=self.categories,
            persisted=bool(self.id),
        )
        return render_document(merged)

    def save(self) -> HttpResponse:
        body = self.as_xml()
        if not self.edit_url:
            raise MissingLinkError(f"Entry {self.id!r} has no edit link; cannot save.")
        logging.info("Saving entry: %s", self.edit_url)
        response = self.blog.blogger.http_put(self.edit_url, body)
        if not response.is_success:
            raise SaveFailed(response.status_line)
        logging.info("Entry saved: %s", self.id)
        return response

    def delete(self) -> None:
        self.blog.delete_entry(self)
