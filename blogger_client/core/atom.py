from collections.abc import Iterable

from blogger_client.core.document import Node, render_document
from blogger_client.types import MalformedDocument

ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"
THREADING_NAMESPACE = "http://purl.org/rss/1.0/modules/threading/"
CATEGORY_SCHEME = "http://www.blogger.com/atom/ns#"
POST_REL = "http://schemas.google.com/g/2005#post"


def link_href(node: Node, rel: str) -> str | None:
    for link in node.find_all("link"):
        if link.attributes.get("rel") == rel:
            return link.attributes.get("href")
    return None


def _element_text(node: Node, tag: str) -> str | None:
    child = node.find(tag)
    if child is None:
        return None
    return child.text or ""


def entry_fields(node: Node) -> dict[str, object]:
    """Project an Atom ``entry`` tree onto Entry field values."""
    if node.tag != "entry":
        raise MalformedDocument(f"Expected <entry>, got <{node.tag}>")

    author = node.find("author")
    author_name = author.find_text("name") if author is not None else None
    return {
        "id": node.find_text("id") or "",
        "author": author_name or "",
        "published": node.find_text("published") or "",
        "updated": node.find_text("updated") or "",
        "title": _element_text(node, "title"),
        "content": _element_text(node, "content"),
        "public_url": link_href(node, "alternate") or "",
        "id_url": link_href(node, "self") or "",
        "edit_url": link_href(node, "edit") or "",
        "categories": [
            category.attributes.get("term", "")
            for category in node.find_all("category")
        ],
    }


def title_node(title: str | None) -> Node:
    return Node(tag="title", attributes={"type": "text"}, text=title)


def content_node(content: str | None) -> Node:
    return Node(tag="content", attributes={"type": "html"}, text=content)


def category_nodes(categories: Iterable[str]) -> list[Node]:
    return [
        Node(tag="category", attributes={"scheme": CATEGORY_SCHEME, "term": term})
        for term in categories
    ]


def xml_for_creation(
    title: str | None, content: str | None, categories: Iterable[str] = ()
) -> str:
    root = Node(tag="entry", attributes={"xmlns": ATOM_NAMESPACE})
    root.children = [
        title_node(title),
        content_node(content),
        *category_nodes(categories),
    ]
    return render_document(root)


def merge_entry_fields(
    source: Node,
    title: str | None,
    content: str | None,
    categories: Iterable[str],
    persisted: bool,
) -> Node:
    """Write editable fields into a copy of ``source``.

    Every element and attribute other than title, content and category is
    carried over untouched; Blogger drops or rejects updates that omit them.
    """
    merged = source.copy()
    merged.attributes["xmlns"] = ATOM_NAMESPACE
    if persisted:
        merged.attributes["xmlns:thr"] = THREADING_NAMESPACE
    merged.replace("title", [title_node(title)])
    merged.replace("content", [content_node(content)])
    merged.replace("category", category_nodes(categories))
    return merged
