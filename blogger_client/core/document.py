"""Tagged document tree used for Atom payloads.

Tags and attribute names are kept exactly as written on the wire
(``entry``, ``thr:total``, ``xmlns:gd``), so a parsed document renders back
with the same element order, attribute order and namespace prefixes.
Text and tails are kept verbatim, whitespace included, so mixed content
such as an xhtml summary survives a round trip.
"""

import copy
import io
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from blogger_client.types import MalformedDocument

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


@dataclass
class Node:
    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    text: str | None = None
    children: list["Node"] = field(default_factory=list)
    tail: str | None = None

    def find(self, tag: str) -> "Node | None":
        for child in self.children:
            if child.tag == tag:
                return child
        return None

    def find_all(self, tag: str) -> list["Node"]:
        return [child for child in self.children if child.tag == tag]

    def find_text(self, tag: str) -> str | None:
        child = self.find(tag)
        if child is None:
            return None
        return child.text

    def replace(self, tag: str, nodes: list["Node"]) -> None:
        """Swap every ``tag`` child for ``nodes``.

        The new nodes take the slot of the first replaced child, or go last
        when there was none. Other children keep their relative order.
        """
        kept: list[Node] = []
        position: int | None = None
        for child in self.children:
            if child.tag == tag:
                if position is None:
                    position = len(kept)
                continue
            kept.append(child)
        if position is None:
            position = len(kept)
        kept[position:position] = nodes
        self.children = kept

    def copy(self) -> "Node":
        return copy.deepcopy(self)


def _qualify(name: str, scope: dict[str, str], attribute: bool = False) -> str:
    if not name.startswith("{"):
        return name
    uri, local = name[1:].split("}", 1)
    if uri == XML_NAMESPACE:
        return f"xml:{local}"
    for prefix, scope_uri in scope.items():
        if scope_uri != uri:
            continue
        # Unprefixed attributes never belong to the default namespace.
        if not prefix and attribute:
            continue
        return f"{prefix}:{local}" if prefix else local
    raise MalformedDocument(f"Undeclared namespace: {uri}")


def parse_document(xml: str | bytes) -> Node:
    data = xml.encode("utf-8") if isinstance(xml, str) else xml
    stack: list[Node] = []
    scopes: list[dict[str, str]] = [{}]
    pending: dict[str, str] = {}
    root: Node | None = None
    try:
        for event, item in ET.iterparse(
            io.BytesIO(data), events=("start-ns", "start", "end")
        ):
            if event == "start-ns":
                prefix, uri = item
                pending[prefix] = uri
                continue

            if event == "start":
                scope = {**scopes[-1], **pending}
                scopes.append(scope)
                attributes = {
                    (f"xmlns:{prefix}" if prefix else "xmlns"): uri
                    for prefix, uri in pending.items()
                }
                pending = {}
                for key, value in item.attrib.items():
                    attributes[_qualify(key, scope, attribute=True)] = value
                node = Node(tag=_qualify(item.tag, scope), attributes=attributes)
                if stack:
                    stack[-1].children.append(node)
                else:
                    root = node
                stack.append(node)
                continue

            node = stack.pop()
            scopes.pop()
            node.text = item.text
            # Tails are only complete once the parent element has ended.
            for child_node, child_element in zip(node.children, item):
                child_node.tail = child_element.tail
    except ET.ParseError as exc:
        raise MalformedDocument(f"Invalid XML: {exc}") from exc

    if root is None:
        raise MalformedDocument("Empty XML document")
    return root


def _to_element(node: Node) -> ET.Element:
    element = ET.Element(node.tag, dict(node.attributes))
    element.text = node.text
    element.tail = node.tail
    for child in node.children:
        element.append(_to_element(child))
    return element


def render_document(node: Node) -> str:
    return ET.tostring(_to_element(node), encoding="unicode")


def entries_from_feed(xml: str | bytes) -> list[Node]:
    """Return each ``entry`` of a feed as a standalone node.

    Namespace declarations made on the feed element are copied onto every
    entry so that an entry can later be rendered on its own.
    """
    feed = parse_document(xml)
    declarations = {
        key: value
        for key, value in feed.attributes.items()
        if key == "xmlns" or key.startswith("xmlns:")
    }
    entries: list[Node] = []
    for entry in feed.find_all("entry"):
        node = entry.copy()
        node.attributes = {**declarations, **node.attributes}
        node.tail = None
        entries.append(node)
    return entries
