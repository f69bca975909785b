import unittest

from blogger_client.core.atom import link_href
from blogger_client.core.document import (
    Node,
    entries_from_feed,
    parse_document,
    render_document,
)
from blogger_client.types import MalformedDocument
from samples import POSTS_FEED_XML

COMPACT_ENTRY = (
    '<entry xmlns="http://www.w3.org/2005/Atom" '
    'xmlns:thr="http://purl.org/rss/1.0/modules/threading/">'
    "<id>1</id>"
    '<title type="text">T</title>'
    "<thr:total>3</thr:total>"
    '<link rel="edit" href="http://e" />'
    "</entry>"
)


class DocumentRoundTripTest(unittest.TestCase):
    def test_render_reproduces_parsed_document(self) -> None:
        self.assertEqual(render_document(parse_document(COMPACT_ENTRY)), COMPACT_ENTRY)

    def test_prefixed_names_are_kept(self) -> None:
        document = parse_document(COMPACT_ENTRY)

        self.assertEqual(
            [child.tag for child in document.children],
            ["id", "title", "thr:total", "link"],
        )
        self.assertEqual(
            list(document.attributes),
            ["xmlns", "xmlns:thr"],
        )

    def test_namespaced_attributes_use_prefix(self) -> None:
        document = parse_document(
            '<entry xmlns="http://www.w3.org/2005/Atom" '
            'xmlns:gd="http://schemas.google.com/g/2005" gd:etag="W/1" '
            'xml:lang="en"/>'
        )

        self.assertEqual(document.attributes["gd:etag"], "W/1")
        self.assertEqual(document.attributes["xml:lang"], "en")

    def test_invalid_xml_raises_malformed_document(self) -> None:
        with self.assertRaises(MalformedDocument):
            parse_document("<entry><title></entry>")

    def test_bytes_input_is_accepted(self) -> None:
        document = parse_document(COMPACT_ENTRY.encode("utf-8"))

        self.assertEqual(document.find_text("id"), "1")

    def test_mixed_content_whitespace_survives(self) -> None:
        xml = (
            '<entry xmlns="http://www.w3.org/2005/Atom">'
            '<summary type="xhtml">'
            '<div xmlns="http://www.w3.org/1999/xhtml"><b>a</b> <i>b</i> end</div>'
            "</summary>\n"
            "</entry>"
        )

        self.assertEqual(render_document(parse_document(xml)), xml)


class NodeTest(unittest.TestCase):
    def test_find_helpers(self) -> None:
        document = parse_document(COMPACT_ENTRY)

        self.assertEqual(document.find("title").attributes, {"type": "text"})
        self.assertIsNone(document.find("content"))
        self.assertIsNone(document.find_text("content"))
        self.assertEqual(len(document.find_all("link")), 1)
        self.assertEqual(link_href(document, "edit"), "http://e")
        self.assertIsNone(link_href(document, "alternate"))

    def test_replace_keeps_slot_of_first_match(self) -> None:
        node = Node(
            tag="entry",
            children=[Node("a"), Node("b"), Node("c"), Node("b"), Node("d")],
        )

        node.replace("b", [Node("x"), Node("y")])

        self.assertEqual([child.tag for child in node.children], ["a", "x", "y", "c", "d"])

    def test_replace_appends_when_missing(self) -> None:
        node = Node(tag="entry", children=[Node("a")])

        node.replace("b", [Node("x")])

        self.assertEqual([child.tag for child in node.children], ["a", "x"])

    def test_replace_with_nothing_removes(self) -> None:
        node = Node(tag="entry", children=[Node("a"), Node("b")])

        node.replace("b", [])

        self.assertEqual([child.tag for child in node.children], ["a"])


class FeedTest(unittest.TestCase):
    def test_entries_carry_feed_namespaces(self) -> None:
        entries = entries_from_feed(POSTS_FEED_XML)

        self.assertEqual(len(entries), 2)
        for entry in entries:
            self.assertEqual(entry.tag, "entry")
            self.assertEqual(entry.attributes["xmlns"], "http://www.w3.org/2005/Atom")
            self.assertIn("xmlns:thr", entry.attributes)

        rendered = parse_document(render_document(entries[0]))
        self.assertEqual(rendered.find_text("thr:total"), "0")

    def test_feed_without_entries(self) -> None:
        self.assertEqual(
            entries_from_feed('<feed xmlns="http://www.w3.org/2005/Atom"/>'), []
        )


if __name__ == "__main__":
    unittest.main()
