"""Unit tests for reflowkit.markup.tree."""

import xml.etree.ElementTree as ET

import pytest

from reflowkit.domain.errors import AmbiguousElementError, XmlMergeError
from reflowkit.markup import tree as t

# pylint: disable=magic-value-comparison

CONFIG_XML = """
<config version="1">
  <section name="db">
    <item key="host">localhost</item>
  </section>
  <!-- comment -->
</config>
"""


@pytest.fixture
def config_tree() -> ET.ElementTree:
    """A small two-level configuration document."""
    return t.parse_xml(CONFIG_XML.strip())


def test_describe_selector():
    """Attributes are rendered in document order inside brackets."""
    element = ET.fromstring('<item key="host" env="prod"/>')
    assert t.describe_selector(element) == 'item[@key="host",@env="prod"]'
    assert t.describe_selector(ET.fromstring("<plain/>")) == "plain"


def test_iter_paths_skips_comments(config_tree):
    """Paths are listed in document order without comment nodes."""
    paths = [path for path, _ in t.iter_paths(config_tree)]
    assert paths == [
        'config[@version="1"]',
        'config[@version="1"]/section[@name="db"]',
        'config[@version="1"]/section[@name="db"]/item[@key="host"]',
    ]


def test_describe_path(config_tree):
    """The path of a nested element is found from the root."""
    item = config_tree.getroot().find("section/item")
    assert t.describe_path(config_tree, item) == (
        'config[@version="1"]/section[@name="db"]/item[@key="host"]'
    )


def test_describe_path_foreign_element(config_tree):
    """Elements from another tree are rejected."""
    with pytest.raises(ValueError):
        t.describe_path(config_tree, ET.Element("item"))


class TestGetValue:
    """Tests for get_value."""

    @staticmethod
    def test_returns_child_text() -> None:
        """Nested text of the child is concatenated."""
        person = ET.fromstring("<person><name>Ada <b>Lovelace</b></name></person>")
        assert t.get_value(person, "name") == "Ada Lovelace"

    @staticmethod
    def test_missing_child_uses_fallback() -> None:
        """The fallback is returned when no child matches."""
        person = ET.fromstring("<person/>")
        assert t.get_value(person, "name") is None
        assert t.get_value(person, "name", "n/a") == "n/a"

    @staticmethod
    def test_matches_in_parent_namespace_only() -> None:
        """Children in another namespace are ignored."""
        person = ET.fromstring(
            '<p:person xmlns:p="urn:p" xmlns:q="urn:q">'
            "<q:name>wrong</q:name><p:name>right</p:name>"
            "</p:person>"
        )
        assert t.get_value(person, "name") == "right"

    @staticmethod
    def test_duplicate_children_raise() -> None:
        """More than one match is ambiguous."""
        person = ET.fromstring("<person><name>a</name><name>b</name></person>")
        with pytest.raises(AmbiguousElementError) as exc_info:
            t.get_value(person, "name")
        assert exc_info.value.count == 2


class TestMergeTree:
    """Tests for merge_tree."""

    @staticmethod
    def test_adds_missing_elements(config_tree) -> None:
        """New sections and new items in existing sections are grafted."""
        other = t.parse_xml(
            '<config version="1">'
            '<section name="db"><item key="port">5432</item></section>'
            '<section name="log"><item key="level">INFO</item></section>'
            "</config>"
        )
        t.merge_tree(config_tree, other)

        root = config_tree.getroot()
        sections = root.findall("section")
        assert [s.get("name") for s in sections] == ["db", "log"]
        assert [i.get("key") for i in sections[0].findall("item")] == ["host", "port"]
        assert sections[1].find("item").text == "INFO"

    @staticmethod
    def test_existing_elements_keep_target_text(config_tree) -> None:
        """Matching paths are not overwritten."""
        other = t.parse_xml(
            '<config version="1"><section name="db">'
            '<item key="host">remote</item>'
            "</section></config>"
        )
        t.merge_tree(config_tree, other)
        items = config_tree.getroot().findall("section/item")
        assert len(items) == 1
        assert items[0].text == "localhost"

    @staticmethod
    def test_grafts_are_copies(config_tree) -> None:
        """Changing the source afterwards does not touch the target."""
        other = t.parse_xml('<config version="1"><extra>1</extra></config>')
        t.merge_tree(config_tree, other)
        other.getroot().find("extra").text = "2"
        assert config_tree.getroot().find("extra").text == "1"

    @staticmethod
    def test_different_roots_raise(config_tree) -> None:
        """Roots must share a selector."""
        with pytest.raises(XmlMergeError):
            t.merge_tree(config_tree, t.parse_xml('<config version="2"/>'))

    @staticmethod
    def test_ambiguous_target_raises() -> None:
        """A path matching several target elements cannot be merged into."""
        target = t.parse_xml("<root><a/><a/></root>")
        other = t.parse_xml("<root><a><b/></a></root>")
        with pytest.raises(AmbiguousElementError):
            t.merge_tree(target, other)


def test_write_to_string_indents_copy(config_tree):
    """Output is indented and declared; the tree itself is untouched."""
    root = t.parse_xml("<a><b>1</b></a>").getroot()
    output = t.write_to_string(root)
    assert output.startswith("<?xml")
    assert "\n  <b>1</b>\n" in output
    assert root.text is None

    bare = t.write_to_string(config_tree, indent=False, xml_declaration=False)
    assert bare.startswith('<config version="1">')
