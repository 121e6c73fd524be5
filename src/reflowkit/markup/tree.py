"""Path-based XML tree helpers.

Elements are identified by a *path*: the selectors of the element and all of
its ancestors joined with ``/``. A selector is the (Clark-notation) tag,
followed by the attributes in document order when there are any::

    config/section[@name="db"]/item[@key="host"]

Two trees are merged by walking the incoming tree and grafting every element
whose path does not exist in the target yet. ElementTree elements do not know
their parents, so paths are always computed from a root downwards.
"""

from __future__ import annotations

import copy
import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterable, Iterator

from reflowkit.domain.errors import AmbiguousElementError, XmlMergeError

logger = logging.getLogger(__name__)

Tree = ET.ElementTree | ET.Element


def _root_of(tree: Tree) -> ET.Element:
    return tree.getroot() if isinstance(tree, ET.ElementTree) else tree


def _split_tag(tag: str) -> tuple[str, str]:
    """Return ``(namespace, local_name)`` for a Clark-notation tag."""
    if tag.startswith("{"):
        namespace, _, local = tag[1:].partition("}")
        return namespace, local
    return "", tag


def _join(prefix: str, selector: str) -> str:
    return f"{prefix}/{selector}" if prefix else selector


def parse_xml(text: str) -> ET.ElementTree:
    """Parse an XML document held in a string."""
    return ET.ElementTree(ET.fromstring(text))


def describe_attributes(attributes: dict[str, str]) -> str:
    """Render attributes as ``@name="value"`` pairs joined with commas."""
    return ",".join(f'@{name}="{value}"' for name, value in attributes.items())


def describe_selector(element: ET.Element) -> str:
    """Return the selector of a single element (tag plus attributes)."""
    selector = element.tag
    if element.attrib:
        selector += f"[{describe_attributes(element.attrib)}]"
    return selector


def iter_paths(root: Tree, prefix: str = "") -> Iterator[tuple[str, ET.Element]]:
    """Yield ``(path, element)`` for ``root`` and its descendants in document order."""
    element = _root_of(root)
    path = _join(prefix, describe_selector(element))
    yield path, element
    for child in element:
        if isinstance(child.tag, str):  # skip comments and processing instructions
            yield from iter_paths(child, path)


def describe_path(root: Tree, element: ET.Element) -> str:
    """Return the path of ``element`` within ``root``.

    Raises:
        ValueError: If ``element`` is not part of ``root``.
    """
    for path, candidate in iter_paths(root):
        if candidate is element:
            return path
    raise ValueError(f"{describe_selector(element)} is not part of the given tree")


def get_value(element: ET.Element, name: str, fallback: str | None = None) -> str | None:
    """Return the text of the child called ``name`` in the parent's namespace.

    Args:
        element: Parent element.
        name: Local name of the child.
        fallback: Returned when no such child exists.

    Returns:
        The concatenated text of the child, or ``fallback``.

    Raises:
        AmbiguousElementError: If more than one child matches.
    """
    namespace, _ = _split_tag(element.tag)
    matches = [
        child
        for child in element
        if isinstance(child.tag, str) and _split_tag(child.tag) == (namespace, name)
    ]
    if len(matches) > 1:
        raise AmbiguousElementError(f"{describe_selector(element)}/{name}", len(matches))
    if not matches:
        return fallback
    return "".join(matches[0].itertext())


def _index(pairs: Iterable[tuple[str, ET.Element]]) -> dict[str, list[ET.Element]]:
    index: dict[str, list[ET.Element]] = {}
    for path, element in pairs:
        index.setdefault(path, []).append(element)
    return index


def _merge(
    index: dict[str, list[ET.Element]], prefix: str, incoming: ET.Element
) -> None:
    path = _join(prefix, describe_selector(incoming))
    matches = index.get(path, [])

    if len(matches) > 1:
        raise AmbiguousElementError(path, len(matches))

    if not matches:
        # prefix always resolves: parents are merged before their children
        parent = index[prefix][0]
        graft = copy.deepcopy(incoming)
        graft.tail = None
        parent.append(graft)
        for graft_path, element in iter_paths(graft, prefix):
            index.setdefault(graft_path, []).append(element)
        logger.debug("Grafted %s", path)
        return

    for child in incoming:
        if isinstance(child.tag, str):
            _merge(index, path, child)


def merge_tree(target: Tree, other: Tree) -> None:
    """Merge ``other`` into ``target`` in place.

    Every element of ``other`` whose path is missing from ``target`` is deep
    copied under the element matching its parent's path. Elements whose path
    already exists are descended into; their text and attributes are left as
    they are in ``target``.

    Args:
        target: Tree that receives the new elements.
        other: Tree providing the elements to add.

    Raises:
        XmlMergeError: If the two trees have different root selectors.
        AmbiguousElementError: If a path matches more than one target element.
    """
    target_root = _root_of(target)
    other_root = _root_of(other)

    if describe_selector(target_root) != describe_selector(other_root):
        raise XmlMergeError(
            f"Cannot merge {describe_selector(other_root)} into "
            f"{describe_selector(target_root)}: document roots differ"
        )

    index = _index(iter_paths(target_root))
    root_path = describe_selector(target_root)
    for child in other_root:
        if isinstance(child.tag, str):
            _merge(index, root_path, child)


def write_to_string(
    tree: Tree,
    encoding: str = "utf-8",
    indent: bool = True,
    xml_declaration: bool = True,
) -> str:
    """Serialise a tree to a string.

    The input tree is not modified; indentation is applied to a copy.

    Args:
        tree: Tree or element to serialise.
        encoding: Codec named in the declaration and used for serialising.
        indent: Pretty-print with two-space indentation.
        xml_declaration: Emit the ``<?xml ...?>`` declaration.

    Returns:
        The XML document as text.
    """
    root = copy.deepcopy(_root_of(tree))
    if indent:
        ET.indent(root)
    data = ET.tostring(root, encoding=encoding, xml_declaration=xml_declaration)
    return data.decode(encoding)
