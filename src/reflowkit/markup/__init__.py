"""XML tree helpers built on :mod:`xml.etree.ElementTree`."""

from .tree import (
    describe_path,
    describe_selector,
    get_value,
    merge_tree,
    parse_xml,
    write_to_string,
)

__all__ = [
    "describe_path",
    "describe_selector",
    "get_value",
    "merge_tree",
    "parse_xml",
    "write_to_string",
]
