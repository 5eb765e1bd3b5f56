"""Preparation of serialized documents for submission.

The service rejects documents that carry read-only fields, null markers or the
serializer's namespace declarations, so every write strips them first.
"""

import copy
from typing import Iterable, Union

from lxml import etree  # type: ignore[import-untyped]

from pivotal.core.exceptions import DocumentRootNotFoundError
from pivotal.core.logging import logger

_sanitizer_logger = logger.with_context(component="xml_sanitizer")


def _locate_root(document: etree._Element, root_path: str) -> etree._Element:
    path = root_path.strip("/")
    if document.tag == path:
        return document
    root = document.find(path)
    if root is None:
        raise DocumentRootNotFoundError(root_path)
    return root


def _drop_attributed_children(element: etree._Element) -> None:
    """Remove attributed children of ``element`` and, below those kept, of their children."""
    index = 0
    # the child count shrinks as markers are removed
    while index < len(element):
        child = element[index]
        if not isinstance(child.tag, str):
            index += 1
        elif len(child.attrib) > 0:
            _sanitizer_logger.debug(f"Dropping attributed element <{child.tag}>")
            element.remove(child)
        else:
            _drop_attributed_children(child)
            index += 1


def clean_for_submission(
    document: Union[etree._Element, etree._ElementTree],
    root_path: str,
    excluded: Iterable[str],
    drop_attributed: bool = True,
) -> str:
    """Return the submittable markup of a serialized entity document.

    The input is not modified.

    Args:
        document: Serialized entity document
        root_path: Name (or path) of the entity root element, e.g. ``story``
        excluded: Names of child elements to remove from the root
        drop_attributed: Remove every element below the root that carries an
            attribute, including those inside nested entities. The serializer
            writes absent values as ``xsi:nil`` markers, which the service does
            not accept.

    Returns:
        The outer markup of the document's top-level element

    Raises:
        DocumentRootNotFoundError: If ``root_path`` does not locate an element
    """
    if isinstance(document, etree._ElementTree):
        document = document.getroot()
    document = copy.deepcopy(document)
    root = _locate_root(document, root_path)

    for name in excluded:
        node = root.find(name)
        if node is not None:
            root.remove(node)

    if drop_attributed:
        _drop_attributed_children(root)

    root.attrib.clear()
    etree.cleanup_namespaces(document)
    return etree.tostring(document, encoding="unicode")
