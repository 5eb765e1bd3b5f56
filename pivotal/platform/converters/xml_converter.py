"""Conversion between entities and Pivotal XML documents.

Documents follow the service vocabulary: a root element named after the entity,
one child element per field, plural containers holding repeated singular elements.
Absent values are written as null markers (``<estimate xsi:nil="true"/>``).
"""

import types
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar, Union, get_args, get_origin

from lxml import etree  # type: ignore[import-untyped]

from pivotal.core.exceptions import WireDocumentError
from pivotal.platform.converters._base import SyncedValue
from pivotal.platform.entities._base import WireEntity

XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
XSD_NAMESPACE = "http://www.w3.org/2001/XMLSchema"
NIL_ATTRIBUTE = f"{{{XSI_NAMESPACE}}}nil"
NAMESPACES = {"xsi": XSI_NAMESPACE, "xsd": XSD_NAMESPACE}

EntityT = TypeVar("EntityT", bound=WireEntity)


def _entity_annotation(annotation: Any) -> Tuple[Optional[Type[WireEntity]], bool]:
    """Return the entity class behind a field annotation and whether it is a list."""
    origin = get_origin(annotation)
    if origin in (list, List):
        item_type, _ = _entity_annotation(get_args(annotation)[0])
        return item_type, item_type is not None
    if origin is Union or origin is types.UnionType:
        for arg in get_args(annotation):
            if arg is not type(None):
                return _entity_annotation(arg)
        return None, False
    if isinstance(annotation, type) and issubclass(annotation, WireEntity):
        return annotation, False
    return None, False


def _text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class XmlConverter:
    """Serializes entities to lxml documents and back."""

    def parse(self, content: Union[bytes, str]) -> etree._Element:
        """Parse a response body into its document element.

        Raises:
            lxml.etree.XMLSyntaxError: If the body is not well-formed XML
        """
        if isinstance(content, str):
            content = content.encode("utf-8")
        parser = etree.XMLParser(resolve_entities=False, no_network=True)
        return etree.fromstring(content, parser)

    def to_document(self, entity: WireEntity) -> etree._Element:
        """Serialize an entity to a document rooted at its wire root."""
        root = etree.Element(entity.wire_root, nsmap=NAMESPACES)
        self._write_fields(root, entity)
        return root

    def to_string(self, element: etree._Element) -> str:
        """Return the outer markup of an element."""
        return etree.tostring(element, encoding="unicode")

    def from_document(self, root: etree._Element, entity_cls: Type[EntityT]) -> EntityT:
        """Deserialize a single-entity document.

        Raises:
            WireDocumentError: If the root element is not the entity's wire root
        """
        if root.tag != entity_cls.wire_root:
            raise WireDocumentError(
                f"Expected <{entity_cls.wire_root}> document, got <{root.tag}>"
            )
        return self._read_entity(root, entity_cls)

    def from_list_document(self, root: etree._Element, entity_cls: Type[EntityT]) -> List[EntityT]:
        """Deserialize a plural container document (e.g. ``<stories>``).

        Raises:
            WireDocumentError: If the root element is not the entity's list root
        """
        if root.tag != entity_cls.wire_list_root:
            raise WireDocumentError(
                f"Expected <{entity_cls.wire_list_root}> document, got <{root.tag}>"
            )
        return [
            self._read_entity(child, entity_cls)
            for child in root
            if child.tag == entity_cls.wire_root
        ]

    def _write_fields(self, parent: etree._Element, entity: WireEntity) -> None:
        for name, tag in entity.wire_fields():
            self._write_value(parent, tag, getattr(entity, name))

    def _write_value(self, parent: etree._Element, tag: str, value: Any) -> None:
        child = etree.SubElement(parent, tag)
        if isinstance(value, SyncedValue):
            value = value.raw
        if value is None:
            child.set(NIL_ATTRIBUTE, "true")
        elif isinstance(value, WireEntity):
            self._write_fields(child, value)
        elif isinstance(value, list):
            for item in value:
                item_element = etree.SubElement(child, item.wire_root)
                self._write_fields(item_element, item)
        else:
            child.text = _text(value)

    def _read_entity(self, element: etree._Element, entity_cls: Type[EntityT]) -> EntityT:
        return entity_cls.model_validate(self._read_fields(element, entity_cls))

    def _read_fields(self, element: etree._Element, entity_cls: Type[WireEntity]) -> Dict[str, Any]:
        by_tag = {tag: name for name, tag in entity_cls.wire_fields()}
        data: Dict[str, Any] = {}
        for child in element:
            # comments and processing instructions have non-string tags
            if not isinstance(child.tag, str) or child.tag not in by_tag:
                continue
            name = by_tag[child.tag]
            data[name] = self._read_value(child, entity_cls.model_fields[name].annotation)
        return data

    def _read_value(self, element: etree._Element, annotation: Any) -> Any:
        if element.get(NIL_ATTRIBUTE) == "true":
            return None
        entity_type, many = _entity_annotation(annotation)
        if entity_type is None:
            return element.text
        if many:
            return [
                self._read_entity(item, entity_type)
                for item in element
                if item.tag == entity_type.wire_root
            ]
        return self._read_entity(element, entity_type)


xml_converter = XmlConverter()
