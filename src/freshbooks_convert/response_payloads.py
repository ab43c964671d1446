"""
Decode raw FreshBooks response payloads into ResponseBag instances.

XML layout rules, applied to every element:
- attributes come first (preceded by ``xmlns`` when the element introduces a
  namespace), then child elements in document order
- an element with neither attributes nor children becomes its text
- repeated sibling tags collapse into a list under a single key
- namespaces are stripped from tag and attribute names

A list response such as ``<response xmlns="..." status="ok"><invoices page="1"
...>`` therefore reads as the ordered entries ``xmlns, status, invoices``.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Any, Dict, Optional, Set, Tuple, Union

import orjson

from freshbooks_convert.exceptions import PayloadDecodeError
from freshbooks_convert.response_bag import MappingResponseBag, ResponseBag

logger = logging.getLogger(__name__)

TEXT_KEY = "text"


def _split_tag(tag: str) -> Tuple[Optional[str], str]:
    if tag.startswith("{"):
        namespace, _, local = tag[1:].partition("}")
        return namespace, local
    return None, tag


def _element_value(element: ET.Element, parent_namespace: Optional[str]) -> Any:
    namespace, _ = _split_tag(element.tag)
    fields: Dict[str, Any] = {}
    if namespace and namespace != parent_namespace:
        fields["xmlns"] = namespace
    for key, value in element.attrib.items():
        fields[_split_tag(key)[1]] = value

    children = list(element)
    text = element.text or ""
    if not fields and not children:
        return text

    collapsed: Set[str] = set()
    for child in children:
        _, name = _split_tag(child.tag)
        value = _element_value(child, namespace)
        if name in collapsed:
            fields[name].append(value)
        elif name in fields:
            fields[name] = [fields[name], value]
            collapsed.add(name)
        else:
            fields[name] = value

    if not children and text.strip():
        fields[TEXT_KEY] = text
    return fields


def bag_from_xml(payload: Union[str, bytes]) -> ResponseBag:
    """
    Parse a FreshBooks XML response into a ResponseBag.

    The root element is exposed under its own tag name, so a standard
    response is read with ``bag.get("response")``.

    Raises:
        PayloadDecodeError: If the payload is not well-formed XML
    """
    try:
        root = ET.fromstring(payload)
    except ET.ParseError as exc:
        logger.debug("Failed to parse FreshBooks XML payload: %s", exc)
        raise PayloadDecodeError.malformed("XML") from exc

    _, root_name = _split_tag(root.tag)
    return MappingResponseBag({root_name: _element_value(root, None)})


def bag_from_json(payload: Union[str, bytes]) -> ResponseBag:
    """
    Parse a JSON response object into a ResponseBag.

    Raises:
        PayloadDecodeError: If the payload is not valid JSON or its top level
            is not an object
    """
    try:
        decoded = orjson.loads(payload)
    except orjson.JSONDecodeError as exc:
        logger.debug("Failed to parse JSON payload: %s", exc)
        raise PayloadDecodeError.malformed("JSON") from exc

    if not isinstance(decoded, dict):
        raise PayloadDecodeError.not_an_object(type(decoded))
    return MappingResponseBag(decoded)


__all__ = ["TEXT_KEY", "bag_from_json", "bag_from_xml"]
