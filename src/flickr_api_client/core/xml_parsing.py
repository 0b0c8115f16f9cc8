"""XML response deserialization with per-endpoint shape hints."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from xml.parsers.expat import ExpatError

import xmltodict

logger = logging.getLogger("flickr_api_client")

XmlObject = dict[str, object]


@dataclass(slots=True, frozen=True)
class XmlShape:
    """How ambiguous XML constructs are normalized for one endpoint.

    force_list: element names that always become lists, even when the
        document holds a single occurrence.
    keep_root: keep the ``<rsp>`` wrapper instead of returning its body.
    key_attr: ``(element, attribute)`` pairs; occurrences of ``element`` are
        folded into a mapping keyed by ``attribute`` (removed from each body),
        in document order.
    """

    force_list: tuple[str, ...] = ()
    keep_root: bool = False
    key_attr: tuple[tuple[str, str], ...] = ()


FLAT_SHAPE = XmlShape()


def _fold_items(items: list[object], attribute: str) -> dict[str, object] | None:
    folded: dict[str, object] = {}
    for item in items:
        if not isinstance(item, dict) or attribute not in item:
            return None
        body = {key: value for key, value in item.items() if key != attribute}
        folded[str(item[attribute])] = body
    return folded


def _apply_key_attr(node: object, key_attr: Mapping[str, str]) -> object:
    if isinstance(node, list):
        return [_apply_key_attr(item, key_attr) for item in node]
    if not isinstance(node, dict):
        return node

    result: dict[str, object] = {}
    for key, value in node.items():
        value = _apply_key_attr(value, key_attr)
        attribute = key_attr.get(key)
        if attribute is not None and value is not None:
            items = value if isinstance(value, list) else [value]
            folded = _fold_items(items, attribute)
            if folded is not None:
                value = folded
        result[key] = value
    return result


def parse_xml_payload(text: str | bytes, shape: XmlShape = FLAT_SHAPE) -> XmlObject | None:
    """Deserialize an XML document into nested dicts/lists.

    Attributes and child elements share one namespace; text of an element
    that also has attributes lands under ``"content"``. Returns None when the
    document cannot be parsed or carries no content.
    """

    try:
        document = xmltodict.parse(
            text,
            attr_prefix="",
            cdata_key="content",
            force_list=shape.force_list or None,
        )
    except (ExpatError, ValueError) as exc:
        logger.warning("response parse error error=%s", exc.__class__.__name__)
        return None

    if not isinstance(document, dict) or not document:
        return None

    if shape.key_attr:
        document = _apply_key_attr(document, dict(shape.key_attr))

    if shape.keep_root:
        payload: object = document
    else:
        payload = next(iter(document.values()))

    if not isinstance(payload, dict) or not payload:
        return None
    return dict(payload)


__all__ = [
    "XmlShape",
    "FLAT_SHAPE",
    "parse_xml_payload",
]
