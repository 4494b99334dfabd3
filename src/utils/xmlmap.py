import codecs
import re
import xml.etree.ElementTree as ET
from typing import Any, Dict
from src.core.errors import MalformedFeed

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"
XML_DECL_ENCODING_RE = re.compile(rb"^\s*<\?xml[^>]*?encoding=[\"']([A-Za-z0-9._-]+)[\"']")

def decode_markup(data: bytes) -> str:
    """Decode raw XML bytes using the BOM or the declared encoding, UTF-8 otherwise."""
    for bom, encoding in ((codecs.BOM_UTF8, "utf-8"), (codecs.BOM_UTF16_LE, "utf-16-le"), (codecs.BOM_UTF16_BE, "utf-16-be")):
        if data.startswith(bom):
            return data[len(bom):].decode(encoding, errors="replace")
    encoding = "utf-8"
    m = XML_DECL_ENCODING_RE.match(data)
    if m:
        encoding = m.group(1).decode("ascii")
    try:
        return data.decode(encoding, errors="replace")
    except LookupError:
        return data.decode("utf-8", errors="replace")

def parse_markup(content: str) -> Dict[str, Any]:
    """Parse an XML document into nested dicts keyed by prefixed tag names.

    Mirrors the loose shape feed consumers usually get from XML-to-object
    converters:

    * an element with neither attributes nor children becomes its text
    * otherwise it becomes a dict; attributes are stored under ``@name``,
      children under their tag name and non-blank text under ``#text``
    * a child tag that repeats becomes a list, a child that appears once
      stays a bare value

    Namespaced tags keep the prefix the document declared for them, so an
    Atom feed from YouTube yields keys such as ``yt:videoId`` and
    ``media:group``.
    """
    parser = ET.XMLPullParser(events=("start-ns", "start"))
    prefixes = {XML_NAMESPACE: "xml"}
    root = None
    try:
        parser.feed(content.lstrip())
        parser.close()
        for event, payload in parser.read_events():
            if event == "start-ns":
                prefix, uri = payload
                prefixes.setdefault(uri, prefix)
            elif root is None:
                root = payload
    except ET.ParseError as e:
        raise MalformedFeed(f"Feed document is not valid XML: {e}") from e
    if root is None:
        raise MalformedFeed("Feed document has no root element")
    return {_qualified_name(root.tag, prefixes): _element_to_value(root, prefixes)}

def _qualified_name(tag: str, prefixes: Dict[str, str]) -> str:
    if not tag.startswith("{"):
        return tag
    uri, local = tag[1:].split("}", 1)
    prefix = prefixes.get(uri)
    return f"{prefix}:{local}" if prefix else local

def _element_to_value(element: ET.Element, prefixes: Dict[str, str]) -> Any:
    children = list(element)
    text = element.text or ""
    if not element.attrib and not children:
        return text

    node: Dict[str, Any] = {}
    for name, value in element.attrib.items():
        node["@" + _qualified_name(name, prefixes)] = value
    for child in children:
        key = _qualified_name(child.tag, prefixes)
        value = _element_to_value(child, prefixes)
        if key not in node:
            node[key] = value
        elif isinstance(node[key], list):
            node[key].append(value)
        else:
            node[key] = [node[key], value]
    if text.strip() or (text and not children):
        node["#text"] = text
    return node
