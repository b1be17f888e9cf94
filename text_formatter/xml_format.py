from __future__ import annotations

import logging
import re
from typing import List
from xml.dom import Node, minidom
from xml.parsers.expat import ExpatError
from xml.sax.saxutils import escape

logger = logging.getLogger(__name__)

INTER_TAG_WHITESPACE_RE = re.compile(r'>\s+<')
COMMENT_RE = re.compile(r'<!--(.*?)-->', re.DOTALL)
ATTR_ENTITIES = {'"': '&quot;'}


def repair_comments(text: str) -> str:
    """Replace `--` inside comment bodies, which XML parsers reject."""
    def fix(match):
        body = match.group(1)
        if '--' not in body:
            return match.group(0)
        return f"<!--{body.replace('--', ' - ')}-->"

    return COMMENT_RE.sub(fix, text)


def _attributes(node) -> str:
    return ''.join(
        f' {name}="{escape(value, ATTR_ENTITIES)}"'
        for name, value in node.attributes.items()
    )


def _text_content(node) -> str:
    texts = [
        child.data.strip()
        for child in node.childNodes
        if child.nodeType == Node.TEXT_NODE and child.data.strip()
    ]
    return escape(' '.join(texts))


def format_node(node, level: int, indent_size: int) -> List[str]:
    """Render an element and its descendants as indented lines."""
    indent = ' ' * (level * indent_size)
    tag = node.tagName
    attrs = _attributes(node)
    children = [child for child in node.childNodes if child.nodeType == Node.ELEMENT_NODE]
    text = _text_content(node)

    if not children and not text:
        return [f"{indent}<{tag}{attrs} />"]
    if not children:
        return [f"{indent}<{tag}{attrs}>{text}</{tag}>"]

    lines = [f"{indent}<{tag}{attrs}>"]
    if text:
        lines.append(f"{' ' * ((level + 1) * indent_size)}{text}")
    for child in children:
        lines.extend(format_node(child, level + 1, indent_size))
    lines.append(f"{indent}</{tag}>")
    return lines


def format_xml(text: str, indent_size: int = 2) -> str:
    """Pretty-print an XML document.

    Only elements and their text are kept; comments and processing
    instructions are dropped. Raises ValueError on malformed input.
    """
    if not text or not text.strip():
        return ''

    compact = INTER_TAG_WHITESPACE_RE.sub('><', text.strip())
    compact = repair_comments(compact)

    try:
        document = minidom.parseString(compact)
    except ExpatError as exc:
        logger.debug("XML parse failed: %s", exc)
        raise ValueError(f"Invalid XML: {exc}") from exc

    indent_size = max(0, int(indent_size))
    lines = format_node(document.documentElement, 0, indent_size)
    return '\n'.join(lines).strip()
