"""Flatten rendered resume HTML into a sequence of typed text blocks.

Used by the text-metrics measurer and by the fpdf2 print fallback, neither of
which has a real HTML layout engine.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass

BLOCK_TAGS = {"h1", "h2", "h3", "p", "li"}
REGION_TAGS = ("aside", "main", "header")

_TAG = re.compile(r"<(/?)([a-zA-Z][a-zA-Z0-9]*)([^>]*)>")
_BODY = re.compile(r"<body[^>]*>(.*?)</body>", re.DOTALL)
_CLASS = re.compile(r"""class=["']([^"']*)["']""")


@dataclass(frozen=True)
class Block:
    kind: str  # h1, h2, h3, text, bullet, section, entry
    text: str = ""
    region: str = "main"  # main, aside, header


def _clean(parts: list[str]) -> str:
    text = html.unescape("".join(parts))
    return re.sub(r"\s+", " ", text).strip()


def _region(stack: list[str]) -> str:
    for name in ("aside", "main", "header"):
        if name in stack:
            return name
    return "main"


def parse_blocks(document_html: str) -> list[Block]:
    """Parse rendered HTML into blocks, in document order."""
    body_match = _BODY.search(document_html)
    body = body_match.group(1) if body_match else document_html

    blocks: list[Block] = []
    regions: list[str] = []
    current: str | None = None
    buffer: list[str] = []
    pos = 0

    def flush(kind: str | None) -> None:
        text = _clean(buffer)
        buffer.clear()
        if text:
            blocks.append(Block(_kind(kind), text, _region(regions)))

    for match in _TAG.finditer(body):
        buffer.append(body[pos:match.start()])
        pos = match.end()
        closing, tag, attrs = match.group(1) == "/", match.group(2).lower(), match.group(3)

        if tag in REGION_TAGS:
            flush(current)
            current = None
            if closing:
                if tag in regions:
                    del regions[len(regions) - 1 - regions[::-1].index(tag)]
            else:
                regions.append(tag)
        elif tag in BLOCK_TAGS:
            flush(current)
            current = None if closing else tag
        elif tag == "section" and not closing:
            flush(current)
            blocks.append(Block("section", region=_region(regions)))
        elif tag == "div" and not closing:
            class_match = _CLASS.search(attrs)
            if class_match and "entry" in class_match.group(1).split():
                flush(current)
                blocks.append(Block("entry", region=_region(regions)))
        elif tag == "br":
            buffer.append("\n")
    buffer.append(body[pos:])
    flush(current)
    return blocks


def _kind(tag: str | None) -> str:
    if tag in ("h1", "h2", "h3"):
        return tag
    if tag == "li":
        return "bullet"
    return "text"
