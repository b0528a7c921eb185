from __future__ import annotations

import re

_BULLET_CHARS = "•◦▪▫●○■□◆◇▶►-–—*·"
_BULLET_PATTERN = re.compile(rf"^\s*(?:[{re.escape(_BULLET_CHARS)}]|(?:\d+[\.\)]))\s+")
_SECTION_HEADER_RE = re.compile(r"^\s*[A-Za-z][A-Za-z '/&-]{1,40}:\s*$")


def enumerate_lines(text: str) -> list[tuple[int, str]]:
    return [(index + 1, line) for index, line in enumerate(text.splitlines())]


def normalize_line(line: str) -> str:
    return re.sub(r"\s+", " ", line).strip()


def is_bullet_like(line: str) -> bool:
    return bool(_BULLET_PATTERN.match(line))


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PATTERN.sub("", line).strip()


def contains_any(text: str, markers: tuple[str, ...]) -> bool:
    lowered = text.lower()
    return any(marker in lowered for marker in markers)


def is_section_header(line: str) -> bool:
    """A short line ending in a colon, e.g. 'Requirements:' or 'What you'll do:'."""
    stripped = normalize_line(line)
    if not stripped:
        return False
    return bool(_SECTION_HEADER_RE.match(stripped)) and len(stripped.split()) <= 5
