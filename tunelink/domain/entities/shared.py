"""Shared utilities and helper functions for domain entities.

Pure title helpers with zero external dependencies.
"""

import re

# Version markers, in priority order
VERSION_MARKERS = (
    "live",
    "remix",
    "acoustic",
    "demo",
    "remaster",
    "radio edit",
    "extended",
    "instrumental",
    "album version",
    "single version",
)

_FEATURING = re.compile(
    r"\s*[\(\[]?\b(?:featuring|feat\.?|ft\.)\s+"
    r"(?P<artists>[^\(\)\[\]]+?)[\)\]]?(?=\s*$|\s*[\(\[]|\s+-\s)",
    re.IGNORECASE,
)
# Leading groups are part of the title, e.g. "(I Can't Get No) Satisfaction"
_BRACKETED = re.compile(r"\s+[\(\[](?P<content>[^\(\)\[\]]*)[\)\]]")
_DASH_SUFFIX = re.compile(r"\s+-\s+(?P<suffix>.+)$")


def _find_marker(segment: str) -> str | None:
    # Whole words only, allowing plain inflections ("Remastered", "Remixes")
    for marker in VERSION_MARKERS:
        if re.search(
            rf"\b{re.escape(marker)}(?:ed|es|s)?\b", segment, re.IGNORECASE
        ):
            return marker
    return None


def _title_segments(title: str) -> list[str]:
    """Bracketed groups and the dash suffix, where version info usually lives."""
    segments = [m.group("content") for m in _BRACKETED.finditer(title)]
    dash = _DASH_SUFFIX.search(title)
    if dash:
        segments.append(dash.group("suffix"))
    return segments


def clean_title(title: str) -> str:
    """Strip featuring clauses and version suffixes from a title."""
    cleaned = _FEATURING.sub("", title)
    cleaned = _BRACKETED.sub("", cleaned)

    dash = _DASH_SUFFIX.search(cleaned)
    if dash and _find_marker(dash.group("suffix")):
        cleaned = cleaned[: dash.start()]

    cleaned = " ".join(cleaned.split())
    return cleaned or title.strip()


def extract_title_markers(title: str) -> dict[str, str]:
    """Derive introspection metadata from the markers found in a title.

    Returns a subset of ``featuring``, ``version`` and ``is_cover``.
    """
    metadata: dict[str, str] = {}

    featuring = _FEATURING.search(title)
    if featuring:
        metadata["featuring"] = featuring.group("artists").strip()

    segments = _title_segments(title)
    marker = _find_marker(" / ".join(segments))
    if marker:
        metadata["version"] = marker

    if any(re.search(r"\bcover", segment, re.IGNORECASE) for segment in segments):
        metadata["is_cover"] = "true"

    return metadata
