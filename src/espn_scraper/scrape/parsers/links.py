"""Helpers for pulling identifiers out of ESPN link paths.

ESPN encodes team identity in profile links, e.g.:
    /nfl/team/_/name/buf/buffalo-bills                -> name marker, "buf"
    /college-football/team/_/id/302/uc-davis-aggies   -> id marker, "302"
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import urlparse


def path_segments(href: str) -> list[str]:
    """Split a link (absolute or relative) into its non-empty path segments."""
    path = urlparse(href).path if "://" in href else href.split("?", 1)[0].split("#", 1)[0]
    return [segment for segment in path.split("/") if segment]


def id_from_profile_link(href: str) -> str:
    """Return the second-to-last path segment, or "" when the path is too short."""
    segments = path_segments(href)
    if len(segments) < 2:
        return ""
    return segments[-2]


def segment_after(href: str, marker: str) -> Optional[str]:
    """Return the segment following ``marker`` in the path, if present."""
    segments = path_segments(href)
    try:
        index = segments.index(marker)
    except ValueError:
        return None
    if index + 1 >= len(segments):
        return None
    return segments[index + 1]
