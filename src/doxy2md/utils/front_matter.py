#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/utils/front_matter.py
"""YAML front matter for generated pages."""

from __future__ import annotations

import logging
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

_FRONT_MATTER_KEYS = ("title", "slug", "description", "keywords")


def generate_front_matter(metadata: Dict[str, Any]) -> str:
    """Serialize page metadata as a YAML front matter block.

    Only the known keys are kept, in a fixed order; empty values are
    dropped.

    Parameters
    ----------
    metadata : dict
        Page metadata, typically ``title``, ``slug`` and ``keywords``

    Returns
    -------
    str
        Front matter with ``---`` delimiters, followed by a blank line

    Examples
    --------
    >>> print(generate_front_matter({"title": "Foo", "slug": "/api/classes/foo"}))
    ---
    title: Foo
    slug: /api/classes/foo
    ---
    <BLANKLINE>

    """
    normalized: Dict[str, Any] = {}
    for key in _FRONT_MATTER_KEYS:
        value = metadata.get(key)
        if value:
            normalized[key] = value

    for key in metadata:
        if key not in _FRONT_MATTER_KEYS:
            logger.debug("Front matter key %s ignored", key)

    content = yaml.safe_dump(
        normalized,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )
    if not content.endswith("\n"):
        content += "\n"
    return f"---\n{content}---\n\n"


__all__ = ["generate_front_matter"]
