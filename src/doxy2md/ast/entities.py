#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/ast/entities.py
"""Character entity elements and the Unicode text they stand for.

Doxygen writes special characters as empty elements (``<copy/>``,
``<alpha/>``, ``<ndash/>``). Each one becomes an
:class:`~doxy2md.ast.nodes.Entity` whose ``substring`` is looked up here.

"""

from __future__ import annotations


def _run(names: str, first: int) -> dict[str, str]:
    """Map consecutive names to consecutive code points starting at ``first``."""
    return {name: chr(first + offset) for offset, name in enumerate(names.split())}


ENTITIES: dict[str, str] = {
    "copy": "©",
    **_run("iexcl cent pound curren yen brvbar sect umlaut", 0x00A1),
    "nzwj": "\u200c",
    "zwj": "\u200d",
    "ndash": "–",
    "mdash": "—",
    **_run(
        "ordf laquo not shy registered macr deg plusmn sup2 sup3 acute micro para middot cedil sup1 ordm raquo "
        "frac14 frac12 frac34 iquest",
        0x00AA,
    ),
    **_run(
        "Agrave Aacute Acirc Atilde Aumlaut Aring AElig Ccedil Egrave Eacute Ecirc Eumlaut Igrave Iacute Icirc Iumlaut",
        0x00C0,
    ),
    **_run(
        "ETH Ntilde Ograve Oacute Ocirc Otilde Oumlaut times Oslash Ugrave Uacute Ucirc Uumlaut Yacute THORN szlig",
        0x00D0,
    ),
    **_run(
        "agrave aacute acirc atilde aumlaut aring aelig ccedil egrave eacute ecirc eumlaut igrave iacute icirc iumlaut",
        0x00E0,
    ),
    **_run(
        "eth ntilde ograve oacute ocirc otilde oumlaut divide oslash ugrave uacute ucirc uumlaut yacute thorn yumlaut",
        0x00F0,
    ),
    "fnof": "ƒ",
    **_run("Alpha Beta Gamma Delta Epsilon Zeta Eta Theta Iota Kappa Lambda Mu Nu Xi Omicron Pi Rho", 0x0391),
    **_run("Sigma Tau Upsilon Phi Chi Psi Omega", 0x03A3),
    **_run("alpha beta gamma delta epsilon zeta eta theta iota kappa lambda mu nu xi omicron pi rho", 0x03B1),
    "sigmaf": "ς",
    "sigma": "σ",
    **_run("tau upsilon phi chi psi omega", 0x03C4),
    "thetasym": "ϑ",
    "upsih": "ϒ",
    "piv": "ϖ",
    "bull": "•",
    "hellip": "…",
    "prime": "′",
    "Prime": "″",
    "oline": "‾",
    "frasl": "⁄",
    "weierp": "℘",
    "imaginary": "ℑ",
    "real": "ℜ",
    "trademark": "™",
    "alefsym": "ℵ",
    **_run("larr uarr rarr darr harr", 0x2190),
    "crarr": "↵",
    **_run("lArr uArr rArr dArr hArr", 0x21D0),
    "forall": "∀",
    "part": "∂",
    "exist": "∃",
    "empty": "∅",
    "nabla": "∇",
    "isin": "∈",
    "notin": "∉",
    "ni": "∋",
    "prod": "∏",
    "sum": "∑",
    "minus": "−",
    "lowast": "∗",
    "radic": "√",
    "prop": "∝",
    "infin": "∞",
    "ang": "∠",
    "and": "∧",
    "or": "∨",
    "cap": "∩",
    "cup": "∪",
    "int": "∫",
    "there4": "∴",
    "sim": "∼",
    "cong": "≅",
    "asymp": "≈",
    "ne": "≠",
    "equiv": "≡",
    "le": "≤",
    "ge": "≥",
    "sub": "⊂",
    "sup": "⊃",
    "nsub": "⊄",
    "sube": "⊆",
    "supe": "⊇",
    "oplus": "⊕",
    "otimes": "⊗",
    "perp": "⊥",
    "sdot": "⋅",
    "lceil": "⌈",
    "rceil": "⌉",
    "lfloor": "⌊",
    "rfloor": "⌋",
    "lang": "〈",
    "rang": "〉",
    "loz": "◊",
    "spades": "♠",
    "clubs": "♣",
    "hearts": "♥",
    "diams": "♦",
    "OElig": "Œ",
    "oelig": "œ",
    "Scaron": "Š",
    "scaron": "š",
    "Yumlaut": "Ÿ",
    "circ": "ˆ",
    "tilde": "˜",
    "ensp": "\u2002",
    "emsp": "\u2003",
    "thinsp": "\u2009",
    "zwnj": "\u200c",
    "lrm": "\u200e",
    "rlm": "\u200f",
    "lsquo": "‘",
    "rsquo": "’",
    "sbquo": "‚",
    "ldquo": "“",
    "rdquo": "”",
    "bdquo": "„",
    "dagger": "†",
    "Dagger": "‡",
    "permil": "‰",
    "lsaquo": "‹",
    "rsaquo": "›",
    "euro": "€",
    "tm": "™",
}


def is_entity(name: str) -> bool:
    """Return True if ``name`` is a known character entity element."""
    return name in ENTITIES


__all__ = ["ENTITIES", "is_entity"]
