#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/ast/sections.py
"""Member section reclassification.

Doxygen groups members into ``sectiondef`` blocks by protection and
storage (``public-func``, ``private-static-attrib``...). The generated
pages use finer groups: operators, constructors and destructors get their
own sections, and every group has a fixed header and position.

The functions here are pure; they never modify the parsed compound.

"""

from __future__ import annotations

import logging
import re
from typing import Optional

from doxy2md.ast.compounds import AnyMember, CompoundDef, SectionDef

logger = logging.getLogger(__name__)

#: Section kind -> (header, order). Lower orders come first.
SECTION_HEADERS: dict[str, tuple[str, int]] = {
    "typedef": ("Typedefs", 100),
    "public-type": ("Public Member Typedefs", 110),
    "protected-type": ("Protected Member Typedefs", 120),
    "private-type": ("Private Member Typedefs", 130),
    "package-type": ("Package Member Typedefs", 140),
    "enum": ("Enumerations", 150),
    "friend": ("Friends", 160),
    "interface": ("Interfaces", 170),
    "constructorr": ("Constructors", 200),
    "public-constructorr": ("Public Constructors", 200),
    "protected-constructorr": ("Protected Constructors", 210),
    "private-constructorr": ("Private Constructors", 220),
    "public-destructor": ("Public Destructor", 230),
    "protected-destructor": ("Protected Destructor", 240),
    "private-destructor": ("Private Destructor", 250),
    "operator": ("Operators", 300),
    "public-operator": ("Public Operators", 310),
    "protected-operator": ("Protected Operators", 320),
    "private-operator": ("Private Operators", 330),
    "package-operator": ("Package Operators", 340),
    "func": ("Functions", 350),
    "function": ("Functions", 350),
    "public-func": ("Public Member Functions", 360),
    "protected-func": ("Protected Member Functions", 370),
    "private-func": ("Private Member Functions", 380),
    "package-func": ("Package Member Functions", 390),
    "var": ("Variables", 400),
    "variable": ("Variables", 400),
    "public-attrib": ("Public Member Attributes", 410),
    "protected-attrib": ("Protected Member Attributes", 420),
    "private-attrib": ("Private Member Attributes", 430),
    "package-attrib": ("Package Member Attributes", 440),
    "public-static-operator": ("Public Operators", 450),
    "protected-static-operator": ("Protected Operators", 460),
    "private-static-operator": ("Private Operators", 470),
    "package-static-operator": ("Package Operators", 480),
    "public-static-func": ("Public Static Functions", 500),
    "protected-static-func": ("Protected Static Functions", 510),
    "private-static-func": ("Private Static Functions", 520),
    "package-static-func": ("Package Static Functions", 530),
    "public-static-attrib": ("Public Static Attributes", 600),
    "protected-static-attrib": ("Protected Static Attributes", 610),
    "private-static-attrib": ("Private Static Attributes", 620),
    "package-static-attrib": ("Package Static Attributes", 630),
    "slot": ("Slots", 700),
    "public-slot": ("Public Slots", 700),
    "protected-slot": ("Protected Slot", 710),
    "private-slot": ("Private Slot", 720),
    "related": ("Related", 800),
    "define": ("Macro Definitions", 810),
    "prototype": ("Prototypes", 820),
    "signal": ("Signals", 830),
    "dcop": ("DCOP Functions", 840),
    "property": ("Properties", 850),
    "event": ("Events", 860),
    "service": ("Services", 870),
    "user-defined": ("Definitions", 1000),
}

USER_DEFINED_ORDER = 1000

# Characters that may follow ``operator`` in an overloaded operator name.
_OPERATOR_FOLLOWERS = ' =!<>+-*/%&|^~,"(['
_LAST_WORD = re.compile(r"-[a-z][a-z]*$")


def is_operator(name: str) -> bool:
    """Return True if ``name`` spells an overloaded C++ operator.

    Examples
    --------
    >>> is_operator("operator==")
    True
    >>> is_operator("operatorName")
    False

    """
    return len(name) > 8 and name.startswith("operator") and name[8] in _OPERATOR_FOLLOWERS


def compute_adjusted_kind(section_kind: str, section_suffix: str, member_suffix: Optional[str] = None) -> str:
    """Replace the trailing word of a section kind.

    Parameters
    ----------
    section_kind : str
        Original section kind, e.g. ``public-static-func``
    section_suffix : str
        New trailing word for hyphenated kinds
    member_suffix : str, optional
        Result for ``user-defined`` and single word kinds; defaults to
        ``section_suffix``

    Returns
    -------
    str
        The adjusted kind, e.g. ``public-static-operator``

    """
    if member_suffix is None:
        member_suffix = section_suffix
    if section_kind == "user-defined":
        return member_suffix
    if "-" in section_kind:
        return _LAST_WORD.sub("-", section_kind) + section_suffix
    return member_suffix


def adjust_section_kind(
    member_kind: str, member_name: str, section_kind: str, class_name: Optional[str] = None
) -> str:
    """Pick the section kind a member is listed under.

    Functions are split into operators, constructors, destructors and plain
    functions; the constructor and destructor checks only apply when the
    unqualified ``class_name`` of the enclosing class is given.
    """
    if member_kind == "function":
        if is_operator(member_name):
            return compute_adjusted_kind(section_kind, "operator")
        if class_name:
            if member_name == class_name:
                return compute_adjusted_kind(section_kind, "constructorr")
            if member_name.replace("~", "", 1) == class_name:
                return compute_adjusted_kind(section_kind, "destructor")
        return compute_adjusted_kind(section_kind, "func", "function")
    if member_kind == "variable":
        return compute_adjusted_kind(section_kind, "attrib", "variable")
    if member_kind == "typedef":
        return compute_adjusted_kind(section_kind, "type", "typedef")
    if member_kind == "slot":
        return compute_adjusted_kind(section_kind, "slot")
    return member_kind


def section_header_name(section: SectionDef) -> str:
    """Return the heading shown above a section.

    User defined sections use their own header. Unknown kinds are logged
    and give an empty string.
    """
    if section.section_kind == "user-defined":
        if section.header is not None:
            return section.header.strip()
        logger.warning("sectiondef of kind user-defined has no header")
        return "User Defined"

    if section.header is not None:
        logger.warning("header %r ignored in sectiondef of kind %s", section.header, section.section_kind)

    entry = SECTION_HEADERS.get(section.section_kind)
    if entry is None:
        logger.error("sectiondef kind %s not implemented yet in section_header_name", section.section_kind)
        return ""
    return entry[0].strip()


def section_order(section_kind: str) -> int:
    """Return the sort weight of a section kind."""
    if section_kind == "user-defined":
        return USER_DEFINED_ORDER
    entry = SECTION_HEADERS.get(section_kind)
    if entry is None:
        logger.error("sectiondef kind %s has no order, placed last", section_kind)
        return USER_DEFINED_ORDER
    return entry[1]


def reclassify_sections(compound: CompoundDef, class_name: Optional[str] = None) -> list[SectionDef]:
    """Regroup the members of a compound into display sections.

    User defined sections that carry a header are kept as they are. All
    other members are moved into synthetic sections keyed by the kind
    returned from :func:`adjust_section_kind`. The result is sorted by
    :func:`section_order`; ties keep their first-seen order.

    Parameters
    ----------
    compound : CompoundDef
        Compound whose ``section_defs`` are regrouped
    class_name : str, optional
        Unqualified class name, used to detect constructors and destructors

    Returns
    -------
    list of SectionDef
        New section objects; the members themselves are shared

    """
    result: list[SectionDef] = []
    by_kind: dict[str, SectionDef] = {}

    def target(section: SectionDef, member: AnyMember) -> SectionDef:
        adjusted = adjust_section_kind(member.member_kind, member.name, section.section_kind, class_name)
        grouped = by_kind.get(adjusted)
        if grouped is None:
            grouped = SectionDef(section_kind=adjusted)
            by_kind[adjusted] = grouped
        return grouped

    for section in compound.section_defs:
        if section.section_kind == "user-defined" and section.header is not None:
            result.append(section)
            continue
        for member_def in section.member_defs:
            target(section, member_def).member_defs.append(member_def)
        for member in section.members:
            target(section, member).members.append(member)

    result.extend(by_kind.values())
    return sorted(result, key=lambda section: section_order(section.section_kind))


__all__ = [
    "SECTION_HEADERS",
    "adjust_section_kind",
    "compute_adjusted_kind",
    "is_operator",
    "reclassify_sections",
    "section_header_name",
    "section_order",
]
