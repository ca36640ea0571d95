#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/parsers/base.py
"""Base class for the Doxygen tree builders.

Every builder turns one XML element of the order-preserving shape produced
by :class:`~doxy2md.parsers.xml_access.XmlAccess` into one node. The
helpers below keep the two failure modes apart:

- grammar violations (missing mandatory children or attributes, repeated
  singletons, empty required values) raise
  :class:`~doxy2md.exceptions.GrammarError`;
- elements and attributes the builders do not know yet are logged at
  error level and skipped, so new Doxygen versions degrade gracefully.

"""

from __future__ import annotations

import logging
import math
from typing import Any, NoReturn, Optional, TypeVar

from doxy2md.exceptions import GrammarError
from doxy2md.parsers.xml_access import ATTRIBUTE_PREFIX, XmlAccess, XmlElement

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseBuilder:
    """Shared state and assertion helpers for the builders.

    Parameters
    ----------
    xml : XmlAccess or None, default = None
        Accessor shared by all builders of a parse session. A fresh one is
        created when omitted.

    """

    def __init__(self, xml: Optional[XmlAccess] = None):
        """Initialize the builder with the shared XML accessor."""
        self.xml: XmlAccess = xml if xml is not None else XmlAccess()

    # ------------------------------------------------------------------
    # Grammar assertions
    # ------------------------------------------------------------------

    @staticmethod
    def _fail(message: str, element_name: str, builder_name: str) -> NoReturn:
        raise GrammarError(message, element_name=element_name, builder_name=builder_name)

    def _require(self, condition: Any, message: str, element_name: str, builder_name: str) -> None:
        if not condition:
            self._fail(message, element_name, builder_name)

    def _inner(self, element: XmlElement, element_name: str, builder_name: str, required: bool = False) -> list[Any]:
        """Return the ordered children, optionally asserting there is at least one."""
        inner_elements = self.xml.get_inner_elements(element, element_name)
        if required and len(inner_elements) == 0:
            self._fail("has no inner elements", element_name, builder_name)
        return inner_elements

    def _assert_no_attributes(self, element: XmlElement, element_name: str, builder_name: str) -> None:
        if self.xml.has_attributes(element):
            names = ", ".join(self.xml.get_attribute_names(element))
            self._fail(f"unexpected attributes {names}", element_name, builder_name)

    def _set_once(self, current: Optional[T], value: T, element_name: str, child_name: str, builder_name: str) -> T:
        """Return ``value``, failing if a singleton child was already seen."""
        if current is not None:
            self._fail(f"duplicate <{child_name}>", element_name, builder_name)
        return value

    # ------------------------------------------------------------------
    # Lenient reporting
    # ------------------------------------------------------------------

    def _unknown_element(self, child: XmlElement, element_name: str, builder_name: str) -> None:
        logger.error(
            "%s element:%s not implemented yet in %s", element_name, self.xml.element_name(child), builder_name
        )

    def _unknown_attribute(self, attribute_name: str, element_name: str, builder_name: str) -> None:
        logger.error(
            "%s attribute:%s not implemented yet in %s",
            element_name,
            attribute_name[len(ATTRIBUTE_PREFIX) :],
            builder_name,
        )

    # ------------------------------------------------------------------
    # Typed values
    # ------------------------------------------------------------------

    def _attribute_int(self, element: XmlElement, name: str) -> int:
        """Return a numeric attribute as an int."""
        return int(self.xml.get_attribute_as_number(element, name))

    def _text_child(self, child: XmlElement, child_name: str, builder_name: str) -> str:
        """Return the text of a text-only child element."""
        if not self.xml.is_inner_element_text(child, child_name):
            self._fail("expected text content", child_name, builder_name)
        return self.xml.get_inner_element_text(child, child_name)

    def _number_child(self, child: XmlElement, child_name: str) -> Optional[int]:
        """Return the integer content of a child, or None when empty."""
        number = self.xml.get_inner_element_number(child, child_name)
        if isinstance(number, float) and math.isnan(number):
            return None
        return int(number)


__all__ = ["BaseBuilder"]
