#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/parsers/xml_access.py
"""Order-preserving XML element shape and typed accessors.

The tree builders never touch ``ElementTree`` objects directly. A parsed
document is first converted into a plain, order-preserving structure in
which every element is a ``dict`` holding:

- one key, the element tag, mapping to the ordered list of its children;
- optionally ``":@"``, mapping attribute names (prefixed with ``"@_"``) to
  typed values;

and every text run is a ``dict`` with the single key ``"#text"``. Text and
child elements are interleaved exactly as they appear in the source, so
mixed content such as ``<para>outer <bold>inner</bold> text</para>``
becomes::

    {"para": [
        {"#text": "outer "},
        {"bold": [{"#text": "inner"}]},
        {"#text": " text"},
    ]}

The :class:`XmlAccess` methods answer questions about this shape and raise
:class:`~doxy2md.exceptions.XmlAccessError` when a precondition is broken.

"""

from __future__ import annotations

import logging
import math
import re
from pathlib import Path
from typing import TYPE_CHECKING, Any, Union

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from doxy2md.exceptions import FileNotFoundError, MalformedFileError, XmlAccessError

if TYPE_CHECKING:
    from doxy2md.ast.nodes import Image

logger = logging.getLogger(__name__)

TEXT_KEY = "#text"
ATTRIBUTES_KEY = ":@"
ATTRIBUTE_PREFIX = "@_"

XmlElement = dict[str, Any]

_INT_PATTERN = re.compile(r"^[-+]?\d+$")
_FLOAT_PATTERN = re.compile(r"^[-+]?\d*\.\d+$")
_LEADING_INT_PATTERN = re.compile(r"^\s*([-+]?\d+)")
_SCALAR_TYPES = (str, int, float, bool)


def _local_name(name: str) -> str:
    """Drop the ``{namespace}`` prefix ElementTree puts on qualified names."""
    if name.startswith("{"):
        return name.split("}", 1)[1]
    return name


def _typed_attribute_value(value: str) -> Union[str, int, float]:
    """Convert numeric attribute values to numbers.

    Only canonical spellings are converted, so identifiers such as ``"007"``
    keep their leading zeros and still read back unchanged as strings.
    """
    if _INT_PATTERN.match(value):
        number = int(value)
        if str(number) == value.lstrip("+"):
            return number
    elif _FLOAT_PATTERN.match(value):
        real = float(value)
        if repr(real) == value.lstrip("+"):
            return real
    return value


class XmlAccess:
    """Typed queries over the order-preserving XML element shape.

    One instance is shared by all builders of a parse session. Besides the
    accessors it collects the HTML images met while building, which the
    page assembly later copies next to the generated pages.

    Attributes
    ----------
    images : list of Image
        Images of type ``html`` encountered while building

    """

    def __init__(self) -> None:
        """Initialize the accessor with an empty image collection."""
        self.images: list[Image] = []

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def parse_string(self, text: Union[str, bytes], source: str = "<string>") -> list[XmlElement]:
        """Parse XML text into the order-preserving element shape.

        Parameters
        ----------
        text : str or bytes
            XML document text
        source : str, default "<string>"
            Name used in error messages

        Returns
        -------
        list of XmlElement
            The top level elements (the document root)

        Raises
        ------
        MalformedFileError
            If the text is not well-formed XML or uses forbidden constructs

        """
        try:
            root = ET.fromstring(text)
        except (ET.ParseError, DefusedXmlException) as exc:
            raise MalformedFileError(
                f"Cannot parse XML from {source}: {exc}", file_path=source, original_error=exc
            ) from exc
        return [self._convert_element(root)]

    def parse_file(self, file_path: Union[str, Path]) -> list[XmlElement]:
        """Read and parse one XML file.

        Raises
        ------
        FileNotFoundError
            If the file does not exist
        MalformedFileError
            If the file is not well-formed XML

        """
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(str(path))
        logger.debug("Parsing %s", path)
        return self.parse_string(path.read_bytes(), source=str(path))

    def _convert_element(self, element: Any) -> XmlElement:
        children: list[XmlElement] = []
        if element.text:
            children.append({TEXT_KEY: element.text})
        for child in element:
            if isinstance(child.tag, str):
                children.append(self._convert_element(child))
            if child.tail:
                children.append({TEXT_KEY: child.tail})

        converted: XmlElement = {_local_name(element.tag): children}
        if element.attrib:
            converted[ATTRIBUTES_KEY] = {
                ATTRIBUTE_PREFIX + _local_name(name): _typed_attribute_value(value)
                for name, value in element.attrib.items()
            }
        return converted

    # ------------------------------------------------------------------
    # Attributes
    # ------------------------------------------------------------------

    def has_attributes(self, element: XmlElement) -> bool:
        """Return True if the element carries any attribute."""
        return ATTRIBUTES_KEY in element

    def get_attribute_names(self, element: XmlElement) -> list[str]:
        """Return the prefixed attribute names, in source order."""
        return list(element.get(ATTRIBUTES_KEY, {}).keys())

    def has_attribute(self, element: XmlElement, name: str) -> bool:
        """Return True if the element has the named (prefixed) attribute."""
        return name in element.get(ATTRIBUTES_KEY, {})

    def _get_attribute(self, element: XmlElement, name: str) -> Any:
        attributes = element.get(ATTRIBUTES_KEY, {})
        if name not in attributes:
            raise XmlAccessError(f"missing attribute {name}", element_name=self.element_name(element))
        return attributes[name]

    def get_attribute_as_string(self, element: XmlElement, name: str) -> str:
        """Return an attribute as a string; numbers are converted back."""
        value = self._get_attribute(element, name)
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        raise XmlAccessError(
            f"attribute {name} has unexpected type {type(value).__name__}", element_name=self.element_name(element)
        )

    def get_attribute_as_number(self, element: XmlElement, name: str) -> Union[int, float]:
        """Return a numeric attribute; fails for non-numeric values."""
        value = self._get_attribute(element, name)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return value
        raise XmlAccessError(f"attribute {name} is not a number: {value!r}", element_name=self.element_name(element))

    def get_attribute_as_boolean(self, element: XmlElement, name: str) -> bool:
        """Return a Doxygen flag attribute.

        Doxygen spells flags as ``yes``/``no``; ``"yes"`` in any letter case
        is True and every other string is False.
        """
        value = self._get_attribute(element, name)
        if isinstance(value, str):
            return value.lower() == "yes"
        raise XmlAccessError(f"attribute {name} is not a flag: {value!r}", element_name=self.element_name(element))

    # ------------------------------------------------------------------
    # Inner elements and text
    # ------------------------------------------------------------------

    def element_name(self, element: XmlElement) -> str | None:
        """Return the tag of an element, or None for a text node."""
        for key in element:
            if key not in (ATTRIBUTES_KEY, TEXT_KEY):
                return key
        return None

    def has_inner_element(self, element: XmlElement, name: str) -> bool:
        """Check for a named child list, or for a scalar text payload.

        Empty lists count: self-closing elements such as ``<linebreak/>``
        are represented by an empty child list.
        """
        if name not in element:
            return False
        if name == TEXT_KEY:
            return isinstance(element[name], _SCALAR_TYPES)
        return isinstance(element[name], list)

    def has_inner_text(self, element: XmlElement) -> bool:
        """Return True if the element is a text node."""
        return self.has_inner_element(element, TEXT_KEY)

    def get_inner_text(self, element: XmlElement) -> str:
        """Return the payload of a text node."""
        value = element.get(TEXT_KEY)
        if not isinstance(value, _SCALAR_TYPES):
            raise XmlAccessError("element is not a text node")
        return str(value)

    def is_inner_element_text(self, element: XmlElement, name: str) -> bool:
        """Check that the named child is empty or holds a single text node."""
        inner_elements = element.get(name)
        if not isinstance(inner_elements, list):
            return False
        if len(inner_elements) == 0:
            return True
        return len(inner_elements) == 1 and self.has_inner_text(inner_elements[0])

    def get_inner_elements(self, element: XmlElement, name: str) -> list[XmlElement]:
        """Return the ordered children stored under ``name``.

        Raises
        ------
        XmlAccessError
            If the element has no such child list

        """
        inner_elements = element.get(name)
        if not isinstance(inner_elements, list):
            raise XmlAccessError(f"element does not have the {name} child element", element_name=name)
        return inner_elements

    def _get_single_text(self, element: XmlElement, name: str) -> str | None:
        inner_elements = self.get_inner_elements(element, name)
        if len(inner_elements) == 0:
            return None
        if len(inner_elements) > 1:
            raise XmlAccessError("Too many elements", element_name=name)
        return self.get_inner_text(inner_elements[0])

    def get_inner_element_text(self, element: XmlElement, name: str) -> str:
        """Return the text of a text-only child; empty children give ``""``."""
        text = self._get_single_text(element, name)
        return "" if text is None else text

    def get_inner_element_number(self, element: XmlElement, name: str) -> Union[int, float]:
        """Return the leading integer of a text-only child; empty gives NaN."""
        text = self._get_single_text(element, name)
        if text is None:
            return math.nan
        match = _LEADING_INT_PATTERN.match(text)
        return int(match.group(1)) if match else math.nan

    def get_inner_element_boolean(self, element: XmlElement, name: str) -> bool:
        """Return True if a text-only child reads ``true``; empty gives False."""
        text = self._get_single_text(element, name)
        if text is None:
            return False
        return text.strip().lower() == "true"


__all__ = [
    "ATTRIBUTES_KEY",
    "ATTRIBUTE_PREFIX",
    "TEXT_KEY",
    "XmlAccess",
    "XmlElement",
]
