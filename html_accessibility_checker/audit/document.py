# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
HTML document model used by the accessibility checks.

This module wraps a BeautifulSoup tree in a small query interface so the
checks only depend on element lookup by tag, predicate search, attribute and
inline style access, and text content.
"""

from typing import Callable, Dict, Iterable, List, Optional

from bs4 import BeautifulSoup, Tag

from html_accessibility_checker.utils.logging_helper import log_exception, setup_logger

# Set up module-level logger
logger = setup_logger(__name__)


def parse_style(style: Optional[str]) -> Dict[str, str]:
    """
    Parse an inline style attribute into a property mapping.

    Property names are lowercased; later declarations of the same property
    win. Declarations without a colon or value are ignored.

    Args:
        style: Value of a style attribute

    Returns:
        Dictionary mapping CSS property names to their declared values
    """
    declarations: Dict[str, str] = {}
    if not style:
        return declarations

    for declaration in style.split(";"):
        prop, sep, value = declaration.partition(":")
        prop = prop.strip().lower()
        value = value.strip()
        if sep and prop and value:
            declarations[prop] = value

    return declarations


class Element:
    """A single element of a parsed HTML document."""

    def __init__(self, tag: Tag):
        self._tag = tag

    def __eq__(self, other):
        return isinstance(other, Element) and other._tag is self._tag

    def __hash__(self):
        return id(self._tag)

    def __repr__(self):
        return f"<Element {self.name}>"

    @property
    def name(self) -> str:
        """Lowercase tag name."""
        return (self._tag.name or "").lower()

    def has_attribute(self, name: str) -> bool:
        """Check whether the attribute is present, regardless of its value."""
        return self._tag.has_attr(name.lower())

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get the value of an attribute.

        Args:
            name: Attribute name, matched case-insensitively
            default: Value returned when the attribute is absent

        Returns:
            The attribute value, or default if not present
        """
        value = self._tag.get(name.lower(), default)
        if isinstance(value, list):
            return " ".join(value)
        return value

    @property
    def style(self) -> Dict[str, str]:
        """Inline style declarations of the element."""
        return parse_style(self.get_attribute("style"))

    def declared_style(self, prop: str) -> Optional[str]:
        """Get the inline declared value of a CSS property, if any."""
        return self.style.get(prop.lower())

    @property
    def text(self) -> str:
        """Concatenated text of all descendant text nodes."""
        return self._tag.get_text()

    @property
    def parent(self) -> Optional["Element"]:
        """Parent element, or None at the top of the tree."""
        parent = self._tag.parent
        if parent is None or isinstance(parent, BeautifulSoup):
            return None
        return Element(parent)

    @property
    def children(self) -> List["Element"]:
        """Child elements in document order."""
        return [Element(child) for child in self._tag.children if isinstance(child, Tag)]

    def find_ancestor(self, predicate: Callable[["Element"], bool]) -> Optional["Element"]:
        """Find the closest ancestor matching the predicate."""
        current = self.parent
        while current is not None:
            if predicate(current):
                return current
            current = current.parent
        return None

    @property
    def markup(self) -> str:
        """Serialized markup of the element and its content."""
        return str(self._tag)


class HTMLDocument:
    """A parsed HTML document."""

    def __init__(self, soup: BeautifulSoup):
        self._soup = soup

    def elements_by_tag(self, names: Iterable[str]) -> List[Element]:
        """
        Find all elements whose tag is one of the given names.

        Args:
            names: Tag names to match

        Returns:
            Matching elements in document order
        """
        wanted = [name.lower() for name in names]
        if not wanted:
            return []
        return [Element(tag) for tag in self._soup.find_all(wanted)]

    def find_descendant(self, predicate: Callable[[Element], bool]) -> Optional[Element]:
        """
        Find the first element anywhere in the document matching the predicate.

        Args:
            predicate: Function called with each element in document order

        Returns:
            The first matching element, or None
        """
        tag = self._soup.find(lambda candidate: predicate(Element(candidate)))
        return Element(tag) if tag is not None else None

    @property
    def markup(self) -> str:
        return str(self._soup)


def parse_html(html: Optional[str]) -> HTMLDocument:
    """
    Parse HTML content into a document.

    Parsing is permissive: unclosed and unknown tags and stray text still
    produce a best-effort tree. If the parser rejects the markup entirely the
    failure is logged and an empty document is returned.

    Args:
        html: HTML content string

    Returns:
        The parsed document
    """
    try:
        soup = BeautifulSoup(html or "", "html.parser", multi_valued_attributes=None)
    except Exception as e:
        log_exception(logger, e, "Error parsing HTML, auditing an empty document")
        soup = BeautifulSoup("", "html.parser")
    return HTMLDocument(soup)
