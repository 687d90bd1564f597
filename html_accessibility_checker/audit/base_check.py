# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Base classes for accessibility checks.

This module provides the foundation for all accessibility checks in the system.
"""

from typing import Callable, List

from html_accessibility_checker.audit.document import Element, HTMLDocument
from html_accessibility_checker.audit.standards import IssueKind
from html_accessibility_checker.utils.logging_helper import setup_logger

# Set up module-level logger
logger = setup_logger(__name__)


class AccessibilityCheck:
    """
    Base class for all accessibility checks.

    A check inspects elements of the document, reports every inspected
    element through ``count_check`` and every failing element through
    ``add_issue``.
    """

    def __init__(
        self,
        document: HTMLDocument,
        add_issue_callback: Callable[[IssueKind, Element], None],
        count_check_callback: Callable[[], None],
    ):
        """
        Initialize the accessibility check.

        Args:
            document: Parsed HTML document
            add_issue_callback: Function to call to record a failed check
            count_check_callback: Function to call once per inspected element
        """
        self.document = document
        self.add_issue = add_issue_callback
        self.count_check = count_check_callback

    def check(self) -> None:
        """
        Perform the accessibility check.

        This method must be implemented by all subclasses.
        """
        raise NotImplementedError("Subclasses must implement check()")

    def find_elements(self, *tag_names: str) -> List[Element]:
        """
        Find elements with any of the given tag names.

        Args:
            tag_names: Tag names to match

        Returns:
            List of matching elements in document order
        """
        return self.document.elements_by_tag(tag_names)

    def get_element_text(self, element: Element) -> str:
        """
        Get the text content of an element with surrounding whitespace removed.

        Args:
            element: Element to read

        Returns:
            Text content of the element
        """
        return element.text.strip()
