# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0


"""
Link-related accessibility checks.

This module provides checks for proper link accessibility.
"""

from html_accessibility_checker.audit.base_check import AccessibilityCheck
from html_accessibility_checker.audit.standards import IssueKind


class EmptyLinkCheck(AccessibilityCheck):
    """Check that links have an accessible name (WCAG 2.4.4)."""

    def check(self) -> None:
        """
        Check if links have text content or an aria-label.

        Issues:
            - empty_link: When a link has neither text nor a non-blank aria-label
        """
        for link in self.find_elements("a"):
            self.count_check()
            text = self.get_element_text(link)
            aria_label = (link.get_attribute("aria-label") or "").strip()
            if not text and not aria_label:
                self.add_issue(IssueKind.EMPTY_LINK, link)
