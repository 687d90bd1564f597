# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0


"""
Image accessibility checks.

This module provides checks for proper image accessibility.
"""

from html_accessibility_checker.audit.base_check import AccessibilityCheck
from html_accessibility_checker.audit.standards import IssueKind


class AltTextCheck(AccessibilityCheck):
    """Check for alt attributes on images (WCAG 1.1.1)."""

    def check(self) -> None:
        """
        Check if images have an alt attribute.

        An empty alt attribute marks a decorative image and passes; only a
        missing attribute is reported.

        Issues:
            - missing_alt: When an image has no alt attribute
        """
        for img in self.find_elements("img"):
            self.count_check()
            if not img.has_attribute("alt"):
                self.add_issue(IssueKind.MISSING_ALT, img)
