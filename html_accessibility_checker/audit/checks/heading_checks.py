# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0


"""
Heading structure accessibility checks.

This module provides checks for proper heading structure.
"""

from html_accessibility_checker.audit.base_check import AccessibilityCheck
from html_accessibility_checker.audit.standards import IssueKind
from html_accessibility_checker.utils.logging_helper import setup_logger

logger = setup_logger(__name__)

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")


class HeadingHierarchyCheck(AccessibilityCheck):
    """Check for proper heading hierarchy (WCAG 1.3.1)."""

    def check(self) -> None:
        """
        Check if heading levels are skipped.

        Headings are visited in document order. A heading may be at most one
        level deeper than the heading before it; going back up any number of
        levels is allowed. The first heading never fails.

        Issues:
            - skipped_heading: When heading levels are skipped (e.g., h1 to h3)
        """
        prev_level = 0

        for heading in self.find_elements(*HEADING_TAGS):
            self.count_check()
            level = int(heading.name[1])
            if prev_level > 0 and level > prev_level + 1:
                logger.debug("Heading level skipped from H%d to H%d", prev_level, level)
                self.add_issue(IssueKind.SKIPPED_HEADING, heading)
            prev_level = level
