# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0


"""
ARIA semantics accessibility checks.
"""

from html_accessibility_checker.audit.base_check import AccessibilityCheck
from html_accessibility_checker.audit.standards import IssueKind


class InteractiveRoleCheck(AccessibilityCheck):
    """Check that clickable generic elements declare a role (WCAG 4.1.2)."""

    def check(self) -> None:
        """
        Check if elements with a click handler have a role attribute.

        A blank role declares nothing and counts as missing, the same way
        a blank aria-label does for links.

        Issues:
            - missing_aria_role: When a div, span or button has an onclick
              attribute but no non-blank role attribute
        """
        for element in self.find_elements("div", "span", "button"):
            self.count_check()
            role = (element.get_attribute("role") or "").strip()
            if element.has_attribute("onclick") and not role:
                self.add_issue(IssueKind.MISSING_ARIA_ROLE, element)
