# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0


"""
Form-related accessibility checks.

This module provides checks for proper form accessibility.
"""

from html_accessibility_checker.audit.base_check import AccessibilityCheck
from html_accessibility_checker.audit.document import Element
from html_accessibility_checker.audit.standards import IssueKind


class FormLabelCheck(AccessibilityCheck):
    """Check for proper form labels (WCAG 1.3.1, 3.3.2)."""

    def check(self) -> None:
        """
        Check if form inputs have associated labels.

        Issues:
            - missing_form_label: When a visible input has no label whose
              ``for`` attribute matches its id
        """
        for input_elem in self.find_elements("input"):
            input_type = (input_elem.get_attribute("type") or "").strip().lower()
            if input_type == "hidden":
                continue

            self.count_check()
            if not self._has_associated_label(input_elem):
                self.add_issue(IssueKind.MISSING_FORM_LABEL, input_elem)

    def _has_associated_label(self, form_control: Element) -> bool:
        """
        Check if a form control has a label anywhere in the document.

        Args:
            form_control: The form control element to check

        Returns:
            True if some label's ``for`` attribute equals the control's id
        """
        control_id = form_control.get_attribute("id")
        if not control_id:
            return False

        matching_label = self.document.find_descendant(
            lambda element: element.name == "label"
            and element.get_attribute("for") == control_id
        )
        return matching_label is not None
