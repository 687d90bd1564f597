# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0



"""
Accessibility checks package.

This package contains all the specific accessibility checks that can be performed.
"""

from html_accessibility_checker.audit.checks.image_checks import AltTextCheck
from html_accessibility_checker.audit.checks.heading_checks import HeadingHierarchyCheck
from html_accessibility_checker.audit.checks.link_checks import EmptyLinkCheck
from html_accessibility_checker.audit.checks.form_checks import FormLabelCheck
from html_accessibility_checker.audit.checks.color_contrast_checks import ColorContrastCheck
from html_accessibility_checker.audit.checks.aria_checks import InteractiveRoleCheck

# Checks run in this order; it determines the order of issues in the report
CHECK_SEQUENCE = (
    AltTextCheck,
    HeadingHierarchyCheck,
    EmptyLinkCheck,
    FormLabelCheck,
    ColorContrastCheck,
    InteractiveRoleCheck,
)

__all__ = [
    "AltTextCheck",
    "HeadingHierarchyCheck",
    "EmptyLinkCheck",
    "FormLabelCheck",
    "ColorContrastCheck",
    "InteractiveRoleCheck",
    "CHECK_SEQUENCE",
]
