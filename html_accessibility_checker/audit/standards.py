# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
WCAG standards and accessibility rule information.

This module defines the closed set of issue kinds detected by the auditor and
the rules table mapping each kind to its message, static fix and WCAG
criterion. The table is built once at import time and is read-only.
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, NamedTuple

# WCAG AA minimum contrast ratio for normal text
MIN_CONTRAST_RATIO = 4.5


class IssueKind(str, Enum):
    """Enum for detectable accessibility defects."""

    MISSING_ALT = "missing_alt"
    SKIPPED_HEADING = "skipped_heading"
    EMPTY_LINK = "empty_link"
    MISSING_FORM_LABEL = "missing_form_label"
    LOW_CONTRAST = "low_contrast"
    MISSING_ARIA_ROLE = "missing_aria_role"


class RuleInfo(NamedTuple):
    """Static description of an accessibility rule."""

    message: str
    fix: str
    wcag_criterion: str


# WCAG criteria information for the criteria referenced by the rules table
WCAG_CRITERIA: Mapping[str, Dict[str, str]] = MappingProxyType(
    {
        "1.1.1": {
            "name": "Non-text Content",
            "level": "A",
            "description": "All non-text content that is presented to the user has a text alternative that serves the equivalent purpose.",
        },
        "1.3.1": {
            "name": "Info and Relationships",
            "level": "A",
            "description": "Information, structure, and relationships conveyed through presentation can be programmatically determined.",
        },
        "1.4.3": {
            "name": "Contrast (Minimum)",
            "level": "AA",
            "description": "The visual presentation of text and images of text has a contrast ratio of at least 4.5:1.",
        },
        "2.4.4": {
            "name": "Link Purpose (In Context)",
            "level": "A",
            "description": "The purpose of each link can be determined from the link text alone or from the link text together with its context.",
        },
        "4.1.2": {
            "name": "Name, Role, Value",
            "level": "A",
            "description": "For all user interface components, the name and role can be programmatically determined.",
        },
    }
)

ACCESSIBILITY_RULES: Mapping[IssueKind, RuleInfo] = MappingProxyType(
    {
        IssueKind.MISSING_ALT: RuleInfo(
            message="Missing alt attribute on image",
            fix=(
                'Add an alt attribute describing the image, or alt="" if the '
                "image is purely decorative."
            ),
            wcag_criterion="1.1.1",
        ),
        IssueKind.SKIPPED_HEADING: RuleInfo(
            message="Skipped heading level",
            fix=(
                "Use heading levels in sequence: a heading may only be one level "
                "deeper than the heading before it."
            ),
            wcag_criterion="1.3.1",
        ),
        IssueKind.EMPTY_LINK: RuleInfo(
            message="Empty link",
            fix=(
                "Give the link descriptive text content or an aria-label that "
                "states where it goes."
            ),
            wcag_criterion="2.4.4",
        ),
        IssueKind.MISSING_FORM_LABEL: RuleInfo(
            message="Form input missing associated label",
            fix=(
                'Give the input an id and add a <label for="that-id"> element '
                "describing the field."
            ),
            wcag_criterion="1.3.1",
        ),
        IssueKind.LOW_CONTRAST: RuleInfo(
            message="Low contrast text",
            fix=(
                "Adjust the text or background color so the contrast ratio is "
                "at least 4.5:1."
            ),
            wcag_criterion="1.4.3",
        ),
        IssueKind.MISSING_ARIA_ROLE: RuleInfo(
            message="Interactive element missing ARIA role",
            fix=(
                'Add an appropriate role (for example role="button") to the '
                "clickable element, or use a native interactive element."
            ),
            wcag_criterion="4.1.2",
        ),
    }
)


def get_rule(issue_kind: IssueKind) -> RuleInfo:
    """
    Get the rule information for an issue kind.

    Args:
        issue_kind: The issue kind (enum member or its string value)

    Returns:
        The rule's message, static fix and WCAG criterion
    """
    return ACCESSIBILITY_RULES[IssueKind(issue_kind)]


def get_criterion_info(criterion: str) -> Dict[str, str]:
    """
    Get information about a WCAG criterion.

    Args:
        criterion: The criterion ID (e.g., '1.1.1')

    Returns:
        Dictionary with criterion information, empty if unknown
    """
    return dict(WCAG_CRITERIA.get(criterion, {}))
