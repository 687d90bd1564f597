# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Color contrast accessibility checks.

This module provides checks for proper color contrast between text and background.
"""

from typing import Optional

from html_accessibility_checker.audit.base_check import AccessibilityCheck
from html_accessibility_checker.audit.contrast import (
    UnresolvableColorError,
    contrast_ratio,
)
from html_accessibility_checker.audit.document import Element
from html_accessibility_checker.audit.standards import MIN_CONTRAST_RATIO, IssueKind
from html_accessibility_checker.utils.logging_helper import setup_logger

logger = setup_logger(__name__)

DEFAULT_BACKGROUND = "white"


class ColorContrastCheck(AccessibilityCheck):
    """Check for proper color contrast (WCAG 1.4.3)."""

    def check(self) -> None:
        """
        Check if text elements have sufficient color contrast with their background.

        Only inline declared colors are considered. Elements without a
        declared text color, or with a color that cannot be resolved, are
        counted but not evaluated.

        Issues:
            - low_contrast: When the contrast ratio is below 4.5:1
        """
        for element in self.find_elements("p", "span", "div"):
            self.count_check()

            text_color = self._get_text_color(element)
            if not text_color:
                continue
            bg_color = self._get_background_color(element)

            try:
                ratio = contrast_ratio(text_color, bg_color)
            except UnresolvableColorError as e:
                logger.debug("Skipping contrast check on <%s>: %s", element.name, e)
                continue

            if ratio < MIN_CONTRAST_RATIO:
                logger.debug(
                    "Insufficient color contrast: %.2f:1 (%s on %s)",
                    ratio,
                    text_color,
                    bg_color,
                )
                self.add_issue(IssueKind.LOW_CONTRAST, element)

    def _get_text_color(self, element: Element) -> Optional[str]:
        """Get the inline declared text color of an element."""
        return element.declared_style("color")

    def _get_background_color(self, element: Element) -> str:
        """
        Get the inline declared background color of an element.

        Only ``background-color`` is read; white is assumed when it is not
        declared, whatever the ``background`` shorthand holds.
        """
        return element.declared_style("background-color") or DEFAULT_BACKGROUND
