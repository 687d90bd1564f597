# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Accessibility audit module for HTML documents.

This module provides functionality for auditing HTML documents for accessibility issues
against WCAG 2.1 accessibility rules.
"""

from html_accessibility_checker.audit.auditor import AccessibilityAuditor
from html_accessibility_checker.audit.report_generator import build_report, generate_report

__all__ = ["AccessibilityAuditor", "build_report", "generate_report"]
