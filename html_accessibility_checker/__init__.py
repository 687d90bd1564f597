# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
HTML Accessibility Checker Package.

This package audits HTML documents against a fixed set of WCAG 2.1 rules and
reports a compliance score with a suggested fix for every issue.

Main Components:
- HTML accessibility auditing
- Static and generative fix suggestions
- Command-line interface and HTTP upload endpoint
"""

__version__ = "0.1.0"

from html_accessibility_checker.api import (
    analyze,
    analyze_async,
    audit_html_accessibility,
)

__all__ = ["analyze", "analyze_async", "audit_html_accessibility", "__version__"]
