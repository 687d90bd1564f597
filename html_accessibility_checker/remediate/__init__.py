# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Remediation suggestions for accessibility issues.

This module provides the static and generative fix providers and the
concurrent fix resolution used by the auditor.
"""

from html_accessibility_checker.remediate.fix_providers import (
    FALLBACK_FIX,
    FixProvider,
    GenerativeFixProvider,
    StaticFixProvider,
    build_fix_provider,
    resolve_fixes,
)

__all__ = [
    "FALLBACK_FIX",
    "FixProvider",
    "GenerativeFixProvider",
    "StaticFixProvider",
    "build_fix_provider",
    "resolve_fixes",
]
