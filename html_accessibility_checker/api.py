# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
API for HTML accessibility auditing.

This module provides the public entry points for auditing HTML content and
HTML files for accessibility issues.
"""

from typing import Any, Callable, Dict, Optional

from html_accessibility_checker.audit.auditor import AccessibilityAuditor
from html_accessibility_checker.audit.report_generator import generate_report
from html_accessibility_checker.remediate.fix_providers import (
    FixProvider,
    build_fix_provider,
)
from html_accessibility_checker.utils.config import config_manager, validate_options
from html_accessibility_checker.utils.logging_helper import (
    AccessibilityAuditError,
    setup_logger,
)
from html_accessibility_checker.utils.report_models import Report

# Set up module-level logger
logger = setup_logger(__name__)

OPTION_TYPES = {
    "use_generative_fixes": bool,
    "max_concurrency": int,
    "fix_timeout": (int, float, type(None)),
    "model_id": str,
    "max_tokens": int,
}


def resolve_options(options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Resolve audit and remediation options.

    Runtime options override environment variables, stored configuration and
    defaults of both the ``audit`` and ``remediate`` sections.

    Args:
        options: Runtime options

    Returns:
        The resolved options

    Raises:
        ConfigurationError: If an option has the wrong type
    """
    options = options or {}
    validate_options(options, OPTION_TYPES)

    resolved = config_manager.get_config(section="remediate")
    resolved.update(config_manager.get_config(options, section="audit"))
    return resolved


def _build_auditor(
    html: str,
    config: Dict[str, Any],
    fix_provider: FixProvider,
) -> AccessibilityAuditor:
    return AccessibilityAuditor(
        html,
        fix_provider=fix_provider,
        options={
            "max_concurrency": config.get("max_concurrency", 4),
            "fix_timeout": config.get("fix_timeout"),
        },
    )


def analyze(
    html: str,
    options: Optional[Dict[str, Any]] = None,
    fix_provider: Optional[FixProvider] = None,
    text_generator: Optional[Callable[[str], str]] = None,
) -> Report:
    """
    Audit HTML content for accessibility issues.

    Args:
        html: HTML content to audit.
        options: Audit options, e.g. ``{"use_generative_fixes": False}``.
        fix_provider: Provider to use instead of the one selected by the options.
        text_generator: Text generator for the generative provider instead of Bedrock.

    Returns:
        The accessibility report.
    """
    config = resolve_options(options)
    provider = fix_provider or build_fix_provider(config, text_generator=text_generator)
    try:
        return _build_auditor(html, config, provider).audit()
    finally:
        if fix_provider is None:
            provider.close()


async def analyze_async(
    html: str,
    options: Optional[Dict[str, Any]] = None,
    fix_provider: Optional[FixProvider] = None,
    text_generator: Optional[Callable[[str], str]] = None,
) -> Report:
    """
    Audit HTML content for accessibility issues from a running event loop.

    Args:
        html: HTML content to audit.
        options: Audit options, e.g. ``{"use_generative_fixes": True}``.
        fix_provider: Provider to use instead of the one selected by the options.
        text_generator: Text generator for the generative provider instead of Bedrock.

    Returns:
        The accessibility report.
    """
    config = resolve_options(options)
    provider = fix_provider or build_fix_provider(config, text_generator=text_generator)
    try:
        return await _build_auditor(html, config, provider).audit_async()
    finally:
        if fix_provider is None:
            provider.close()


def audit_html_accessibility(
    html_path: str,
    options: Optional[Dict[str, Any]] = None,
    output_path: Optional[str] = None,
    report_format: str = "json",
) -> Report:
    """
    Audit an HTML file for accessibility issues.

    Args:
        html_path: Path to the HTML file.
        options: Audit options.
        output_path: Path to save the report.
        report_format: Format of the saved report (json or text).

    Returns:
        The accessibility report.

    Raises:
        AccessibilityAuditError: If the file cannot be read as UTF-8 text.
    """
    try:
        with open(html_path, "r", encoding="utf-8") as f:
            html_content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise AccessibilityAuditError(f"Failed to read HTML file {html_path}: {e}") from e

    logger.debug("Auditing HTML file: %s", html_path)
    report = analyze(html_content, options)

    if output_path:
        generate_report(report, output_path=output_path, report_format=report_format)

    return report
