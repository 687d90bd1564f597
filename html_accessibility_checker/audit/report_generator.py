# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Build and write accessibility audit reports.

This module computes the compliance score from the check counters and writes
reports in JSON or text format.
"""

import json
import os
from typing import Optional, Sequence

from html_accessibility_checker.audit.standards import get_criterion_info, get_rule
from html_accessibility_checker.utils.logging_helper import setup_logger
from html_accessibility_checker.utils.report_models import Issue, Report

logger = setup_logger(__name__)


def calculate_score(total_checks: int, failed_checks: int) -> float:
    """
    Calculate the compliance score.

    A document on which no checks were performed has no evidence of
    non-compliance and scores 100.

    Args:
        total_checks: Number of checks performed
        failed_checks: Number of checks that failed

    Returns:
        Percentage of checks that passed
    """
    if total_checks <= 0:
        return 100.0
    return 100.0 * (total_checks - failed_checks) / total_checks


def build_report(
    total_checks: int, failed_checks: int, issues: Sequence[Issue]
) -> Report:
    """
    Build the report for one analysis.

    Args:
        total_checks: Number of checks performed
        failed_checks: Number of checks that failed
        issues: Issues in the order they were produced

    Returns:
        The report
    """
    return Report(
        score=calculate_score(total_checks, failed_checks),
        total_checks=total_checks,
        failed_checks=failed_checks,
        issues=list(issues),
    )


def generate_text_report(report: Report) -> str:
    """
    Render a report as plain text.

    Args:
        report: The report to render

    Returns:
        Text report
    """
    lines = [
        f"Accessibility score: {report.formatted_score}",
        f"Checks performed: {report.total_checks}, failed: {report.failed_checks}",
    ]

    if not report.issues:
        lines.append("")
        lines.append("No accessibility issues found.")

    for index, issue in enumerate(report.issues, start=1):
        criterion = get_rule(issue.kind).wcag_criterion
        criterion_name = get_criterion_info(criterion).get("name", "")
        lines.append("")
        lines.append(f"{index}. {issue.message} (WCAG {criterion} {criterion_name})")
        lines.append(f"   Element: {issue.element}")
        lines.append(f"   Suggested fix: {issue.fix}")

    return "\n".join(lines) + "\n"


def generate_report(
    report: Report, output_path: Optional[str] = None, report_format: str = "json"
) -> str:
    """
    Serialize a report and optionally save it.

    Args:
        report: The report to serialize
        output_path: Path where the report should be saved, if any
        report_format: Format of the report (json or text)

    Returns:
        The serialized report
    """
    if report_format == "text":
        content = generate_text_report(report)
    else:
        if report_format != "json":
            logger.warning(f"Unknown report format: {report_format}, using JSON")
        content = json.dumps(report.to_dict(), indent=2)

    if output_path:
        output_dir = os.path.dirname(os.path.abspath(output_path))
        os.makedirs(output_dir, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)
        logger.info(f"Generated {report_format} report: {output_path}")

    return content
