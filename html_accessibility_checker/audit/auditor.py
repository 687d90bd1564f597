# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
HTML Accessibility Auditor.

This module provides functionality for auditing
HTML content against WCAG 2.1 accessibility rules.

An audit runs in three phases:
1. the checks run in a fixed order and collect findings and check counts;
2. a fix is resolved for every finding through the fix provider;
3. the report is built from the counters and the resolved issues.
"""

import asyncio
from typing import Any, Dict, List, Optional

from html_accessibility_checker.audit.checks import CHECK_SEQUENCE
from html_accessibility_checker.audit.document import Element, HTMLDocument, parse_html
from html_accessibility_checker.audit.report_generator import build_report
from html_accessibility_checker.audit.standards import IssueKind, get_rule
from html_accessibility_checker.remediate.fix_providers import (
    FixProvider,
    StaticFixProvider,
    resolve_fixes,
)
from html_accessibility_checker.utils.logging_helper import log_exception, setup_logger
from html_accessibility_checker.utils.report_models import Finding, Issue, Report

# Set up module-level logger
logger = setup_logger(__name__)


class AccessibilityAuditor:
    """Class for auditing HTML content for WCAG 2.1 accessibility compliance issues."""

    def __init__(
        self,
        html_content: str,
        fix_provider: Optional[FixProvider] = None,
        options: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize the accessibility auditor.

        Args:
            html_content: HTML content string to audit.
            fix_provider: Provider of suggested fixes (static lookup by default).
            options: Auditing options:
                - max_concurrency (int): Maximum concurrent fix provider calls.
                - fix_timeout (float): Seconds allowed for resolving all fixes,
                    None for no limit.
        """
        self.html_content = html_content
        self.fix_provider = fix_provider or StaticFixProvider()
        self.document: Optional[HTMLDocument] = None

        self.options = {
            "max_concurrency": 4,
            "fix_timeout": None,
        }
        if options:
            self.options.update(options)

        self.findings: List[Finding] = []
        self.total_checks = 0
        self.failed_checks = 0

    def load_html(self) -> HTMLDocument:
        """
        Parse the HTML content.

        Returns:
            The parsed document.
        """
        if self.document is None:
            self.document = parse_html(self.html_content)
        return self.document

    def run_checks(self) -> List[Finding]:
        """
        Run every check on the document and collect the failed ones.

        Counters and findings are reset first, so repeated calls give the
        same result.

        Returns:
            Findings in check order, then document order.
        """
        document = self.load_html()
        self.findings = []
        self.total_checks = 0
        self.failed_checks = 0

        for check_class in CHECK_SEQUENCE:
            check = check_class(document, self._add_issue, self._count_check)
            try:
                logger.debug("Running check: %s", check_class.__name__)
                check.check()
                logger.debug(
                    "Completed check: %s, total findings: %d",
                    check_class.__name__,
                    len(self.findings),
                )
            except Exception as e:
                log_exception(logger, e, f"Error running check {check_class.__name__}")

        return list(self.findings)

    def audit(self) -> Report:
        """
        Perform the accessibility audit.

        Fix providers that may block are resolved concurrently on a private
        event loop; use ``audit_async`` from inside a running loop.

        Returns:
            Audit report containing the score and the identified issues.
        """
        findings = self.run_checks()

        if self.fix_provider.suspends and findings:
            fixes = asyncio.run(self._resolve_fixes(findings))
        else:
            fixes = [self.fix_provider.suggest_fix(finding.kind) for finding in findings]

        return self._generate_report(findings, fixes)

    async def audit_async(self) -> Report:
        """
        Perform the accessibility audit inside a running event loop.

        Returns:
            Audit report containing the score and the identified issues.
        """
        findings = self.run_checks()
        fixes = await self._resolve_fixes(findings)
        return self._generate_report(findings, fixes)

    async def _resolve_fixes(self, findings: List[Finding]) -> List[str]:
        return await resolve_fixes(
            [finding.kind for finding in findings],
            self.fix_provider,
            max_concurrency=int(self.options.get("max_concurrency") or 1),
            timeout=self.options.get("fix_timeout"),
        )

    def _generate_report(self, findings: List[Finding], fixes: List[str]) -> Report:
        issues = [
            Issue(
                kind=finding.kind,
                message=get_rule(finding.kind).message,
                element=finding.element,
                fix=fix,
            )
            for finding, fix in zip(findings, fixes)
        ]
        report = build_report(self.total_checks, self.failed_checks, issues)
        logger.info(
            "Audit completed. Checks: %d, failed: %d, score: %s",
            self.total_checks,
            self.failed_checks,
            report.formatted_score,
        )
        return report

    def _count_check(self) -> None:
        self.total_checks += 1

    def _add_issue(self, issue_kind: IssueKind, element: Element) -> None:
        """
        Record a failed check.

        Args:
            issue_kind: Kind of the detected issue.
            element: The element that failed the check.
        """
        logger.debug("Adding issue: %s on <%s>", IssueKind(issue_kind).value, element.name)
        self.failed_checks += 1
        self.findings.append(Finding(kind=issue_kind, element=element.markup))
