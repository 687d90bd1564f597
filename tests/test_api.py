"""
Tests for the public analysis API.
"""

import json

import pytest

from html_accessibility_checker import analyze, analyze_async, audit_html_accessibility
from html_accessibility_checker.api import resolve_options
from html_accessibility_checker.audit.standards import ACCESSIBILITY_RULES, IssueKind
from html_accessibility_checker.remediate.fix_providers import FALLBACK_FIX, StaticFixProvider
from html_accessibility_checker.utils.logging_helper import (
    AccessibilityAuditError,
    ConfigurationError,
    FixGenerationError,
)


def failing_generator(prompt):
    raise FixGenerationError("backend unavailable")


class TestResolveOptions:
    def test_defaults(self):
        options = resolve_options()

        assert options["use_generative_fixes"] is False
        assert options["max_concurrency"] == 4
        assert options["model_id"] == "us.amazon.nova-lite-v1:0"

    def test_runtime_options_win(self):
        options = resolve_options({"use_generative_fixes": True, "max_concurrency": 2})

        assert options["use_generative_fixes"] is True
        assert options["max_concurrency"] == 2

    def test_environment_variable(self, monkeypatch):
        monkeypatch.setenv("HTML_A11Y_AUDIT_USE_GENERATIVE_FIXES", "true")

        assert resolve_options()["use_generative_fixes"] is True

    def test_wrong_type(self):
        with pytest.raises(ConfigurationError):
            resolve_options({"max_concurrency": "many"})


class TestAnalyze:
    def test_static_report(self, sample_html):
        report = analyze(sample_html)

        assert report.to_dict()["score"] == "25.00"
        assert [issue["issue"] for issue in report.to_dict()["issues"]] == [
            rule.message
            for rule in (
                ACCESSIBILITY_RULES[IssueKind.MISSING_ALT],
                ACCESSIBILITY_RULES[IssueKind.SKIPPED_HEADING],
                ACCESSIBILITY_RULES[IssueKind.EMPTY_LINK],
                ACCESSIBILITY_RULES[IssueKind.MISSING_FORM_LABEL],
                ACCESSIBILITY_RULES[IssueKind.LOW_CONTRAST],
                ACCESSIBILITY_RULES[IssueKind.MISSING_ARIA_ROLE],
            )
        ]

    def test_generative_failure_still_reports(self, sample_html):
        report = analyze(
            sample_html,
            options={"use_generative_fixes": True},
            text_generator=failing_generator,
        )

        assert report.formatted_score == "25.00"
        assert len(report.issues) == 6
        assert all(issue.fix == FALLBACK_FIX for issue in report.issues)

    def test_generative_fixes(self):
        report = analyze(
            '<img src="a.png">',
            options={"use_generative_fixes": True},
            text_generator=lambda prompt: "Describe the image in an alt attribute.",
        )

        assert report.issues[0].fix == "Describe the image in an alt attribute."

    def test_supplied_provider_is_used(self):
        report = analyze(
            '<a href="/"></a>',
            options={"use_generative_fixes": True},
            fix_provider=StaticFixProvider(),
        )

        assert report.issues[0].fix == ACCESSIBILITY_RULES[IssueKind.EMPTY_LINK].fix

    def test_clean_document(self):
        html = """
        <h1>Title</h1><h2>Section</h2>
        <img src="a.png" alt="A chart">
        <label for="q">Search</label><input id="q" type="search">
        <a href="/about">About</a>
        <p style="color: #222; background-color: #fff">Readable</p>
        <button onclick="go()" role="button">Go</button>
        """

        assert analyze(html).to_dict() == {"score": "100.00", "issues": []}

    @pytest.mark.asyncio
    async def test_analyze_async(self, sample_html):
        report = await analyze_async(
            sample_html,
            options={"use_generative_fixes": True},
            text_generator=lambda prompt: "fix",
        )

        assert [issue.fix for issue in report.issues] == ["fix"] * 6


class TestAuditHtmlAccessibility:
    def test_audit_file(self, tmp_path, sample_html):
        html_path = tmp_path / "page.html"
        html_path.write_text(sample_html, encoding="utf-8")
        output_path = tmp_path / "report.json"

        report = audit_html_accessibility(str(html_path), output_path=str(output_path))

        assert json.loads(output_path.read_text(encoding="utf-8")) == report.to_dict()

    def test_missing_file(self, tmp_path):
        with pytest.raises(AccessibilityAuditError):
            audit_html_accessibility(str(tmp_path / "missing.html"))

    def test_invalid_utf8(self, tmp_path):
        html_path = tmp_path / "page.html"
        html_path.write_bytes(b"<p>\xff\xfe</p>")

        with pytest.raises(AccessibilityAuditError):
            audit_html_accessibility(str(html_path))
