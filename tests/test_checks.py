"""
Tests for the individual accessibility checks.
"""

import pytest

from html_accessibility_checker.audit.checks import (
    CHECK_SEQUENCE,
    AltTextCheck,
    ColorContrastCheck,
    EmptyLinkCheck,
    FormLabelCheck,
    HeadingHierarchyCheck,
    InteractiveRoleCheck,
)
from html_accessibility_checker.audit.document import parse_html
from html_accessibility_checker.audit.standards import IssueKind


class CheckRun:
    """Collects what a single check reports."""

    def __init__(self, check_class, html):
        self.issues = []
        self.total = 0
        check_class(parse_html(html), self._add_issue, self._count).check()

    def _add_issue(self, kind, element):
        self.issues.append((kind, element))

    def _count(self):
        self.total += 1

    @property
    def kinds(self):
        return [kind for kind, _ in self.issues]

    @property
    def elements(self):
        return [element for _, element in self.issues]


def test_check_sequence_order():
    assert CHECK_SEQUENCE == (
        AltTextCheck,
        HeadingHierarchyCheck,
        EmptyLinkCheck,
        FormLabelCheck,
        ColorContrastCheck,
        InteractiveRoleCheck,
    )


class TestAltTextCheck:
    def test_missing_alt(self):
        run = CheckRun(AltTextCheck, '<img src="a.png"><img src="b.png" alt="B">')

        assert run.total == 2
        assert run.kinds == [IssueKind.MISSING_ALT]
        assert run.elements[0].get_attribute("src") == "a.png"

    def test_empty_alt_passes(self):
        run = CheckRun(AltTextCheck, '<img src="spacer.gif" alt="">')

        assert run.total == 1
        assert run.issues == []

    def test_no_images(self):
        run = CheckRun(AltTextCheck, "<p>text</p>")

        assert run.total == 0


class TestHeadingHierarchyCheck:
    def test_skipped_level(self):
        run = CheckRun(HeadingHierarchyCheck, "<h1>A</h1><h3>B</h3>")

        assert run.total == 2
        assert run.kinds == [IssueKind.SKIPPED_HEADING]
        assert run.elements[0].name == "h3"

    def test_sequential_levels_pass(self):
        run = CheckRun(HeadingHierarchyCheck, "<h1>A</h1><h2>B</h2><h3>C</h3>")

        assert run.total == 3
        assert run.issues == []

    def test_first_heading_never_fails(self):
        run = CheckRun(HeadingHierarchyCheck, "<h3>Alone</h3>")

        assert run.total == 1
        assert run.issues == []

    def test_going_up_is_allowed(self):
        run = CheckRun(HeadingHierarchyCheck, "<h1>A</h1><h2>B</h2><h3>C</h3><h1>D</h1><h2>E</h2>")

        assert run.issues == []

    def test_compares_with_previous_heading_only(self):
        # h4 follows h2 (skip), then h5 follows h4 (fine)
        run = CheckRun(HeadingHierarchyCheck, "<h1>A</h1><h2>B</h2><h4>C</h4><h5>D</h5><h6>E</h6>")

        assert [element.name for element in run.elements] == ["h4"]

    def test_nested_headings_in_document_order(self):
        run = CheckRun(
            HeadingHierarchyCheck,
            "<section><h1>A</h1><div><h2>B</h2></div></section><h4>C</h4>",
        )

        assert run.total == 3
        assert [element.name for element in run.elements] == ["h4"]


class TestEmptyLinkCheck:
    def test_empty_link(self):
        run = CheckRun(EmptyLinkCheck, '<a href="/x"></a><a href="/y">  </a>')

        assert run.total == 2
        assert run.kinds == [IssueKind.EMPTY_LINK, IssueKind.EMPTY_LINK]

    def test_text_passes(self):
        run = CheckRun(EmptyLinkCheck, '<a href="/x"><span>Home</span></a>')

        assert run.issues == []

    def test_aria_label_passes(self):
        run = CheckRun(EmptyLinkCheck, '<a href="/x" aria-label="Home"><img src="h.png" alt=""></a>')

        assert run.total == 1
        assert run.issues == []

    def test_blank_aria_label_fails(self):
        run = CheckRun(EmptyLinkCheck, '<a href="/x" aria-label="  "></a>')

        assert run.kinds == [IssueKind.EMPTY_LINK]


class TestFormLabelCheck:
    def test_input_without_label(self):
        run = CheckRun(FormLabelCheck, '<input type="text" id="name">')

        assert run.total == 1
        assert run.kinds == [IssueKind.MISSING_FORM_LABEL]

    def test_label_before_input(self):
        run = CheckRun(FormLabelCheck, '<label for="name">Name</label><input type="text" id="name">')

        assert run.total == 1
        assert run.issues == []

    def test_label_after_input(self):
        run = CheckRun(FormLabelCheck, '<input id="email"><p><label for="email">Email</label></p>')

        assert run.issues == []

    def test_input_without_id(self):
        run = CheckRun(FormLabelCheck, '<label>Name <input type="text"></label>')

        assert run.kinds == [IssueKind.MISSING_FORM_LABEL]

    def test_empty_id(self):
        run = CheckRun(FormLabelCheck, '<label for="">Name</label><input id="">')

        assert run.kinds == [IssueKind.MISSING_FORM_LABEL]

    @pytest.mark.parametrize("input_type", ["hidden", "HIDDEN", " Hidden "])
    def test_hidden_input_is_not_inspected(self, input_type):
        run = CheckRun(FormLabelCheck, f'<input type="{input_type}" name="token">')

        assert run.total == 0
        assert run.issues == []

    def test_label_for_other_id(self):
        run = CheckRun(FormLabelCheck, '<label for="other">Other</label><input id="name">')

        assert run.kinds == [IssueKind.MISSING_FORM_LABEL]


class TestColorContrastCheck:
    def test_low_contrast(self):
        run = CheckRun(ColorContrastCheck, '<p style="color: #777777; background-color: #808080">x</p>')

        assert run.total == 1
        assert run.kinds == [IssueKind.LOW_CONTRAST]

    def test_sufficient_contrast(self):
        run = CheckRun(ColorContrastCheck, '<p style="color: black; background-color: white">x</p>')

        assert run.total == 1
        assert run.issues == []

    def test_background_defaults_to_white(self):
        run = CheckRun(ColorContrastCheck, '<span style="color: #eeeeee">x</span>')

        assert run.kinds == [IssueKind.LOW_CONTRAST]

    def test_background_shorthand_is_not_read(self):
        run = CheckRun(ColorContrastCheck, '<div style="color: white; background: black">x</div>')

        assert run.kinds == [IssueKind.LOW_CONTRAST]

    def test_image_background_is_measured_against_white(self):
        run = CheckRun(ColorContrastCheck, '<p style="color: #777777; background: url(bg.png)">y</p>')

        assert run.total == 1
        assert run.kinds == [IssueKind.LOW_CONTRAST]

    def test_no_text_color_is_counted_but_skipped(self):
        run = CheckRun(ColorContrastCheck, '<p style="background-color: #808080">x</p><div>y</div>')

        assert run.total == 2
        assert run.issues == []

    def test_unresolvable_color_is_skipped(self):
        run = CheckRun(
            ColorContrastCheck,
            '<p style="color: var(--text)">x</p>'
            '<p style="color: #777; background-color: url(bg.png)">y</p>',
        )

        assert run.total == 2
        assert run.issues == []

    def test_other_tags_are_not_inspected(self):
        run = CheckRun(ColorContrastCheck, '<h1 style="color: #eeeeee">x</h1>')

        assert run.total == 0


class TestInteractiveRoleCheck:
    def test_clickable_without_role(self):
        run = CheckRun(InteractiveRoleCheck, '<div onclick="go()">Go</div>')

        assert run.total == 1
        assert run.kinds == [IssueKind.MISSING_ARIA_ROLE]

    def test_clickable_with_role(self):
        run = CheckRun(InteractiveRoleCheck, '<span onclick="go()" role="button">Go</span>')

        assert run.issues == []

    def test_button_with_onclick(self):
        run = CheckRun(InteractiveRoleCheck, '<button onclick="go()">Go</button>')

        assert run.kinds == [IssueKind.MISSING_ARIA_ROLE]

    @pytest.mark.parametrize("role", ["", "  "])
    def test_blank_role_fails(self, role):
        run = CheckRun(InteractiveRoleCheck, f'<div onclick="go()" role="{role}">Go</div>')

        assert run.total == 1
        assert run.kinds == [IssueKind.MISSING_ARIA_ROLE]

    def test_elements_without_handler_are_counted(self):
        run = CheckRun(InteractiveRoleCheck, "<div><span>a</span><button>b</button></div>")

        assert run.total == 3
        assert run.issues == []
