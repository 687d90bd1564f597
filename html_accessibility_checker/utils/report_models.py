# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Pydantic models for accessibility audit reports.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from html_accessibility_checker.audit.standards import IssueKind


class Finding(BaseModel):
    """A failed check collected before its fix has been resolved."""

    model_config = ConfigDict(frozen=True)

    kind: IssueKind
    element: str


class Issue(BaseModel):
    """Model for a reported accessibility issue."""

    model_config = ConfigDict(frozen=True)

    kind: IssueKind
    message: str
    element: str
    fix: str

    def to_dict(self) -> Dict[str, str]:
        """Serialize the issue in the public report shape."""
        return {"issue": self.message, "element": self.element, "fix": self.fix}


class Report(BaseModel):
    """Model for the accessibility report of one document."""

    model_config = ConfigDict(frozen=True)

    score: float = Field(ge=0, le=100)
    total_checks: int = Field(default=0, ge=0)
    failed_checks: int = Field(default=0, ge=0)
    issues: List[Issue] = Field(default_factory=list)

    @property
    def formatted_score(self) -> str:
        """Score as two-decimal fixed point text."""
        return f"{self.score:.2f}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the report in the public report shape."""
        return {
            "score": self.formatted_score,
            "issues": [issue.to_dict() for issue in self.issues],
        }
