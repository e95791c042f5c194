"""Data models for the branch cleanup tool."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PullRequest(BaseModel):
    """A merged pull request as reported by `gh pr list --json`."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    number: int
    title: str = ""
    head_branch: str = Field(default="", alias="headRefName")
    merged_at: datetime | None = Field(default=None, alias="mergedAt")
    author: str = ""

    @field_validator("author", mode="before")
    @classmethod
    def _author_login(cls, value: Any) -> str:
        if isinstance(value, dict):
            return str(value.get("login") or "")
        return str(value or "")


class CleanupStatus(str, Enum):
    """How a cleanup run ended."""

    NOTHING_TO_DO = "nothing_to_do"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


@dataclass
class CleanupCandidate:
    """A locally merged branch offered for deletion.

    Attributes:
        branch: Local branch name.
        pull_requests: Merged PRs whose head is this branch.
    """

    branch: str
    pull_requests: list[PullRequest] = field(default_factory=list)

    @property
    def confirmed(self) -> bool:
        """True when a merged PR backs up the local merge."""
        return bool(self.pull_requests)

    @property
    def label(self) -> str:
        if self.confirmed:
            numbers = ", ".join(f"#{pr.number}" for pr in self.pull_requests)
            return f"confirmed (PR {numbers})"
        return "unconfirmed (no PR found - may be direct merge)"


@dataclass
class BranchDeletion:
    """Outcome of deleting one branch."""

    branch: str
    deleted: bool
    error: str | None = None


@dataclass
class CleanupReport:
    """Result of a cleanup run."""

    status: CleanupStatus
    default_branch: str
    candidates: list[CleanupCandidate] = field(default_factory=list)
    deletions: list[BranchDeletion] = field(default_factory=list)

    @property
    def failed(self) -> list[BranchDeletion]:
        return [d for d in self.deletions if not d.deleted]


@dataclass
class BranchCheck:
    """Local and remote status of a single branch."""

    branch: str
    exists_locally: bool
    pull_requests: list[PullRequest] = field(default_factory=list)


@dataclass
class BranchSummary:
    """Snapshot of the repository's branches."""

    current_branch: str
    default_branch: str
    local_branches: list[str]
    recent_pull_requests: list[PullRequest] = field(default_factory=list)


@dataclass
class LocalPRScan:
    """Non-default local branches checked against merged PRs."""

    default_branch: str
    checked_branches: list[str]
    matches: list[CleanupCandidate] = field(default_factory=list)
