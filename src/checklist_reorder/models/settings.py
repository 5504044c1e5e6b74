"""Persisted host settings."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from checklist_reorder.config import (
    DEFAULT_IGNORE_SUBSTRINGS,
    DEFAULT_INTERVAL_SECONDS,
    DEFAULT_SORTED_STATUSES,
    DEFAULT_SORTED_SUBSTRINGS,
    DEFAULT_STATUSES,
    MAX_INTERVAL_SECONDS,
)
from checklist_reorder.models.checklist import IgnoreScope, ReorderConfig


class DocumentPolicy(str, Enum):
    """Per-document opt-out state."""

    ENABLED = "enabled"
    DISABLED = "disabled"
    UNSPECIFIED = "unspecified"


def parse_comma_list(value: str) -> list[str]:
    """Split comma separated input, trimming items and dropping empty ones."""
    return [item.strip() for item in value.split(",") if item.strip()]


def clamp_interval(seconds: int) -> int:
    return max(0, min(MAX_INTERVAL_SECONDS, seconds))


def document_key(document: str | Path) -> str:
    """Normalize a document path into the key used in ``Settings.documents``."""
    return str(Path(document).expanduser().resolve())


@dataclass
class Settings:
    """Everything the host persists between runs."""

    statuses: list[str] = field(default_factory=lambda: list(DEFAULT_STATUSES))
    sorted_statuses: list[str] = field(default_factory=lambda: list(DEFAULT_SORTED_STATUSES))
    sorted_substrings: list[str] = field(default_factory=lambda: list(DEFAULT_SORTED_SUBSTRINGS))
    ignore_substrings: list[str] = field(default_factory=lambda: list(DEFAULT_IGNORE_SUBSTRINGS))
    ignore_scope: IgnoreScope = IgnoreScope.PRECEDING
    interval_seconds: int = DEFAULT_INTERVAL_SECONDS
    # Resolved document path -> True (enabled) / False (disabled).
    documents: dict[str, bool] = field(default_factory=dict)

    def to_config(self) -> ReorderConfig:
        return ReorderConfig(
            statuses=tuple(self.statuses),
            sorted_statuses=tuple(self.sorted_statuses),
            sorted_substrings=tuple(self.sorted_substrings),
            ignore_substrings=tuple(self.ignore_substrings),
            ignore_scope=self.ignore_scope,
        )

    def document_policy(self, document: str | Path | None) -> DocumentPolicy:
        """Look up the opt-out state of a document."""
        if document is None:
            return DocumentPolicy.UNSPECIFIED
        enabled = self.documents.get(document_key(document))
        if enabled is None:
            return DocumentPolicy.UNSPECIFIED
        return DocumentPolicy.ENABLED if enabled else DocumentPolicy.DISABLED

    def set_document_policy(self, document: str | Path, policy: DocumentPolicy) -> None:
        key = document_key(document)
        if policy is DocumentPolicy.UNSPECIFIED:
            self.documents.pop(key, None)
        else:
            self.documents[key] = policy is DocumentPolicy.ENABLED
