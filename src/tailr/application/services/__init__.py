"""Application services."""

from .tail_service import FileOutcome, OutcomeKind, TailRequest, TailService, format_header

__all__ = ["FileOutcome", "OutcomeKind", "TailRequest", "TailService", "format_header"]
