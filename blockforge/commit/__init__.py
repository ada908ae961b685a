from .core import CommitSummary, commit_files, resolve_target

__all__ = ["commit_files", "CommitSummary", "resolve_target"]
