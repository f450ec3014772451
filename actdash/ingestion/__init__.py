"""gh CLI access and payload parsing."""

from .discovery import discover_repositories, split_repo_names
from .gh_client import GhClient
from .models import BillablePayload, PlatformTiming, RepositoryPayload, RunPayload, WorkflowPayload

__all__ = [
    "GhClient",
    "BillablePayload",
    "PlatformTiming",
    "RepositoryPayload",
    "RunPayload",
    "WorkflowPayload",
    "discover_repositories",
    "split_repo_names",
]
