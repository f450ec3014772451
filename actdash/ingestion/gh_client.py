"""Async wrapper around the gh CLI."""

import asyncio
import json
import shutil
from typing import Any, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError
from rich.console import Console

from ..errors import FetchError
from .models import BillablePayload, RepositoryPayload, RunPayload, WorkflowPayload

ModelT = TypeVar("ModelT", bound=BaseModel)


class GhClient:
    """Fetch GitHub API data by shelling out to `gh api`."""

    def __init__(
        self,
        binary: str = "gh",
        cache_ttl: str = "60m",
        console: Optional[Console] = None,
    ) -> None:
        """
        Initialize gh client.

        Args:
            binary: gh executable name or path
            cache_ttl: Response cache lifetime passed to `gh api --cache`
            console: When set, every call is echoed here
        """
        self.binary = binary
        self.cache_ttl = cache_ttl
        self.console = console
        self._resolved: Optional[str] = None

    def _resolve_binary(self) -> str:
        """Locate the gh executable on PATH."""
        if self._resolved is None:
            path = shutil.which(self.binary)
            if path is None:
                raise FetchError(f"could not find {self.binary}. Is it installed?")
            self._resolved = path
        return self._resolved

    async def api(self, path: str, jq: Optional[str] = None) -> Any:
        """Run `gh api` for a path and return the decoded JSON."""
        args = ["api", "--cache", self.cache_ttl, path]
        if jq:
            args.extend(["--jq", jq])

        binary = self._resolve_binary()
        if self.console is not None:
            self.console.print(f"[dim]gh {' '.join(args)}[/dim]")

        try:
            proc = await asyncio.create_subprocess_exec(
                binary,
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise FetchError(f"failed to run gh. error: {e}") from e

        stdout, stderr = await proc.communicate()
        if proc.returncode != 0:
            raise FetchError(
                f"failed to run gh. error: exit status {proc.returncode}, "
                f"stderr: {stderr.decode(errors='replace').strip()}"
            )

        try:
            return json.loads(stdout)
        except json.JSONDecodeError as e:
            raise FetchError(f"could not parse json from {path}: {e}") from e

    @staticmethod
    def _parse(model: Type[ModelT], data: Any, path: str) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise FetchError(f"could not parse json from {path}: {e}") from e

    def _parse_list(self, model: Type[ModelT], data: Any, path: str) -> List[ModelT]:
        if not isinstance(data, list):
            raise FetchError(f"could not parse json from {path}: expected a list")
        return [self._parse(model, item, path) for item in data]

    async def get_repo(self, owner: str, name: str) -> RepositoryPayload:
        """Fetch a single repository."""
        path = f"repos/{owner}/{name}"
        return self._parse(RepositoryPayload, await self.api(path), path)

    async def list_repos(self, path: str) -> List[RepositoryPayload]:
        """Fetch a repository listing such as `orgs/<org>/repos`."""
        return self._parse_list(RepositoryPayload, await self.api(path), path)

    async def list_workflows(self, repo_name: str) -> List[WorkflowPayload]:
        """Fetch the workflows defined in a repository."""
        path = f"repos/{repo_name}/actions/workflows"
        return self._parse_list(WorkflowPayload, await self.api(path, jq=".workflows"), path)

    async def list_runs(self, workflow_url: str) -> List[RunPayload]:
        """Fetch the runs of a workflow."""
        path = f"{workflow_url}/runs"
        return self._parse_list(RunPayload, await self.api(path, jq=".workflow_runs"), path)

    async def get_billable(self, run_url: str) -> BillablePayload:
        """Fetch billed time per platform for a run."""
        path = f"{run_url}/timing"
        return self._parse(BillablePayload, await self.api(path, jq=".billable"), path)
