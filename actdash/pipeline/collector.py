"""Collect repository, workflow and run data into a dashboard report."""

import asyncio
from datetime import datetime, timedelta
from typing import List, Optional, Sequence

import pendulum
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from ..config import DashboardConfig
from ..ingestion import GhClient, RepositoryPayload, WorkflowPayload, discover_repositories
from ..models import DashboardReport, Repository, Workflow
from ..summary import summarize_workflow

err_console = Console(stderr=True)


class DashboardCollector:
    """Fetches workflow runs through gh and summarizes them per repository."""

    def __init__(
        self,
        client: GhClient,
        settings: DashboardConfig,
        window: timedelta,
        now: Optional[datetime] = None,
        console: Optional[Console] = None,
    ) -> None:
        """
        Initialize collector.

        Args:
            client: gh client used for every fetch
            settings: Dashboard settings (run cap, sorting, concurrency)
            window: Lookback duration
            now: Reference time, fixed for the whole report
            console: Console used for progress output
        """
        self.client = client
        self.settings = settings
        self.window = window
        self.now = now if now is not None else pendulum.now("UTC")
        self.console = console if console is not None else err_console
        self._progress: Optional[Progress] = None
        self._task = None
        self._total = 0

    async def _fetch_billable(self, run_url: str) -> int:
        billable = await self.client.get_billable(run_url)
        return billable.total_ms

    async def _collect_workflow(self, repo: RepositoryPayload, payload: WorkflowPayload) -> Workflow:
        run_payloads = await self.client.list_runs(payload.url)
        workflow = await summarize_workflow(
            name=payload.name,
            runs=[r.to_run() for r in run_payloads],
            window=self.window,
            private=repo.private,
            fetch_billable=self._fetch_billable,
            now=self.now,
            sort_runs=self.settings.sort_runs,
        )
        if self._progress is not None:
            self._progress.advance(self._task, 1)
        return workflow

    async def collect_repository(self, repo: RepositoryPayload) -> Repository:
        """Summarize every enabled workflow of a repository."""
        workflows = [w for w in await self.client.list_workflows(repo.name) if not w.disabled]

        if self._progress is not None:
            self._total += len(workflows)
            self._progress.update(
                self._task,
                description=f"Fetching runs for {repo.name}",
                total=self._total,
            )

        semaphore = asyncio.Semaphore(self.settings.max_concurrent)

        async def collect_with_semaphore(payload: WorkflowPayload) -> Workflow:
            async with semaphore:
                return await self._collect_workflow(repo, payload)

        # gather keeps discovery order regardless of completion order
        summaries = await asyncio.gather(*(collect_with_semaphore(w) for w in workflows))

        return Repository(name=repo.name, private=repo.private, workflows=list(summaries))

    async def collect(self, selector: str, repo_names: Sequence[str] = ()) -> DashboardReport:
        """Discover repositories and summarize them in order."""
        payloads = await discover_repositories(self.client, selector, repo_names)

        repositories: List[Repository] = []
        for payload in payloads:
            repositories.append(await self.collect_repository(payload))

        return DashboardReport(selector=selector, window=self.window, repositories=repositories)

    def collect_sync(self, selector: str, repo_names: Sequence[str] = ()) -> DashboardReport:
        """Synchronous wrapper for collect, showing a transient spinner."""
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            TimeElapsedColumn(),
            console=self.console,
            transient=True,
        ) as progress:
            self._progress = progress
            self._total = 0
            self._task = progress.add_task(f"Discovering repositories for {selector}", total=0)
            try:
                return asyncio.run(self.collect(selector, repo_names))
            finally:
                self._progress = None
                self._task = None
