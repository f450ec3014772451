"""Dashboard command implementation."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import Config, parse_lookback
from ..errors import DashboardError
from ..ingestion import GhClient, split_repo_names
from ..pipeline import DashboardCollector, err_console
from ..render import print_dashboard

console = Console()


def dashboard_command(
    selector: Optional[str] = typer.Argument(
        None,
        help="Organization or user whose repositories to report on",
        show_default=False,
    ),
    repos: Optional[List[str]] = typer.Option(
        None,
        "--repos",
        "-r",
        help="One or more repository names from the provided org or user",
    ),
    last: Optional[str] = typer.Option(
        None,
        "--last",
        "-l",
        help="What period of time to cover in hours (eg 1h) or days (eg 30d). Default: 30d",
    ),
    jobs: Optional[int] = typer.Option(
        None,
        "--jobs",
        "-j",
        help="Workflows fetched concurrently per repository",
        min=1,
    ),
    width: Optional[int] = typer.Option(
        None,
        "--width",
        "-w",
        help="Terminal width to lay cards out for. Default: detected",
        min=1,
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print every gh call"),
) -> None:
    """Show recent GitHub Actions health for an organization or user."""
    try:
        if not selector:
            raise typer.BadParameter("need exactly one argument, either an organization or user name")

        config = Config(config_path).config

        # Command line flags win over the config file
        updates = {}
        if jobs is not None:
            updates["max_concurrent"] = jobs
        if width is not None:
            updates["width"] = width
        settings = config.dashboard.model_copy(update=updates)

        window = parse_lookback(last or settings.default_last)

        client = GhClient(
            binary=config.gh.binary,
            cache_ttl=config.gh.cache_ttl,
            console=err_console if verbose else None,
        )
        collector = DashboardCollector(client, settings, window, console=err_console)
        report = collector.collect_sync(selector, split_repo_names(repos or []))

    except typer.BadParameter as e:
        err_console.print(f"[red]failed to parse arguments: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except DashboardError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Interrupted by user[/yellow]")
        raise typer.Exit(1)

    print_dashboard(report, console, settings, config.theme, settings.width or console.width)
