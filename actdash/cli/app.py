"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .dashboard import dashboard_command

app = typer.Typer(
    name="actdash",
    help="GitHub Actions dashboard for the terminal",
    add_completion=False,
)

app.command("dashboard")(dashboard_command)


if __name__ == "__main__":
    app()
