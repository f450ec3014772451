"""Data models for the Actions dashboard."""

from .report import DashboardReport
from .repository import Repository
from .run import COMPLETED, Run
from .workflow import Workflow

__all__ = ["COMPLETED", "DashboardReport", "Repository", "Run", "Workflow"]
