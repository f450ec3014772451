"""Allow `python -m actdash`."""

from .cli import app

app()
