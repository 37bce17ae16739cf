"""Allow running scopectl as ``python -m scopectl``."""

from scopectl.cli.main import app

app(prog_name="scopectl")
