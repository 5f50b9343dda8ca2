"""Allow ``python -m level_preview <path>``."""

from .cli.preview_cli import main

raise SystemExit(main(prog="level_preview"))
