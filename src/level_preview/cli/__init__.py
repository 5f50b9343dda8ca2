"""CLI entrypoints for level_preview.

The concrete CLI lives in ``level_preview.cli.preview_cli``. It is not
imported here so that ``python -m level_preview.cli.preview_cli`` does
not trigger a ``RuntimeWarning`` about the module already being loaded.
"""

__all__: list[str] = []
