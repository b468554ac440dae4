"""CLI module - click commands for listing apps."""

from cf_app_lister.cli.commands import cli, run_list_apps

__all__ = ["cli", "run_list_apps"]
