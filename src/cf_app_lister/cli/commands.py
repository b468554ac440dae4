"""cf app lister command line commands."""

import asyncio

import click
import structlog

from cf_app_lister import __version__
from cf_app_lister.apps import (
    AppLister,
    CfCliExecutor,
    CommandExecutor,
    FilterMode,
    ListAppsError,
)
from cf_app_lister.apps.lister import APPS_PATH
from cf_app_lister.config import Settings, get_settings
from cf_app_lister.utils import setup_logging

logger = structlog.get_logger()


def build_executor(settings: Settings) -> CfCliExecutor:
    """Create the cf CLI executor described by ``settings``."""
    return CfCliExecutor(
        cf_binary=settings.cf_binary,
        cf_home=settings.cf_home,
        command_timeout=settings.command_timeout,
    )


def listing_url(endpoint: str, path: str = APPS_PATH) -> str:
    return f"{endpoint.rstrip('/')}/{path}"


async def run_list_apps(
    executor: CommandExecutor,
    filter_mode: FilterMode,
    max_pages: int | None = None,
) -> None:
    """Print the apps selected by ``filter_mode``, one name per line."""
    endpoint = await executor.get_api_endpoint()

    click.echo(f"Getting apps from {listing_url(endpoint)}...")
    click.echo()

    lister = AppLister(executor, max_pages=max_pages)
    apps = await lister.list_apps(filter_mode)

    for app in apps:
        click.echo(app.name)


@click.group(name="cf-app-lister")
@click.version_option(__version__, prog_name="cf-app-lister")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """List Cloud Foundry applications."""
    ctx.ensure_object(dict)

    settings = ctx.obj.get("settings") or get_settings()
    ctx.obj["settings"] = settings

    setup_logging("DEBUG" if verbose else settings.log_level)


@cli.command("list-apps")
@click.option("--started", is_flag=True, help="Only list started apps.")
@click.option("--stopped", is_flag=True, help="Only list stopped apps.")
@click.pass_context
def list_apps_command(ctx: click.Context, started: bool, stopped: bool) -> None:
    """List all apps in the targeted environment."""
    try:
        filter_mode = FilterMode.from_flags(started=started, stopped=stopped)
    except ValueError as e:
        raise click.UsageError(str(e), ctx=ctx)

    settings: Settings = ctx.obj["settings"]
    executor = ctx.obj.get("executor") or build_executor(settings)

    logger.debug("Listing apps", filter_mode=filter_mode.value)

    try:
        asyncio.run(run_list_apps(executor, filter_mode, max_pages=settings.max_pages))
    except ListAppsError as e:
        logger.error("Listing apps failed", error=str(e), error_type=type(e).__name__)
        click.echo("FAILED")
        click.echo(str(e))
        ctx.exit(1)
