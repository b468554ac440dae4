"""App lister - pages through the Cloud Controller apps endpoint."""

from typing import Iterable

import structlog
from pydantic import ValidationError

from cf_app_lister.apps.errors import MalformedResponse, PaginationLimitExceeded
from cf_app_lister.apps.executor import CommandExecutor
from cf_app_lister.apps.models import AppRecord, FilterMode, Page
from cf_app_lister.apps.schemas import AppsPageSchema

logger = structlog.get_logger()

APPS_PATH = "v2/apps"


def parse_page(payload: str) -> Page:
    """Decode one JSON page returned by the apps endpoint."""
    try:
        schema = AppsPageSchema.model_validate_json(payload)
    except ValidationError as e:
        raise MalformedResponse(f"Invalid apps page: {e}") from e

    records = tuple(
        AppRecord(name=resource.entity.name, state=resource.entity.state)
        for resource in schema.resources
    )
    return Page(records=records, next_path=schema.next_url)


def filter_apps(apps: Iterable[AppRecord], filter_mode: FilterMode) -> list[AppRecord]:
    """Keep the apps matching ``filter_mode``, preserving order."""
    return [app for app in apps if filter_mode.matches(app)]


class AppLister:
    """List applications across every page of the apps endpoint."""

    def __init__(self, executor: CommandExecutor, max_pages: int | None = None):
        self.executor = executor
        self.max_pages = max_pages or None

    async def fetch_all(self) -> list[AppRecord]:
        """Follow ``next_url`` until exhausted and return every app in order."""
        path = APPS_PATH
        apps: list[AppRecord] = []
        page_count = 0

        while True:
            payload = await self.executor.invoke_api(path)
            page = parse_page(payload)
            page_count += 1

            apps.extend(page.records)

            logger.debug(
                "Fetched apps page",
                path=path,
                page=page_count,
                records=len(page.records),
                has_next=page.has_next,
            )

            if not page.has_next:
                break

            if self.max_pages is not None and page_count >= self.max_pages:
                raise PaginationLimitExceeded(self.max_pages, page.next_path)

            path = page.next_path

        logger.info("Fetched apps", pages=page_count, app_count=len(apps))
        return apps

    async def list_apps(self, filter_mode: FilterMode = FilterMode.ALL) -> list[AppRecord]:
        """List apps, keeping only those matching ``filter_mode``."""
        apps = await self.fetch_all()
        return filter_apps(apps, filter_mode)
