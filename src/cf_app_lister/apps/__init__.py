"""Apps module - Application models, listing and cf CLI execution."""

from cf_app_lister.apps.errors import (
    ListAppsError,
    MalformedResponse,
    PaginationLimitExceeded,
    UpstreamCallFailed,
)
from cf_app_lister.apps.executor import CfCliExecutor, CommandExecutor
from cf_app_lister.apps.lister import AppLister, filter_apps, parse_page
from cf_app_lister.apps.models import AppRecord, FilterMode, Page

__all__ = [
    "AppLister",
    "AppRecord",
    "CfCliExecutor",
    "CommandExecutor",
    "FilterMode",
    "ListAppsError",
    "MalformedResponse",
    "Page",
    "PaginationLimitExceeded",
    "UpstreamCallFailed",
    "filter_apps",
    "parse_page",
]
