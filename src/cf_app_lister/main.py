"""cf app lister - Main entry point."""

import sys

import structlog

from cf_app_lister.cli import cli

logger = structlog.get_logger()


def main() -> None:
    """Main entry point."""
    try:
        cli(prog_name="cf-app-lister", obj={})
    except Exception as e:
        logger.exception("cf-app-lister crashed", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
