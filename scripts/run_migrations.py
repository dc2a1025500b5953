#!/usr/bin/env python3
"""Upgrade the database schema to the latest revision.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to a revision
    python scripts/run_migrations.py -1         # step back one revision
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from tymer.config import Settings
from tymer.util.observability import configure_logfire

ROOT = Path(__file__).resolve().parent.parent


def main(argv: list[str]) -> int:
    settings = Settings()
    configure_logfire(settings)

    target = argv[0] if argv else "head"
    alembic_cfg = Config(str(ROOT / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(ROOT / "migrations"))

    with logfire.span("migrations.run", target=target):
        try:
            logfire.info("Running migrations", target=target)
            if target.startswith("-"):
                command.downgrade(alembic_cfg, target)
            else:
                command.upgrade(alembic_cfg, target)
            logfire.info("Migrations completed", target=target)
            return 0
        except Exception as e:
            logfire.error(
                "Migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Let the deploy fail rather than start on a broken schema
            raise


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
