#!/usr/bin/env python3
"""Create the configured admin accounts that are missing from the registry.

Accounts come from ADMINS__SEED_ACCOUNTS. Existing accounts, including
their passwords, are left untouched, so this is safe to run on every deploy.
"""

import asyncio
import sys

import logfire

from forum.config import Settings
from forum.domain.service import AdminService
from forum.util.di.container import create_container
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire


async def seed() -> int:
    """Seed the admin registry.

    Returns:
        Number of accounts created
    """
    container = create_container()
    try:
        settings = await container.get(Settings)
        async with container() as request_container:
            admin_service = await request_container.get(AdminService)
            created = await admin_service.seed(settings.admins.seed_accounts)
    finally:
        await container.close()

    return len(created)


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    if not settings.admins.seed_accounts:
        logfire.warn("No seed accounts configured, nothing to do")
        return 0

    created = asyncio.run(seed())
    logfire.info(
        "Admin seeding finished",
        configured=len(settings.admins.seed_accounts),
        created=created,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
