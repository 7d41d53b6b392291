#!/usr/bin/env python3
"""Create the configured admin user (ADMIN__USER_ID) if it does not exist.

The application does the same at startup; this script lets a deploy seed
the user right after migrating.
"""

import asyncio
import sys

import logfire

from stampcard.application.usecase.admin import SeedAdminUserUseCase
from stampcard.config import Settings
from stampcard.util.di.container import create_container
from stampcard.util.observability import configure_logfire


async def seed() -> None:
    container = create_container()
    try:
        async with container() as request_container:
            use_case = await request_container.get(SeedAdminUserUseCase)
            result = await use_case.execute()
            logfire.info(
                "Admin user seeded", user_id=result.user_id, is_admin=result.is_admin
            )
    finally:
        await container.close()


def main() -> int:
    """Seed the admin user and log any errors to Logfire."""
    configure_logfire(Settings())

    try:
        asyncio.run(seed())
        return 0
    except Exception as e:
        logfire.error(
            "Admin seeding failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
