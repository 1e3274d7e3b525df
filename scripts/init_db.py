#!/usr/bin/env python3
"""
Create the preference and treatment session tables.

    python scripts/init_db.py            # create missing tables
    python scripts/init_db.py --reset    # drop and recreate (wipes all records)
"""

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import logging

from app.config import get_settings
from app.database import engine, init_db

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def main(reset: bool = False):
    settings = get_settings()
    if reset:
        logger.warning(f"Dropping all tracker tables on {settings.database_url}")
    try:
        tables = await init_db(reset=reset)
        logger.info(f"Tables ready on {settings.database_url}: {', '.join(tables)}")
    except Exception as e:
        logger.error(f"Could not prepare {settings.database_url}: {str(e)}")
        raise
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main(reset="--reset" in sys.argv[1:]))
