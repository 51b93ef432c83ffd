# scripts/seed_roster.py
"""
Seed the sample roster (one school, teacher, class and two students).
Run after the tables exist: `alembic upgrade head` or app startup.
"""
import logging

from roster.core.db import create_tables, db_session
from roster.services.seed import seed_sample_roster

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main():
    create_tables()
    with db_session() as db:
        if seed_sample_roster(db):
            logger.info("Sample roster created")
        else:
            logger.info("Sample roster already exists, nothing to do")


if __name__ == "__main__":
    main()
