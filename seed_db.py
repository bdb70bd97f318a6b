"""Seed the database with the demo user and sample dashboard data.

Usage:
    python seed_db.py

Safe to run repeatedly: nothing is inserted once the demo user exists.
"""

import logging

from dealflip.database import Base, engine
from dealflip.seeds import seed_database

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    Base.metadata.create_all(bind=engine)
    seed_database()
