# creates database schema
import argparse

from taskboard.config import Settings
from taskboard.db import Database
from taskboard.utils.log import configure_logging


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create the taskboard tables and task id sequence.")
    parser.add_argument("--drop", action="store_true", help="drop existing tables first")
    args = parser.parse_args(argv)

    settings = Settings()
    logger = configure_logging(settings)

    database = Database(settings)
    try:
        database.create_all(drop=args.drop)
    finally:
        database.dispose()
    logger.info("Schema created on %s", database.dialect)


if __name__ == "__main__":
    main()
