import os
import sys
import argparse
import logging

# Add 'backend' folder to Python path
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

from config import settings
from database import SessionLocal, engine, init_db
from utils.sample_data import SAMPLE_COLLECTIONS
from utils.storage import ENTITIES, CollectionStorage

logger = logging.getLogger("populate_db")


def load_all_data(reset: bool = False):
    """Writes the sample collections; existing ones are kept unless reset is set."""
    init_db(engine)
    session = SessionLocal()
    storage = CollectionStorage(session, SAMPLE_COLLECTIONS, prefix=settings.STORAGE_PREFIX)

    try:
        written = []
        for entity in ENTITIES:
            if storage.exists(entity) and not reset:
                continue
            storage.save(entity, SAMPLE_COLLECTIONS[entity])
            written.append(entity)
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()

    if written:
        logger.info("Wrote sample data for: %s", ", ".join(written))
    else:
        logger.info("All collections already present, nothing to do (use --reset to overwrite)")
    return written


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    parser = argparse.ArgumentParser(description="Load sample stock manager data")
    parser.add_argument("--reset", action="store_true", help="overwrite existing collections")
    args = parser.parse_args()
    load_all_data(reset=args.reset)
