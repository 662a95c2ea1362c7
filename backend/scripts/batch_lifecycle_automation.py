"""Run one pass of the batch lifecycle automation. Meant to be invoked daily by cron."""

import argparse
import logging
import os
import sys
from datetime import date

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from institute_admin.config import settings  # noqa: E402
from institute_admin.database import Base, SessionLocal, engine  # noqa: E402
import institute_admin.models  # noqa: E402,F401
from institute_admin.services import batch_service  # noqa: E402

logger = logging.getLogger("batch_lifecycle_automation")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Complete expired batches and send ending-soon warnings.")
    parser.add_argument("--today", type=date.fromisoformat, default=None, help="Override the current date (YYYY-MM-DD)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    Base.metadata.create_all(bind=engine)

    logger.info("[batch-lifecycle] running daily automation")
    db = SessionLocal()
    try:
        summary = batch_service.run_batch_lifecycle_automation(db, args.today)
    finally:
        db.close()
    logger.info("[batch-lifecycle] automation complete: %s", summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
