"""Import batches and student records exported from the browser-storage dashboard."""

import argparse
import logging
import os
import sys
from pathlib import Path

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from institute_admin.config import settings  # noqa: E402
from institute_admin.database import Base, SessionLocal, engine  # noqa: E402
from institute_admin.errors import DecodeError  # noqa: E402
import institute_admin.models  # noqa: E402,F401
from institute_admin.services.legacy_import import import_legacy  # noqa: E402

logger = logging.getLogger("import_local_storage")


def _read(path):
    return Path(path).read_text(encoding="utf-8") if path else ""


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--batches", help="JSON file with the exported batch list")
    parser.add_argument("--students", help="JSON file with the exported student records")
    args = parser.parse_args(argv)
    if not args.batches and not args.students:
        parser.error("nothing to import: pass --batches and/or --students")

    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        summary = import_legacy(db, _read(args.batches), _read(args.students))
    except DecodeError as exc:
        logger.error("import aborted: %s", exc.detail)
        return 1
    finally:
        db.close()
    print(f"done. {summary}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
