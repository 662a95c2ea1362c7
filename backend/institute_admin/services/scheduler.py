"""
APScheduler configuration.

Runs the batch lifecycle automation once a day. Only started when
``LIFECYCLE_SCHEDULER_ENABLED`` is set; otherwise an external cron is expected
to call ``scripts/batch_lifecycle_automation.py``.
"""
import logging
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger

from institute_admin.config import settings
from institute_admin.database import SessionLocal
from institute_admin.services import batch_service

logger = logging.getLogger(__name__)

LIFECYCLE_JOB_ID = "batch_lifecycle_automation"

scheduler = BackgroundScheduler()


def run_daily_lifecycle():
    """Daily job: complete expired batches and send ending-soon warnings."""
    logger.info("[batch-lifecycle] running daily automation")
    db = SessionLocal()
    try:
        summary = batch_service.run_batch_lifecycle_automation(db)
        logger.info(
            "[batch-lifecycle] automation complete: %s checked, %s completed, %s student(s) archived, %s warning(s)",
            summary["batches_checked"],
            summary["batches_completed"],
            summary["students_completed"],
            summary["warnings_sent"],
        )
    except Exception as exc:
        # Keep the scheduler thread alive; the next run reconciles whatever was missed
        logger.error("[batch-lifecycle] automation failed: %s", exc, exc_info=True)
    finally:
        db.close()


def configure_scheduler():
    scheduler.add_job(
        run_daily_lifecycle,
        trigger=CronTrigger(hour=settings.LIFECYCLE_CRON_HOUR, minute=settings.LIFECYCLE_CRON_MINUTE),
        id=LIFECYCLE_JOB_ID,
        name="Batch Lifecycle Automation",
        replace_existing=True,
        coalesce=True,
        max_instances=1,
    )
    logger.info(
        "Scheduler configured: lifecycle automation daily at %02d:%02d",
        settings.LIFECYCLE_CRON_HOUR,
        settings.LIFECYCLE_CRON_MINUTE,
    )


def start_scheduler():
    configure_scheduler()
    scheduler.start()
    logger.info("Scheduler started")


def stop_scheduler():
    if scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("Scheduler stopped")
