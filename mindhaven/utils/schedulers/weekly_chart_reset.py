# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
import time

from sqlalchemy.orm import Session
from mindhaven.models.database import SessionLocal
from mindhaven.services.progress_service import reset_weekly_charts

logger = logging.getLogger("scheduler")


def reset_progress_charts():
    """Clears every user's Mon..Sun mood and activity charts at the start of a new week."""
    start = time.time()
    db: Session = SessionLocal()
    try:
        logger.info("🗓️ Resetting weekly progress charts...")
        count = reset_weekly_charts(db)
        logger.info(f"✅ Reset charts for {count} users in {round(time.time() - start, 2)} sec.")
    except Exception as e:
        db.rollback()
        logger.error(f"🛑 Weekly chart reset failed: {e}", exc_info=True)
    finally:
        db.close()
