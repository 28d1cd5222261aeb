# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
import os
from datetime import timedelta

from mindhaven.services.chatbot_service import prune_idle_states

logger = logging.getLogger("scheduler")

CHAT_STATE_TTL_HOURS = int(os.getenv("CHAT_STATE_TTL_HOURS", "24"))


def clean_idle_chat_states():
    try:
        removed = prune_idle_states(timedelta(hours=CHAT_STATE_TTL_HOURS))
        logger.info(f"🧹 Pruned {removed} idle chatbot conversation states.")
    except Exception as e:
        logger.error(f"🛑 Chat state cleanup failed: {e}", exc_info=True)
