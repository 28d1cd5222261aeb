# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
from datetime import datetime, timedelta
from typing import Dict

from mindhaven.utils.ai_engine import generate_ai_reply
from mindhaven.utils.prompt_templates import chatbot_prompt

logger = logging.getLogger(__name__)

ACTION_MARKERS = ("ADD_ACTIVITY:", "ADD_MOOD:", "ADD_JOURNAL:")

FALLBACK_REPLY = (
    "I'm here to help you navigate the MindHaven app and support your mental "
    "wellness journey. How can I assist you today?"
)

# Per-user conversation bookkeeping, process-local and unsynchronized
conversation_state: Dict[str, dict] = {}
last_touched: Dict[str, datetime] = {}


def initial_state() -> dict:
    return {"currentAction": None, "collectedData": {}}


def get_state(user_id: str) -> dict:
    if user_id not in conversation_state:
        conversation_state[user_id] = initial_state()
    return conversation_state[user_id]


def process_chatbot_query(query: str, user_id: str) -> dict:
    """
    Forwards one user query to the model together with the user's conversation state.

    A reply carrying one of the ADD_* markers means the guided flow finished, so the
    state goes back to its initial value. The marker text is returned untouched for
    the client to act on.
    """
    try:
        state = get_state(user_id)
        last_touched[user_id] = datetime.utcnow()

        generated_text = generate_ai_reply(chatbot_prompt(state, query))

        if any(marker in generated_text for marker in ACTION_MARKERS):
            conversation_state[user_id] = initial_state()

        return {"response": generated_text.strip(), "success": True}

    except Exception:
        logger.exception("❌ Chatbot query failed for user %s", user_id)
        return {"response": FALLBACK_REPLY, "success": False}


def prune_idle_states(max_idle: timedelta) -> int:
    """Drops conversation states nobody touched within max_idle. Returns how many went."""
    cutoff = datetime.utcnow() - max_idle
    stale = [uid for uid, seen in list(last_touched.items()) if seen < cutoff]
    for uid in stale:
        conversation_state.pop(uid, None)
        last_touched.pop(uid, None)
    return len(stale)


def reset_all_states():
    conversation_state.clear()
    last_touched.clear()
