# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.

import os
from slowapi import Limiter
from slowapi.util import get_remote_address

if os.getenv("ENV") != "production":
    from dotenv import load_dotenv
    load_dotenv()

AI_RATE_LIMIT = os.getenv("AI_RATE_LIMIT", "20/minute")
RATE_LIMIT_ENABLED = os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"

limiter = Limiter(key_func=get_remote_address, enabled=RATE_LIMIT_ENABLED)
