# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.


from .user import User
from .journal import JournalEntry
from .mood import MoodEntry
from .activity import Activity
from .progress import Progress
from .assessment import AssessmentRecord
