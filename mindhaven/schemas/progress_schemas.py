# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.


from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class ProgressUpdateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # True counts one completion, False resets the activity counters
    activity_completed: Optional[bool] = Field(None, alias="activityCompleted")
    challenge_completed: bool = Field(False, alias="challengeCompleted")
