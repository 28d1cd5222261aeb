# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.


from pydantic import AliasChoices, BaseModel, Field
from typing import Optional


class MoodRequest(BaseModel):
    mood: Optional[str] = None
    intensity: Optional[int] = None
    # Clients send either "notes" or "note"
    notes: Optional[str] = Field(None, validation_alias=AliasChoices("notes", "note"))
