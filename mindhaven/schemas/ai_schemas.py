# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.


from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Dict


class AssessmentRequest(BaseModel):
    answers: Optional[Dict[str, float]] = None


class CBTThoughtRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    negative_thought: Optional[str] = Field(None, alias="negativeThought")


class ChatbotQueryRequest(BaseModel):
    query: Optional[str] = None
