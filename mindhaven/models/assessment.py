# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.


from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from datetime import datetime
from mindhaven.models.database import Base


class AssessmentRecord(Base):
    __tablename__ = "assessment_records"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    score = Column(String, nullable=False)  # average answer, one decimal
    score_level = Column(String, nullable=False)  # low / moderate / high
    analysis = Column(Text, nullable=False)
    recommendations = Column(JSON, default=list)

    date = Column(DateTime, default=datetime.utcnow, index=True)

    user = relationship("User", back_populates="assessments")
