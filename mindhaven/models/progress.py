# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.


from sqlalchemy import Column, Integer, Float, ForeignKey, JSON
from sqlalchemy.orm import relationship
from mindhaven.models.database import Base

WEEK_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def empty_week():
    return [0] * len(WEEK_LABELS)


class Progress(Base):
    __tablename__ = "progress"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True)

    weekly_average = Column(Float, default=0)
    streak = Column(Integer, default=1)
    activities_completed = Column(Integer, default=0)

    # ✅ Fixed 7-slot charts, Monday first
    mood_data = Column(JSON, default=empty_week)
    activity_data = Column(JSON, default=empty_week)

    achievements = Column(JSON, default=list)  # [{id, title, description, date}]
    completed_challenges = Column(JSON, default=list)  # ISO dates

    user = relationship("User", back_populates="progress")

    def __repr__(self):
        return f"<Progress user_id={self.user_id} streak={self.streak} activities={self.activities_completed}>"
