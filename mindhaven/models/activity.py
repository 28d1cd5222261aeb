# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.


from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from mindhaven.models.database import Base


class Activity(Base):
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    type = Column(String, nullable=False)  # e.g. meditation, breathing, exercise
    duration = Column(Integer, nullable=False)  # minutes
    completed = Column(Boolean, default=False)

    date = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=True)

    user = relationship("User", back_populates="activities")

    def __repr__(self):
        return f"<Activity id={self.id} type={self.type} completed={self.completed}>"
