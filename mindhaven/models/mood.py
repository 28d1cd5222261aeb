# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.


from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from mindhaven.models.database import Base
from mindhaven.utils.encryption import EncryptedText  # 🔐 Encryption utils

MIN_INTENSITY = 1
MAX_INTENSITY = 10


class MoodEntry(Base):
    __tablename__ = "mood_entries"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    mood = Column(String, nullable=False)
    intensity = Column(Integer, nullable=False)  # 1-10
    note = Column(EncryptedText, nullable=True)  # 🔐 Encrypted

    date = Column(DateTime, default=datetime.utcnow, index=True)

    user = relationship("User", back_populates="mood_entries")

    def __repr__(self):
        return f"<MoodEntry id={self.id} mood={self.mood} intensity={self.intensity}>"
