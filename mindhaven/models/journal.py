# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindHaven project.
# Licensed under the MIT License - see the LICENSE file for details.


from sqlalchemy import Column, Integer, String, DateTime, Boolean, ForeignKey, JSON
from sqlalchemy.orm import relationship
from datetime import datetime
from mindhaven.models.database import Base
from mindhaven.utils.encryption import EncryptedText  # 🔐 Encryption utils


class JournalEntry(Base):
    __tablename__ = "journal_entries"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    title = Column(String, default="Untitled")
    content = Column(EncryptedText, nullable=False)  # 🔐 Encrypted
    mood = Column(String, nullable=False, default="neutral")
    tags = Column(JSON, default=list)
    is_shared = Column(Boolean, default=False)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, nullable=True)

    user = relationship("User", back_populates="journal_entries")
