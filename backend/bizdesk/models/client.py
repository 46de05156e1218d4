"""
Client model for customer management.
"""

import enum

from sqlalchemy import Column, Integer, String, Text, JSON
from sqlalchemy.orm import relationship

from bizdesk.db.base import Base, TimestampMixin, enum_column


class ClientStatus(str, enum.Enum):
    """Client status enumeration."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class Client(TimestampMixin, Base):
    """Client model for customer management."""

    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_name = Column(String(255), nullable=False)
    contact_person = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    phone = Column(String(50), nullable=True)
    address = Column(Text, nullable=True)
    country = Column(String(100), nullable=True)
    social_contacts = Column(JSON, nullable=True)  # {"whatsapp": ..., "linkedin": ...}
    status = Column(enum_column(ClientStatus, "client_status"), nullable=False, default=ClientStatus.ACTIVE)

    # Relationships; deletes rely on ON DELETE SET NULL in the database
    projects = relationship("Project", back_populates="client", passive_deletes=True)

    def __repr__(self):
        return f"<Client(id={self.id}, company_name={self.company_name})>"
