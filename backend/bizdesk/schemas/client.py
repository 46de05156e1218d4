"""
Client Pydantic schemas for request/response validation.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from bizdesk.models.client import ClientStatus
from bizdesk.schemas.project import ProjectResponse

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+$"


class SocialContacts(BaseModel):
    """Messaging handles stored as JSON on the client row."""
    whatsapp: Optional[str] = None
    linkedin: Optional[str] = None


class ClientBase(BaseModel):
    """Base client schema with common fields."""
    company_name: str = Field(..., min_length=1, max_length=255)
    contact_person: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = None
    country: Optional[str] = Field(None, max_length=100)
    social_contacts: Optional[SocialContacts] = None
    status: ClientStatus = ClientStatus.ACTIVE


class ClientCreate(ClientBase):
    """Schema for creating a client."""
    pass


class ClientUpdate(BaseModel):
    """Schema for updating a client (all fields optional)."""
    company_name: Optional[str] = Field(None, min_length=1, max_length=255)
    contact_person: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[str] = Field(None, max_length=255, pattern=EMAIL_PATTERN)
    phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = None
    country: Optional[str] = Field(None, max_length=100)
    social_contacts: Optional[SocialContacts] = None
    status: Optional[ClientStatus] = None


class ClientResponse(ClientBase):
    """Schema for client response."""
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ClientWithProjectsResponse(ClientResponse):
    """Client together with the projects that reference it."""
    projects: List[ProjectResponse] = []


class DashboardStatsResponse(BaseModel):
    """Headline counts for the dashboard."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_clients: int
    active_clients: int
    total_projects: int
    active_projects: int
