# bookit/schemas.py

from datetime import datetime, date as Date, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    # stored and sent with camelCase keys (ownerId, createdAt, ...)
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def dump(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class UserRole(str, Enum):
    owner = "owner"
    user = "user"


class BookingStatus(str, Enum):
    confirmed = "confirmed"
    cancelled = "cancelled"


# ---- stored records ----

class User(CamelModel):
    id: str
    name: str
    email: str
    password: str  # plaintext, never leaves the local store
    role: UserRole
    created_at: datetime = Field(default_factory=utcnow)


class PublicUser(CamelModel):
    id: str
    name: str
    email: str
    role: UserRole


class Service(CamelModel):
    id: str
    owner_id: str
    owner_name: Optional[str] = None
    name: str
    description: str
    duration: int = Field(ge=1)  # minutes
    price: float = Field(ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: Optional[datetime] = None


class Booking(CamelModel):
    id: str
    service_id: str
    user_id: str
    user_name: str
    user_email: str
    date: Date
    time: str
    status: BookingStatus = BookingStatus.confirmed
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: Optional[datetime] = None


class AuthSession(CamelModel):
    user: PublicUser
    token: str


# ---- token endpoint ----

class SignupRequest(CamelModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
    role: UserRole


class LoginRequest(CamelModel):
    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    role: UserRole


class AuthResponse(CamelModel):
    token: str
    user: PublicUser
    message: str


class ServiceRequest(CamelModel):
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    duration: int = Field(ge=1)
    price: float = Field(ge=0)


class BookingRequest(CamelModel):
    service_id: str = Field(min_length=1)
    date: Date
    time: str = Field(min_length=1)


class Ack(CamelModel):
    message: str
    id: Optional[str] = None


class CreatedService(CamelModel):
    id: str
    message: str
    owner_id: Optional[str] = None


class CreatedBooking(CamelModel):
    id: str
    message: str
    user_id: Optional[str] = None


class UserAck(CamelModel):
    message: str
    user_id: Optional[str] = None
