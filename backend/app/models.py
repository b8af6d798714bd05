from datetime import datetime, timezone

from pydantic import field_validator
from sqlalchemy import DateTime, JSON, Text
from sqlmodel import Field, SQLModel


def get_datetime_utc() -> datetime:
    return datetime.now(timezone.utc)


# Shared properties
class AgentSpecificationBase(SQLModel):
    name: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1, sa_type=Text)
    goal: str = Field(min_length=1, sa_type=Text)
    instructions: str = Field(min_length=1, sa_type=Text)
    tools: list[str] = Field(default_factory=list, sa_type=JSON)


# Properties to receive via API on creation
class AgentSpecificationCreate(AgentSpecificationBase):
    pass


# Properties to receive via API on update, all are optional
class AgentSpecificationUpdate(SQLModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    goal: str | None = Field(default=None, min_length=1)
    instructions: str | None = Field(default=None, min_length=1)
    tools: list[str] | None = Field(default=None)


# Database model, database table inferred from class name
class AgentSpecification(AgentSpecificationBase, table=True):
    __tablename__ = "agent_specifications"

    id: int | None = Field(default=None, primary_key=True)
    created_at: datetime = Field(
        default_factory=get_datetime_utc,
        sa_type=DateTime(timezone=True),  # type: ignore
    )
    updated_at: datetime = Field(
        default_factory=get_datetime_utc,
        sa_type=DateTime(timezone=True),  # type: ignore
    )


# Properties to return via API, id is always required
class AgentSpecificationPublic(AgentSpecificationBase):
    id: int
    created_at: datetime
    updated_at: datetime


class AgentSpecificationsPublic(SQLModel):
    data: list[AgentSpecificationPublic]
    count: int


# Natural language processing
class NaturalLanguageRequest(SQLModel):
    description: str = Field(min_length=1)

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Natural language description is required")
        return value


class AgentSpecificationSuggestion(SQLModel):
    name: str
    description: str
    goal: str
    instructions: str
    tools: list[str]


# Generic message
class Message(SQLModel):
    message: str
