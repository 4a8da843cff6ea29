"""Schemas for the greeting endpoint."""

from pydantic import BaseModel, ConfigDict, Field


class GreetingRead(BaseModel):
    message: str = Field(..., description="Greeting text returned to the client")

    model_config = ConfigDict(from_attributes=True)


__all__ = ["GreetingRead"]
