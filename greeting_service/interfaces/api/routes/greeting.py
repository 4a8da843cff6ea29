"""Routes that return greeting messages."""

from fastapi import APIRouter

from greeting_service.application.use_cases.create_greeting import create_greeting
from greeting_service.domain.entities import Greeting
from greeting_service.interfaces.api.schemas import GreetingRead

router = APIRouter(tags=["greeting"])


def _greeting_to_read_model(greeting: Greeting) -> GreetingRead:
    return GreetingRead.model_validate(greeting)


@router.get("/greeting", response_model=GreetingRead)
async def read_greeting() -> GreetingRead:
    """Return the static greeting message."""

    greeting = create_greeting()
    return _greeting_to_read_model(greeting)


__all__ = ["router"]
