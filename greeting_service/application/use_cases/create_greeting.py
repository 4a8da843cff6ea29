"""Use cases for producing greeting messages."""

from greeting_service.domain.entities.greeting import Greeting


DEFAULT_GREETING = "Hello World!"


def create_greeting() -> Greeting:
    """Return a new greeting holding the default message."""

    return Greeting(message=DEFAULT_GREETING)
