from .greeting import GreetingRead

__all__ = [
    "GreetingRead",
]
