from dataclasses import dataclass


@dataclass
class Greeting:
    """Represents the message returned by the greeting endpoint.

    ``Greeting()`` leaves ``message`` unset (``None``) until it is assigned.
    """

    message: str | None = None
