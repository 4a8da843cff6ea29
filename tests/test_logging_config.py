import logging

from greeting_service.logging_config import LOG_FORMAT, configure_logging


def test_configure_logging_sets_level_and_format(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    configure_logging("debug")

    assert captured == {"level": "DEBUG", "format": LOG_FORMAT}
