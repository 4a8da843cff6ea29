from greeting_service.main import app, create_app, run

__all__ = ["app", "create_app", "run"]


if __name__ == "__main__":
    run()
