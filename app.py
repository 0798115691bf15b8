from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from greeter_api.greeting import build_greeting, build_timestamped_greeting
from greeter_api.logger import greeter_logger


def create_app(include_timestamp: bool = False) -> FastAPI:
    """
    Create the greeter application with its single /hello route.

    Args:
        include_timestamp: Append the current date and time to the greeting

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(title="Greeter", docs_url=None, redoc_url=None)

    if include_timestamp:

        @app.get("/hello", response_class=PlainTextResponse)
        async def hello():
            message = build_timestamped_greeting()
            greeter_logger.info(message)
            return message

    else:

        @app.get("/hello", response_class=PlainTextResponse)
        async def hello():
            message = build_greeting()
            greeter_logger.info(message)
            greeter_logger.info(message)
            return message

    return app


app = create_app()
