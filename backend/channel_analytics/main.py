import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError as SettingsError

from channel_analytics.dependencies import get_settings
from channel_analytics.errors import RelayError
from channel_analytics.routers import relay

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    try:
        settings = get_settings()
    except SettingsError:
        # The relay must not serve requests without its YouTube API key.
        logger.critical("API_KEY is not configured; refusing to start")
        raise

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs full request URLs, which carry the API key.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    app = FastAPI(title="YouTube Channel Analytics", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(relay.router)

    @app.exception_handler(RelayError)
    async def relay_error_handler(request: Request, exc: RelayError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Welcome to the YouTube Analytics Backend! Use /api/search or /api/channel."

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
