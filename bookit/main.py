# bookit/main.py

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookit.config import settings
from bookit.logging_config import setup_logging
from bookit.routers import auth_routes, bookings_routes, services_routes

logger = logging.getLogger(__name__)

# Body validation answers 400 with the same wording the front end shows
VALIDATION_MESSAGES = {
    "/signup": "All fields are required",
    "/login": "All fields are required",
    "/services": "All service fields are required",
    "/bookings": "Service, date and time are required",
}


def validation_message(path: str, errors: list) -> str:
    fields = {str(e["loc"][-1]) for e in errors if e.get("loc")}
    missing = any(e.get("type") in ("missing", "string_too_short") for e in errors)
    if path == "/signup" and "role" in fields and not missing:
        return "Role must be owner or user"
    if path == "/login" and "email" in fields:
        return "Email is required"
    for prefix, message in VALIDATION_MESSAGES.items():
        if path == prefix or path.startswith(prefix + "/"):
            return message
    return "Invalid request"


def create_app() -> FastAPI:
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        message = validation_message(request.url.path, exc.errors())
        logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=400, content={"error": message})

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(auth_routes.router)
    app.include_router(services_routes.router)
    app.include_router(bookings_routes.router)
    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
