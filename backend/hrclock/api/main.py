"""
Backend application shell.

Wires CORS, the validation error surface and the health checks. Resource
routers are mounted by the deployment onto the app returned by
``create_app``.
"""
import logging
import os

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..schemas.common import ErrorResponse, ValidationErrorResponse
from ..validation.errors import PayloadValidationError, violations_from_errors

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")


def _validation_response(violations) -> JSONResponse:
    body = ValidationErrorResponse(violations=violations)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=body.model_dump(mode="json")
    )


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report request parsing failures as field violations."""
    violations = violations_from_errors(exc.errors())
    logger.info(f"Rejected {request.method} {request.url.path}: {len(violations)} violation(s)")
    return _validation_response(violations)


async def payload_validation_handler(request: Request, exc: PayloadValidationError):
    """Report DTO validation failures raised by handlers."""
    logger.info(f"Rejected {request.method} {request.url.path}: {exc.fields()}")
    return _validation_response(exc.violations)


async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(detail="Internal server error").model_dump()
    )


# PUBLIC_INTERFACE
def install_error_handlers(app: FastAPI):
    """
    Register the validation error surface on an application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(PayloadValidationError, payload_validation_handler)
    app.add_exception_handler(Exception, global_exception_handler)


# PUBLIC_INTERFACE
def create_app() -> FastAPI:
    """
    Build the backend application.

    Returns:
        FastAPI: Application with CORS, error handlers and health checks
    """
    app = FastAPI(
        title="HR Clock API",
        description="Clock-in/out tracking, teams, user accounts and password reset.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_tags=[
            {
                "name": "Health",
                "description": "Service status"
            },
        ]
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)

    @app.on_event("startup")
    async def startup_event():
        logger.info("Starting up HR Clock API...")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Shutting down HR Clock API...")

    @app.get("/", tags=["Health"])
    def health_check():
        """
        Health check endpoint.

        Returns basic API status and version information.
        """
        return {
            "message": "HR Clock API is healthy",
            "version": __version__,
            "status": "operational"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "hrclock.api.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8080")),
        reload=True,
        log_level="info"
    )
