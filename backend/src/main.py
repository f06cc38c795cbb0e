from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import settings
from shared.exceptions import (
    AppError,
    ConflictError,
    NotFoundError,
    NoUsersError,
    ValidationError,
)
from shared.infrastructure.database import connect
from shared.logging import configure_logging
from users.interfaces.routes import router as users_router

logger = structlog.get_logger(__name__)

# Submitted values of these fields are never echoed in error bodies.
REDACTED_FIELDS = {"password"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
    app.state.mongo_client = await connect(settings)
    yield
    await app.state.mongo_client.close()


app = FastAPI(
    title="User Registry",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users_router)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = []
    for error in exc.errors():
        loc = error.get("loc", ())
        param = str(loc[-1]) if len(loc) > 1 else "body"
        errors.append(
            {
                "param": param,
                "msg": error.get("msg", "Invalid value"),
                "value": None if param in REDACTED_FIELDS else error.get("input"),
                "location": str(loc[0]) if loc else "body",
            }
        )
    return JSONResponse(status_code=400, content={"errors": errors})


@app.exception_handler(ValidationError)
async def validation_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=400, content={"errors": [e.to_dict() for e in exc.errors]}
    )


@app.exception_handler(ConflictError)
async def conflict_handler(request: Request, exc: ConflictError):
    return JSONResponse(status_code=400, content={"msg": exc.message})


@app.exception_handler(NoUsersError)
async def no_users_handler(request: Request, exc: NoUsersError):
    logger.error("request_failed", path=request.url.path, error=exc.message)
    return JSONResponse(status_code=500, content={"error": exc.message})


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"msg": exc.message})


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    logger.error("request_failed", path=request.url.path, error=exc.message, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Server Error"})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error("request_failed", path=request.url.path, error=str(exc), exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Server Error"})


@app.get("/health")
async def health_check():
    return {"status": "ok"}


def run() -> None:
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
