import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from cuesheet.api.routes import router as api_router
from cuesheet.core.config import settings
from cuesheet.core.database import async_session, engine
from cuesheet.core.init_db import create_tables, seed_all
from cuesheet.core.logging import configure_logging
from cuesheet.services.program_service import ProgramValidationError

logger = logging.getLogger("cuesheet")


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    await create_tables()
    async with async_session() as db:
        await seed_all(db)
    logger.info("Cue sheet API ready")
    yield
    await engine.dispose()


app = FastAPI(
    title="Cue Sheet API",
    version="0.1.0",
    description="Broadcast cue sheet scheduling: programs, special programs and songs per day/shift",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail}, headers=exc.headers)


@app.exception_handler(ProgramValidationError)
async def program_validation_handler(request: Request, exc: ProgramValidationError):
    content = {"message": exc.message}
    if exc.missing_fields:
        content["missingFields"] = exc.missing_fields
    return JSONResponse(status_code=400, content=content)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'][1:]) or 'body'}: {error['msg']}" for error in exc.errors()
    )
    return JSONResponse(status_code=400, content={"message": f"Invalid request: {problems}"})


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Store failure during %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Server OK"}


@app.get("/ping")
async def ping():
    return {"message": "Server is alive"}


@app.get("/health")
async def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("cuesheet.main:app", host="0.0.0.0", port=8000)
