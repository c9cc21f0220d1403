"""
Account Statement — FastAPI Application.

This is the entry point for the application.
All routers are registered here.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from account_statement.config import get_settings
from account_statement.logging_config import configure_logging
from account_statement.models.base import Base, engine
from account_statement.api.health import router as health_router
from account_statement.api.entries import router as entries_router
from account_statement.api.statement import router as statement_router

settings = get_settings()
configure_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Migrations own the schema in deployed environments; locally a
    # fresh SQLite file just needs the tables.
    if settings.ENVIRONMENT == "development":
        Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Dated debit/credit ledger with a derived running balance",
    lifespan=lifespan,
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request data is a client error like any other validation failure."""
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(exc.errors())},
    )


# Register routers
app.include_router(health_router)
app.include_router(entries_router)
app.include_router(statement_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
