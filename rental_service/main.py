from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from rental_service.api.routes import router as api_router
from rental_service.config import get_settings
from rental_service.db import Base, engine
from rental_service.errors import InvalidArgumentError, NotFoundError, StorageError
from rental_service.utils import logger
import rental_service.models  # noqa: F401 ensure models are imported so tables are known

# create FastAPI instance
app = FastAPI(title="rental-service")
app.include_router(api_router)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    logger.warning("NotFound: %s for %s %s", exc, request.method, request.url)
    return JSONResponse(status_code=404, content={"detail": "Rental not found"})


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    logger.warning("InvalidArgument: %s for %s %s", exc, request.method, request.url)
    return JSONResponse(status_code=400, content={"detail": exc.detail})


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error("StorageError: %s for %s %s", exc, request.method, request.url, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "An internal server error occurred."})


@app.on_event("startup")
def on_startup_create_tables():
    # Ensure database tables exist; migrations may own the schema instead
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        logger.warning("Skipping table creation: %s", e)


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("rental_service.main:app", host=settings.server_host, port=settings.server_port, reload=False)
