from dotenv import load_dotenv
load_dotenv() # Load .env file at the very beginning

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.middleware.cors import CORSMiddleware
from teamdesk.config import settings
from teamdesk.db import init_db, prepare_store, close_db
from teamdesk.routes import directory, health, users, teams
from teamdesk.middleware.error_handler import (
    ErrorHandlerMiddleware, http_exception_handler, request_validation_handler,
)
from teamdesk.utils.logger import log_error
import logging

logger = logging.getLogger(__name__)


app = FastAPI(
    title="Teamdesk API",
    description="Users and teams stored in MongoDB, with a paginated user listing",
    version=settings.VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

@app.on_event("startup")
async def startup_event():
    """Make sure the unique indexes exist before serving requests"""
    try:
        await prepare_store(app.state.db)
    except PyMongoError as e:
        # Keep serving: store errors surface per request and through /health/ready
        log_error("Could not prepare indexes", e)
    logger.info("Application startup completed")

@app.on_event("shutdown")
async def shutdown_event():
    close_db()
    logger.info("Application shutdown completed")

app.add_exception_handler(RequestValidationError, request_validation_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)

# Error handler first so that CORS wraps it and error responses get CORS headers
app.add_middleware(ErrorHandlerMiddleware)

cors_origins = settings.cors_origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    # browsers reject credentials with a wildcard origin
    allow_credentials="*" not in cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize Database
init_db(app)

app.include_router(directory.router, tags=["Directory"])
app.include_router(health.router, tags=["Health"])
app.include_router(users.router, tags=["Users"])
app.include_router(teams.router, tags=["Teams"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
