import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, APIRouter, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from config.settings import CORS_ORIGINS, LOG_LEVEL
from config.database import init_db

from app.api.endpoints.auth_credentials import router as auth_cred_routes

from app.routes.activity_routes import router as activity_routes
from app.routes.schedule_routes import router as schedule_routes
from app.routes.notification_routes import router as notification_routes
from app.routes.analytics_routes import router as analytics_routes
from app.routes.library_routes import router as library_routes


logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=getattr(logging, LOG_LEVEL, logging.INFO)
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Creating database tables...")
    init_db()
    yield
    logger.info("Shutting down NightNest API")


app = FastAPI(
    title="NightNest API",
    version="0.1.0",
    description="Backend for tracking a baby's sleep, feeding and diaper activity",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# The request session is closed by get_db, which rolls back the failed transaction
@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "Database error", "detail": "The request could not be saved. Please try again."}
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "detail": "Something went wrong. Please try again."}
    )


# Main router under /api
routerAPI = APIRouter(prefix="/api")

routerAPI.include_router(auth_cred_routes)
routerAPI.include_router(activity_routes)
routerAPI.include_router(schedule_routes)
routerAPI.include_router(notification_routes)
routerAPI.include_router(analytics_routes)
routerAPI.include_router(library_routes)
app.include_router(routerAPI)


@app.get("/", tags=["Root"])
async def read_root():
    return {"status": "NightNest API is up!"}
