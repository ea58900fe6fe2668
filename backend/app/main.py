"""
Blog Backend - FastAPI Application

User registration/login with bearer tokens, and CRUD over posts and their
nested comments, backed by MongoDB.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.core.errors import BlogError
from app.database.connections import init_database, close_connections
from app.routers import auth, comments, health, posts

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s | %(levelname)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("blog_api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Connect to MongoDB
    - Create indexes

    Shutdown:
    - Close the database connection
    """
    logger.info("Starting up Blog Backend...")

    try:
        await init_database()
    except Exception as e:
        if settings.mongo_required:
            logger.error(f"Database initialization failed: {e}")
            raise
        # Requests touching the store fail until it becomes reachable
        logger.warning(f"Database initialization failed, serving degraded: {e}")

    yield

    logger.info("Shutting down Blog Backend...")
    await close_connections()


# Create FastAPI application
app = FastAPI(
    title="Blog API",
    description="""
## Blog Backend API

### Features
- **Authentication**: registration and login with JWT bearer tokens
- **Posts**: public reads, author-only updates and deletes
- **Comments**: nested under posts, comment-author-only updates and deletes

### Authentication
Protected endpoints expect a bearer token:
```
Authorization: Bearer your_jwt_token
```

Obtain a token via `POST /auth/login`.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BlogError)
async def blog_error_handler(request: Request, exc: BlogError):
    """Map domain errors to their status code and a JSON message."""
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=headers,
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are reported as 400, like other validation failures."""
    errors = [
        {"loc": list(err.get("loc", [])), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request", "errors": errors},
    )


# Include routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(posts.router)
app.include_router(comments.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Blog API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
