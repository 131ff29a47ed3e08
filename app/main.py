import logging

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from app.api.routes.parse import router as parse_router
from app.core.config import LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Profile Import (PDF Export Parser)",
    description="Deterministic parser that turns a 'save profile to PDF' export into headline, experience, education and skills",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.include_router(parse_router)

@app.get("/", tags=["health"])
def root():
    return {"service": "profile-import", "status": "running"}

@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}

def custom_openapi():
    """Generate OpenAPI schema with custom settings."""
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title="Profile Import API",
        version="0.1.0",
        description="Profile export parsing with warnings for unrecognized sections",
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema

app.openapi = custom_openapi
