from contextlib import asynccontextmanager
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from sqlmodel import Session
from starlette.exceptions import HTTPException as StarletteHTTPException
import html
import logging

# Load environment variables as early as possible
load_dotenv()

from .config import settings, configure_logging
from .database import create_db_and_tables, engine
from .db.seed import seed_if_empty
from .exceptions import (
    FieldValidationError,
    field_validation_handler,
    http_exception_handler,
    request_validation_handler,
)
from .middleware import CSRFMiddleware, NoStoreMiddleware, RequestLogMiddleware
from .routers import appointments_router, clinical_router, doctors_router, patients_router, rooms_router, staff_router

configure_logging(settings)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"Starting {settings.APP_NAME} data service...")
    create_db_and_tables()
    if settings.SEED_ON_STARTUP:
        with Session(engine) as session:
            seed_if_empty(session)
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.APP_NAME} data service...")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
    docs_url=("/docs" if settings.DOCS_ENABLED else None),
    redoc_url=("/redoc" if settings.DOCS_ENABLED else None),
    openapi_url=("/openapi.json" if settings.DOCS_ENABLED else None)
)

# Exception handlers produce the {success: false, message, errors?} envelope
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)
app.add_exception_handler(FieldValidationError, field_validation_handler)

# Add middleware
app.add_middleware(CSRFMiddleware)
app.add_middleware(NoStoreMiddleware)
app.add_middleware(RequestLogMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(appointments_router.router)
app.include_router(patients_router.router)
app.include_router(doctors_router.router)
app.include_router(rooms_router.router)
app.include_router(staff_router.router)
app.include_router(clinical_router.messages_router)
app.include_router(clinical_router.lab_results_router)
app.include_router(clinical_router.med_samples_router)
app.include_router(clinical_router.records_router)


PAGE_SHELL = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="{meta_name}" content="{token}">
<title>{title}</title>
</head>
<body><div id="app"></div></body>
</html>
"""


@app.get("/", response_class=HTMLResponse, include_in_schema=False)
def page_shell(request: Request):
    """Dashboard shell; clients read the CSRF token from its meta tag"""
    return PAGE_SHELL.format(
        meta_name=html.escape(settings.CSRF_META_NAME, quote=True),
        token=html.escape(settings.CSRF_TOKEN, quote=True),
        title=html.escape(settings.APP_NAME),
    )


@app.get("/health")
def health_check():
    return {"status": "healthy", "service": settings.APP_NAME, "version": settings.APP_VERSION}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("clinic_dashboard.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
