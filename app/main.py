from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import time

from app.config.app_config import CORS_ORIGINS, LOG_LEVEL
from app.db.init_db import init_db, close_db_connection
from app.routes.document_routes import document_router, shared_router
from app.routes.note_routes import note_router, shared_note_router
from app.routes.user_routes import user_router
from app.utils.errors import error_body, format_validation_errors

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="Coexist API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response

@app.exception_handler(StarletteHTTPException)
async def handle_http_exception(_: Request, exc: StarletteHTTPException):
    """Render every HTTP error as ``{"error": ...}``."""
    if isinstance(exc.detail, list):
        content = error_body("Invalid request", exc.detail)
    else:
        content = error_body(str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))

@app.exception_handler(RequestValidationError)
async def handle_validation_error(_: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Invalid request", format_validation_errors(exc.errors())),
    )

@app.on_event("startup")
def startup():
    init_db()

@app.on_event("shutdown")
def shutdown():
    close_db_connection()

app.include_router(user_router)
app.include_router(document_router)
app.include_router(shared_router)
app.include_router(note_router)
app.include_router(shared_note_router)
