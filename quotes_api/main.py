# quotes_api/main.py

import logging
import os

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from quotes_api.api.quotes import router as quotes_router
from quotes_api.config import get_settings
from quotes_api.errors import QuoteServiceError
from quotes_api.middleware import RequestLoggingMiddleware

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Quotes API",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

ENDPOINTS = {
    "getAllQuotes": "GET /api/quotes",
    "getRandomQuote": "GET /api/quotes/random",
    "getQuoteById": "GET /api/quotes/:id",
    "searchQuotes": "GET /api/quotes/search?q=text",
    "addQuote": "POST /api/quotes",
    "updateQuote": "PUT /api/quotes/:id",
    "deleteQuote": "DELETE /api/quotes/:id",
}


@app.get("/")
def service_info():
    return {"message": "Welcome to the Quotes API", "endpoints": ENDPOINTS}


@app.get("/health")
def health_check():
    return {"status": "ok"}


app.include_router(quotes_router)

# Mounted after the API routes so those take precedence
if os.path.isdir(settings.static_dir):
    app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")


@app.exception_handler(QuoteServiceError)
async def quote_error_handler(request: Request, exc: QuoteServiceError):
    logger.warning(
        "%s on %s %s: %s",
        type(exc).__name__, request.method, request.url.path, exc.message,
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid request data",
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                }
                for e in exc.errors()
            ],
        },
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # 405 on a known path is reported like any other unknown route
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "Route not found"},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled exception on %s %s", request.method, request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )
