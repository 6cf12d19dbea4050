from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from loguru import logger

from runplan import __version__
from runplan.api.coach_chat import router as coach_chat_router
from runplan.api.faq import router as faq_router
from runplan.api.plans import router as plans_router
from runplan.core.logger import setup_logger
from runplan.core.settings import settings

setup_logger(
    level=settings.log_level,
    log_file=settings.log_file,
    rotation=settings.log_rotation,
    retention=settings.log_retention,
)

app = FastAPI(title="Running Plan Generator", version=__version__)

app.include_router(plans_router)
app.include_router(coach_chat_router)
app.include_router(faq_router)

logger.info("FastAPI application initialized")


@app.get("/health")
def health():
    return {"status": "ok"}


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all HTTP requests."""
    logger.debug(f"Request: {request.method} {request.url.path}")
    response = await call_next(request)
    logger.debug(f"Response: {response.status_code} for {request.method} {request.url.path}")
    return response


@app.get("/", response_class=HTMLResponse)
def root():
    return """
    <html>
        <head>
            <title>Running Plan Generator</title>
        </head>
        <body>
            <h1>Running Plan Generator</h1>
            <p>POST goal inputs to <code>/plans</code> to generate a plan.</p>
            <p>See <a href="/docs">/docs</a> for the API, <a href="/faq">/faq</a> for the FAQ.</p>
        </body>
    </html>
    """
