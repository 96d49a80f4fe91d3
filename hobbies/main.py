from fastapi import FastAPI, Request
from starlette.middleware.sessions import SessionMiddleware
from hobbies.core.config import settings
from hobbies.core.db import init_db
from hobbies.core.errors import StorageUnavailableError
from hobbies.core.logging_config import configure_logging, get_logger
from hobbies.core.templates import templates
from hobbies.api.v1 import people, health

configure_logging()
logger = get_logger(__name__)

app = FastAPI(title=settings.PROJECT_NAME)
app.add_middleware(SessionMiddleware, secret_key=settings.SECRET_KEY, session_cookie=settings.SESSION_COOKIE)

@app.on_event("startup")
def on_startup():
    if settings.AUTO_CREATE_SCHEMA:
        init_db()

@app.exception_handler(StorageUnavailableError)
def storage_unavailable_handler(request: Request, exc: StorageUnavailableError):
    logger.error(f"{request.method} {request.url.path} failed: {exc}", exc_info=exc)
    return templates.TemplateResponse(
        request,
        "error.html",
        {"message": "Something went wrong while talking to the database. Please try again later."},
        status_code=500,
    )

app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(people.router, tags=["people"])

def run():
    """development server entry point"""
    import uvicorn
    uvicorn.run("hobbies.main:app", host=settings.HOST, port=settings.PORT)

if __name__ == "__main__":
    run()
