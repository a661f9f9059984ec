import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from expo_portal.core.config import HOST, LOG_LEVEL, PORT, UPLOAD_BASE_URL, UPLOAD_DIR
from expo_portal.core.errors import AuthenticationFailed, PortalError
from expo_portal.core.logging_middleware import LoggingMiddleware
from expo_portal.db.init_db import init_db
from expo_portal.routers.auth import router as auth_router
from expo_portal.routers.dashboard import router as dashboard_router
from expo_portal.routers.projects import router as projects_router
from expo_portal.routers.submissions import admin_router as admin_submissions_router
from expo_portal.routers.submissions import router as submissions_router

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Expo Portal")

# Middleware
app.add_middleware(LoggingMiddleware)


@app.exception_handler(PortalError)
def portal_error_handler(request: Request, exc: PortalError):
    logger.info("%s %s rejected (%s): %s", request.method, request.url.path, exc.status_code, exc.detail)
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationFailed) else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=headers,
    )


# Health check
@app.get("/health")
def health():
    return {"status": "ok"}


# Startup event
@app.on_event("startup")
def on_startup():
    init_db()


# Uploaded documents are served back from the storage directory unless an external host serves them
if UPLOAD_BASE_URL.startswith("/"):
    UPLOAD_DIR.mkdir(parents=True, exist_ok=True)
    app.mount(UPLOAD_BASE_URL, StaticFiles(directory=UPLOAD_DIR), name="uploads")

# Include routers
app.include_router(auth_router, prefix="/auth", tags=["auth"])
app.include_router(projects_router, prefix="/projects", tags=["projects"])
app.include_router(submissions_router, tags=["submissions"])
app.include_router(admin_submissions_router, prefix="/admin", tags=["admin"])

# Dashboard (no prefix, route already defines full path)
app.include_router(dashboard_router)


def run():
    uvicorn.run("expo_portal.main:app", host=HOST, port=PORT)


if __name__ == "__main__":
    run()
