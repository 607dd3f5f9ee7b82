import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from earshop.api.deps import require_token
from earshop.api.v1.routers.auth import router as auth_router
from earshop.api.v1.routers.earphones import router as earphones_router
from earshop.api.v1.routers.health import router as health_router
from earshop.api.v1.routers.reviews import router as reviews_router
from earshop.api.v1.routers.users import router as users_router
from earshop.core.config import get_settings
from earshop.core.lifespan import lifespan
from earshop.core.logging import configure_logging
from earshop.domain.errors import AppError, AuthError

settings = get_settings()
configure_logging(level=logging.DEBUG if settings.DEBUG else logging.INFO)

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Server could not find what was requested"

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# ------- CORS -------
# ALLOWED_ORIGINS="https://shop.example,https://www.shop.example"; empty allows any origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins or ["*"],
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    max_age=86400,
)


# ------- Errors -------
def _field_path(loc) -> str:
    # drop the source ('body', 'query', 'path') and keep the field path
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts)


def _is_gated(request: Request) -> bool:
    route = request.scope.get("route")
    return any(dep.dependency is require_token for dep in getattr(route, "dependencies", ()))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # a body that fails to parse is rejected before dependencies run; the gate still answers first
    if _is_gated(request):
        try:
            await require_token(request, request.headers.get("authorization"))
        except AuthError as e:
            return await app_error_handler(request, e)
    messages = [f"{_field_path(err.get('loc', ()))}: {err.get('msg')}" for err in exc.errors()]
    logger.info("Rejected %s %s: %s validation error(s)", request.method, request.url.path, len(messages))
    return JSONResponse(status_code=422, content=messages)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # unmatched path or method
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content={"message": NOT_FOUND_MESSAGE})
    return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)}, headers=exc.headers)


@app.exception_handler(PyMongoError)
async def store_error_handler(request: Request, exc: PyMongoError):
    logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"message": "Document store unavailable"})


# ------- Routes -------
app.include_router(health_router)
app.include_router(earphones_router)
app.include_router(reviews_router)
app.include_router(auth_router)
app.include_router(users_router)


def run():
    import uvicorn

    uvicorn.run("earshop.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
