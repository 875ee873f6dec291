import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pcm import __version__
from pcm.config import Settings
from pcm.database import JsonStore
from pcm.exceptions import PCMError
from pcm.routers import auth_router, rooms_router, admin_users_router
from pcm.services.auth import Authenticator, EmailTokenAuthenticator

logger = logging.getLogger("pcm")


def _validation_message(error: dict) -> str:
    if error.get("type") == "value_error" and "error" in error.get("ctx", {}):
        return str(error["ctx"]["error"])
    field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    return f"{field}: {error.get('msg')}" if field else error.get("msg", "Requisição inválida")


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(PCMError)
    async def pcm_error_handler(request: Request, exc: PCMError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = _validation_message(errors[0]) if errors else "Requisição inválida"
        return JSONResponse(
            status_code=400,
            content={
                "success": False,
                "error": message,
                "details": [_validation_message(e) for e in errors]
            }
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": str(exc.detail)},
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Erro no servidor: %s", exc)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Erro interno no servidor"}
        )


def create_app(
    settings: Optional[Settings] = None,
    authenticator: Optional[Authenticator] = None
) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(
        title="PCM Mock - Gestão de Quartos",
        description="Mock do PCM para o painel de governança: status e checklist dos quartos",
        version=__version__
    )
    app.state.settings = settings
    app.state.authenticator = authenticator or EmailTokenAuthenticator()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("%s %s -> %d (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
        return response

    register_exception_handlers(app)

    app.include_router(auth_router, prefix="/api")
    app.include_router(rooms_router, prefix="/api")
    app.include_router(admin_users_router, prefix="/api")

    @app.on_event("startup")
    def startup():
        app.state.store = JsonStore.open(settings)
        logger.info(
            "Servidor mock do PCM em http://%s:%d (%d quartos, %d usuários)",
            settings.host, settings.port, len(app.state.store.rooms), len(app.state.store.users)
        )

    @app.on_event("shutdown")
    def shutdown():
        logger.info("Salvando dados antes de desligar...")
        app.state.store.flush()

    @app.get("/")
    def root():
        store = app.state.store
        return {
            "success": True,
            "message": "Mock PCM - Sistema de Gestão de Quartos",
            "version": __version__,
            "quartos": len(store.rooms),
            "usuarios": len(store.users),
            "docs": "/docs"
        }

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=app.state.settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    uvicorn.run(app, host=app.state.settings.host, port=app.state.settings.port)
