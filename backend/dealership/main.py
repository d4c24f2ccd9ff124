# backend/dealership/main.py
"""
Punto de entrada principal de la aplicación FastAPI.

Este módulo configura y construye la aplicación completa:
- Logging y CORS
- Registro de los routers de carros, clientes y pedidos
- Respuesta 400 uniforme para peticiones mal formadas
- Ciclo de vida del gateway de base de datos (apertura al arrancar,
  cierre al apagar)

Uso:
    uvicorn dealership.main:app
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from dealership.api.api_router import api_router
from dealership.api.responses import INVALID_ID_MESSAGE, message_response
from dealership.core.config import Settings, settings as default_settings
from dealership.core.logging_config import setup_logging
from dealership.db.database import DatabaseGateway

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Dados inválidos na requisição. Verifique os campos enviados."


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Construye la aplicación FastAPI.

    Args:
        settings: Configuración a usar; por defecto la instancia global.

    Returns:
        FastAPI: Aplicación lista para servir. El gateway se abre en el
        arranque (lifespan), no aquí.
    """
    settings = settings or default_settings
    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        gateway = DatabaseGateway(
            settings.DATABASE_URL,
            echo=settings.DB_ECHO,
            pool_size=settings.DB_POOL_SIZE,
        )
        await gateway.open()
        if settings.DB_CREATE_SCHEMA:
            await gateway.create_schema()
        app.state.gateway = gateway
        try:
            yield
        finally:
            await gateway.close()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
        description="API para gestión de carros, clientes y pedidos de venta",
        lifespan=lifespan,
    )

    # ========================================
    # MIDDLEWARE
    # ========================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        duration = round((time.time() - start_time) * 1000, 2)
        logger.info(f"{request.method} {request.url.path} Status: {response.status_code} Time: {duration}ms")
        return response

    # ========================================
    # MANEJO DE ERRORES DE VALIDACIÓN
    # ========================================

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Se rechaza antes de llegar a la base de datos
        errors = exc.errors()
        fields = [".".join(str(part) for part in error.get("loc", ())) for error in errors]
        logger.warning(f"Petición inválida en {request.url.path}: {fields}")
        if any(error.get("loc") and error["loc"][0] == "path" for error in errors):
            mensagem = INVALID_ID_MESSAGE
        else:
            mensagem = INVALID_BODY_MESSAGE
        return message_response(status.HTTP_400_BAD_REQUEST, mensagem, campos=fields)

    # ========================================
    # ROUTERS
    # ========================================

    app.include_router(api_router)

    @app.get("/", tags=["Root"])
    async def read_root():
        """Endpoint raíz para verificación básica del estado de la API."""
        return {"mensagem": "Olá, mundo!"}

    return app


app = create_app()
