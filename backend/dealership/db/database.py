# backend/dealership/db/database.py

"""
Configuración principal de la base de datos para la aplicación.

Este módulo define los componentes básicos que utilizan todos los repositorios:
- Clase base para los modelos de tabla (Base)
- Gateway de persistencia (DatabaseGateway), que envuelve el motor asíncrono
  y su pool de conexiones

El gateway se construye explícitamente al arrancar la aplicación y se cierra
al apagarla (ver dealership.main); no existe ninguna conexión global a nivel de módulo.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import Executable

logger = logging.getLogger(__name__)

# Clase base declarativa para todos los modelos de tabla
Base = declarative_base()

# Máximo valor de las columnas Integer (identificadores, año)
MAX_INTEGER = 2**31 - 1


@dataclass
class StatementResult:
    """
    Resultado de ejecutar una sentencia.

    Attributes:
        rowcount: Filas devueltas (SELECT / RETURNING) o filas afectadas
            según el driver (UPDATE / DELETE sin RETURNING).
        rows: Filas devueltas como mappings indexados por nombre de columna.
    """
    rowcount: int
    rows: List[Mapping[str, Any]] = field(default_factory=list)


class DatabaseGateway:
    """
    Conexión compartida con la base de datos relacional.

    Una única instancia se reutiliza por todos los repositorios. Cada llamada
    a ``execute`` es una sentencia autónoma en su propia transacción; no hay
    transacciones que abarquen varias llamadas.
    """

    def __init__(self, database_url: str, echo: bool = False, pool_size: Optional[int] = None):
        self.database_url = database_url
        self.echo = echo
        self.pool_size = pool_size
        self._engine: Optional[AsyncEngine] = None

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("El gateway de base de datos no está abierto. Llame a open() primero.")
        return self._engine

    async def open(self) -> None:
        """Crea el motor asíncrono y su pool. Llamadas repetidas no tienen efecto."""
        if self._engine is not None:
            return
        engine_kwargs: dict = {"echo": self.echo, "pool_pre_ping": True}
        if self.pool_size is not None:
            engine_kwargs["pool_size"] = self.pool_size
        self._engine = create_async_engine(self.database_url, **engine_kwargs)
        logger.info(f"Gateway de base de datos abierto ({self._engine.url.get_backend_name()})")

    async def close(self) -> None:
        """Libera todas las conexiones del pool."""
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        logger.info("Gateway de base de datos cerrado")

    async def create_schema(self) -> None:
        """Crea las tablas carro, cliente y pedido_venda si no existen."""
        # Los modelos deben estar registrados en Base.metadata antes de create_all
        from dealership.db.models import car_model, client_model, sales_order_model  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def execute(self, statement: Executable) -> StatementResult:
        """
        Ejecuta una sentencia parametrizada en una transacción propia.

        La transacción se confirma al terminar y se revierte si el driver
        lanza una excepción, que se propaga al llamador.
        """
        async with self.engine.begin() as conn:
            result = await conn.execute(statement)
            if result.returns_rows:
                rows = list(result.mappings().all())
                return StatementResult(rowcount=len(rows), rows=rows)
            return StatementResult(rowcount=result.rowcount)
