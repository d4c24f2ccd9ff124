# backend/dealership/crud/base_crud.py

"""
Operaciones CRUD comunes a todas las entidades.

Este módulo implementa una sola vez el contrato que comparten carros,
clientes y pedidos de venta:

- list_all(): todas las filas de la tabla, convertidas en entidades
- create(entity): INSERT ... RETURNING del identificador generado
- update(entity): UPDATE filtrado por el identificador de la entidad
- delete(entity_id): DELETE filtrado por identificador

Cada repositorio concreto solo aporta la tabla y el mapeo fila <-> entidad.
Todas las sentencias se construyen con SQLAlchemy Core, por lo que los
valores viajan siempre como parámetros enlazados del driver.

Política de errores: cualquier excepción de la base de datos se registra y
se convierte en ``ResultKind.STORE_ERROR``; nunca se propaga.
"""

import logging
from typing import Any, Dict, Generic, Mapping, Optional, TypeVar

from sqlalchemy import Column, Table, delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql import Executable

from dealership.crud.results import ListResult, ResultKind, WriteResult
from dealership.db.database import MAX_INTEGER, DatabaseGateway, StatementResult

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT")

# Errores que se consideran fallos de la base de datos o de la conexión
STORE_ERRORS = (SQLAlchemyError, OSError, OverflowError)


class BaseRepository(Generic[EntityT]):
    """
    Repositorio genérico sobre una tabla con clave primaria entera.

    Las subclases definen ``table``, ``id_column``, ``entity_name`` y los
    métodos ``_to_values`` / ``_from_row``.
    """

    table: Table
    id_column: str
    entity_name: str = "registro"

    def __init__(self, gateway: DatabaseGateway):
        self.gateway = gateway

    # ========================================
    # MAPEO FILA <-> ENTIDAD
    # ========================================

    def _to_values(self, entity: EntityT) -> Dict[str, Any]:
        """Columnas (sin identificador) a escribir para la entidad."""
        raise NotImplementedError

    def _from_row(self, row: Mapping[str, Any]) -> EntityT:
        """Construye la entidad a partir de una fila."""
        raise NotImplementedError

    @property
    def _pk(self) -> Column:
        return self.table.c[self.id_column]

    # ========================================
    # EJECUCIÓN
    # ========================================

    async def _run(self, statement: Executable, action: str) -> Optional[StatementResult]:
        """Ejecuta la sentencia; devuelve None si la base de datos falla."""
        try:
            return await self.gateway.execute(statement)
        except STORE_ERRORS as e:
            logger.error(f"Error al {action} {self.entity_name}: {e}", exc_info=True)
            return None

    # ========================================
    # OPERACIONES
    # ========================================

    async def list_all(self) -> ListResult[EntityT]:
        """Obtiene todas las filas de la tabla ordenadas por identificador."""
        statement = select(self.table).order_by(self._pk)
        result = await self._run(statement, "listar")
        if result is None:
            return ListResult(ResultKind.STORE_ERROR)
        try:
            items = [self._from_row(row) for row in result.rows]
        except (ValueError, TypeError) as e:
            # Fila que la entidad no acepta (p. ej. NULL en una tabla antigua)
            logger.error(f"Fila inválida al listar {self.entity_name}: {e}", exc_info=True)
            return ListResult(ResultKind.STORE_ERROR)
        return ListResult(ResultKind.OK, items)

    async def create(self, entity: EntityT) -> WriteResult:
        """
        Inserta la entidad y le asigna el identificador generado.

        Returns:
            OK con el nuevo identificador si se insertó al menos una fila,
            NO_ROWS si el INSERT no devolvió ninguna, STORE_ERROR si falló.
        """
        statement = insert(self.table).values(**self._to_values(entity)).returning(self._pk)
        result = await self._run(statement, "registrar")
        if result is None:
            return WriteResult.failure(ResultKind.STORE_ERROR)
        if result.rowcount < 1:
            return WriteResult.failure(ResultKind.NO_ROWS)

        entity.id = result.rows[0][self.id_column]
        logger.info(f"{self.entity_name.capitalize()} registrado con éxito. ID: {entity.id}")
        return WriteResult.success(result.rowcount, entity.id)

    async def update(self, entity: EntityT) -> WriteResult:
        """Actualiza todas las columnas de la fila con el identificador de la entidad."""
        entity_id = entity.id
        if not _is_valid_id(entity_id):
            return WriteResult.failure(ResultKind.INVALID_ID, entity_id)

        statement = update(self.table).where(self._pk == entity_id).values(**self._to_values(entity))
        return await self._write(statement, "actualizar", entity_id)

    async def delete(self, entity_id: int) -> WriteResult:
        """Elimina la fila con el identificador dado."""
        if not _is_valid_id(entity_id):
            return WriteResult.failure(ResultKind.INVALID_ID, entity_id)

        statement = delete(self.table).where(self._pk == entity_id)
        return await self._write(statement, "eliminar", entity_id)

    async def _write(self, statement: Executable, action: str, entity_id: int) -> WriteResult:
        result = await self._run(statement, action)
        if result is None:
            return WriteResult.failure(ResultKind.STORE_ERROR, entity_id)
        if result.rowcount < 1:
            logger.info(f"Ninguna fila afectada al {action} {self.entity_name} {entity_id}")
            return WriteResult.failure(ResultKind.NO_ROWS, entity_id)
        logger.info(f"Operación '{action}' sobre {self.entity_name} {entity_id} completada")
        return WriteResult.success(result.rowcount, entity_id)


def _is_valid_id(entity_id: Any) -> bool:
    return isinstance(entity_id, int) and not isinstance(entity_id, bool) and 0 < entity_id <= MAX_INTEGER
