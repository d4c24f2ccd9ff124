# backend/dealership/crud/results.py
"""
Resultados etiquetados de los repositorios.

Los repositorios nunca lanzan errores de la base de datos: devuelven uno de
estos resultados para que el llamador distinga "ninguna fila afectada" de
"la base de datos falló".
"""

import enum
from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class ResultKind(str, enum.Enum):
    """Define los posibles resultados de una operación de repositorio."""
    OK = "ok"
    NO_ROWS = "no_rows"
    INVALID_ID = "invalid_id"
    STORE_ERROR = "store_error"


@dataclass(frozen=True)
class WriteResult:
    """Resultado de create / update / delete."""
    kind: ResultKind
    rows_affected: int = 0
    entity_id: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.kind is ResultKind.OK

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, rows_affected: int, entity_id: Optional[int] = None) -> "WriteResult":
        return cls(ResultKind.OK, rows_affected, entity_id)

    @classmethod
    def failure(cls, kind: ResultKind, entity_id: Optional[int] = None) -> "WriteResult":
        return cls(kind, 0, entity_id)


@dataclass(frozen=True)
class ListResult(Generic[T]):
    """Resultado de list_all; una tabla vacía es OK con ``items`` vacío."""
    kind: ResultKind
    items: List[T] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.kind is ResultKind.OK

    def __bool__(self) -> bool:
        return self.ok
