# backend/dealership/api/responses.py
"""
Conversión de los resultados de los repositorios a respuestas HTTP.

Todas las operaciones responden 200 cuando tienen éxito y 400 cuando fallan.
Los fallos sin filas afectadas y los fallos de la base de datos usan
mensajes distintos, pero el cliente nunca ve el error original.
"""

from dataclasses import dataclass

from fastapi import status
from fastapi.responses import JSONResponse

from dealership.crud.results import ResultKind, WriteResult

INVALID_ID_MESSAGE = "ID inválido. Por favor, forneça um ID válido."


@dataclass(frozen=True)
class OperationMessages:
    """Mensajes de una operación de escritura."""
    success: str
    no_rows: str
    store_error: str


def message_response(status_code: int, mensagem: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"mensagem": mensagem, **extra})


def write_response(result: WriteResult, messages: OperationMessages, include_id: bool = False) -> JSONResponse:
    """
    Traduce un ``WriteResult`` a la respuesta HTTP correspondiente.

    Con ``include_id`` la respuesta de éxito incluye el identificador
    asignado (creación).
    """
    if result.ok:
        extra = {"id": result.entity_id} if include_id else {}
        return message_response(status.HTTP_200_OK, messages.success, **extra)
    if result.kind is ResultKind.INVALID_ID:
        return message_response(status.HTTP_400_BAD_REQUEST, INVALID_ID_MESSAGE)
    if result.kind is ResultKind.NO_ROWS:
        return message_response(status.HTTP_400_BAD_REQUEST, messages.no_rows)
    return message_response(status.HTTP_400_BAD_REQUEST, messages.store_error)
