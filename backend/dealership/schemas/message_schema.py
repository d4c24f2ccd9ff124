# backend/dealership/schemas/message_schema.py
"""
Esquemas de las respuestas con mensaje de la API.
"""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    mensagem: str


class CreatedResponse(MessageResponse):
    """Respuesta de creación, con el identificador asignado."""
    id: int