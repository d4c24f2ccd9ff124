# backend/dealership/schemas/client_schema.py

"""
Esquemas Pydantic para la entidad Client.

CPF y teléfono se tratan como identificadores opacos: se aceptan como
número o texto en JSON y siempre se guardan como texto.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ClientBase(BaseModel):
    """Propiedades de un cliente, sin identificador."""
    name: str = Field(..., alias="nome", description="Nombre del cliente")
    cpf: str = Field(..., description="CPF del cliente")
    phone: str = Field(..., alias="telefone", description="Teléfono del cliente")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("cpf", "phone", mode="before")
    @classmethod
    def number_as_text(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class Client(ClientBase):
    """Cliente; ``id`` vale 0 hasta que la base de datos lo asigna."""
    id: int = Field(0, alias="id_cliente")
