# backend/dealership/crud/client_crud.py
"""
Este archivo contiene las operaciones CRUD para la tabla cliente.
"""

from typing import Any, Dict, Mapping

from dealership.crud.base_crud import BaseRepository
from dealership.db.models.client_model import client_table
from dealership.schemas.client_schema import Client


class ClientRepository(BaseRepository[Client]):
    table = client_table
    id_column = "id_cliente"
    entity_name = "cliente"

    def _to_values(self, client: Client) -> Dict[str, Any]:
        return {
            "nome": client.name,
            "cpf": client.cpf,
            "telefone": client.phone,
        }

    def _from_row(self, row: Mapping[str, Any]) -> Client:
        client = Client(name=row["nome"], cpf=row["cpf"], phone=row["telefone"])
        client.id = row["id_cliente"]
        return client
