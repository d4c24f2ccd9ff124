# backend/dealership/api/endpoints/clients.py
"""
Endpoints REST para operaciones CRUD de clientes.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, status

from dealership.api import deps
from dealership.api.responses import OperationMessages, message_response, write_response
from dealership.crud.client_crud import ClientRepository
from dealership.db.database import MAX_INTEGER
from dealership.schemas.client_schema import Client, ClientBase
from dealership.schemas.message_schema import CreatedResponse, MessageResponse

router = APIRouter()

CREATE_MESSAGES = OperationMessages(
    success="Cliente cadastrado com sucesso!",
    no_rows="Erro ao cadastra o cliente. Entre em contato com o administrador do sistema.",
    store_error="Não foi possível cadastrar o cliente. Entre em contato com o administrador do sistema.",
)
DELETE_MESSAGES = OperationMessages(
    success="O cliente foi removido com sucesso!",
    no_rows="Erro ao remover o cliente. Entre em contato com o administrador do sistema.",
    store_error="Não foi possível remover o cliente. Entre em contato com o administrador do sistema.",
)
UPDATE_MESSAGES = OperationMessages(
    success="Cliente atualizado com sucesso!",
    no_rows="Não foi possível atualizar o cliente. O cliente não foi encontrado.",
    store_error="Não foi possível atualizar o cliente. Entre em contato com o administrador.",
)


@router.get("/lista/clientes", response_model=List[Client])
async def list_clients(repository: ClientRepository = Depends(deps.get_client_repository)):
    """Obtiene la lista completa de clientes."""
    result = await repository.list_all()
    if not result.ok:
        return message_response(status.HTTP_400_BAD_REQUEST, "Não foi possível acessar a listagem de clientes")
    return result.items


@router.post("/novo/clientes", response_model=CreatedResponse)
async def create_client(
    client_in: ClientBase,
    repository: ClientRepository = Depends(deps.get_client_repository),
):
    """Registra un nuevo cliente."""
    client = Client(**client_in.model_dump())
    result = await repository.create(client)
    return write_response(result, CREATE_MESSAGES, include_id=True)


@router.delete("/delete/clientes/{id_cliente}", response_model=MessageResponse)
async def delete_client(
    id_cliente: int = Path(..., gt=0, le=MAX_INTEGER),
    repository: ClientRepository = Depends(deps.get_client_repository),
):
    result = await repository.delete(id_cliente)
    return write_response(result, DELETE_MESSAGES)


@router.put("/atualizar/clientes/{id_cliente}", response_model=MessageResponse)
async def update_client(
    client_in: ClientBase,
    id_cliente: int = Path(..., gt=0, le=MAX_INTEGER),
    repository: ClientRepository = Depends(deps.get_client_repository),
):
    client = Client(**client_in.model_dump())
    client.id = id_cliente
    result = await repository.update(client)
    return write_response(result, UPDATE_MESSAGES)
