# backend/dealership/api/endpoints/sales_orders.py
"""
Este archivo contiene los endpoints para los pedidos de venta.

Un pedido referencia un carro y un cliente por su ID; la existencia de
ambos no se comprueba aquí, solo las restricciones de la base de datos.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, status

from dealership.api import deps
from dealership.api.responses import OperationMessages, message_response, write_response
from dealership.crud.sales_order_crud import SalesOrderRepository
from dealership.db.database import MAX_INTEGER
from dealership.schemas.message_schema import CreatedResponse, MessageResponse
from dealership.schemas.sales_order_schema import SalesOrder, SalesOrderBase

router = APIRouter()

CREATE_MESSAGES = OperationMessages(
    success="Pedido de Venda cadastrado com sucesso!",
    no_rows="Erro ao cadastrar o Pedido de Venda. Entre em contato com o administrador do sistema.",
    store_error="Não foi possível cadastrar o Pedido de Venda. Entre em contato com o administrador do sistema.",
)
DELETE_MESSAGES = OperationMessages(
    success="O pedido foi removido com sucesso!",
    no_rows="Erro ao remover o pedido. Entre em contato com o administrador do sistema.",
    store_error="Não foi possível remover o pedido. Entre em contato com o administrador.",
)
UPDATE_MESSAGES = OperationMessages(
    success="Pedido atualizado com sucesso!",
    no_rows="Não foi possível atualizar o pedido. O pedido não foi encontrado.",
    store_error="Não foi possível atualizar o pedido. Entre em contato com o administrador.",
)


@router.get("/lista/pedidos", response_model=List[SalesOrder])
async def list_sales_orders(repository: SalesOrderRepository = Depends(deps.get_sales_order_repository)):
    """Obtiene la lista completa de pedidos de venta."""
    result = await repository.list_all()
    if not result.ok:
        return message_response(status.HTTP_400_BAD_REQUEST, "Não foi possível acessar a listagem de pedidos")
    return result.items


@router.post("/novo/pedido", response_model=CreatedResponse)
async def create_sales_order(
    order_in: SalesOrderBase,
    repository: SalesOrderRepository = Depends(deps.get_sales_order_repository),
):
    """Registra un nuevo pedido de venta."""
    order = SalesOrder(**order_in.model_dump())
    result = await repository.create(order)
    return write_response(result, CREATE_MESSAGES, include_id=True)


@router.delete("/delete/pedido/{id_pedido}", response_model=MessageResponse)
async def delete_sales_order(
    id_pedido: int = Path(..., gt=0, le=MAX_INTEGER),
    repository: SalesOrderRepository = Depends(deps.get_sales_order_repository),
):
    """Elimina un pedido de venta por su ID."""
    result = await repository.delete(id_pedido)
    return write_response(result, DELETE_MESSAGES)


@router.put("/atualizar/pedido/{id_pedido}", response_model=MessageResponse)
async def update_sales_order(
    order_in: SalesOrderBase,
    id_pedido: int = Path(..., gt=0, le=MAX_INTEGER),
    repository: SalesOrderRepository = Depends(deps.get_sales_order_repository),
):
    """Actualiza todos los datos de un pedido de venta existente."""
    order = SalesOrder(**order_in.model_dump())
    order.id = id_pedido
    result = await repository.update(order)
    return write_response(result, UPDATE_MESSAGES)
