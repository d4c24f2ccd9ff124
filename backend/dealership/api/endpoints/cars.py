# backend/dealership/api/endpoints/cars.py
"""
Endpoints REST para operaciones CRUD de carros.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, status

from dealership.api import deps
from dealership.api.responses import OperationMessages, message_response, write_response
from dealership.crud.car_crud import CarRepository
from dealership.db.database import MAX_INTEGER
from dealership.schemas.car_schema import Car, CarBase
from dealership.schemas.message_schema import CreatedResponse, MessageResponse

router = APIRouter()

CREATE_MESSAGES = OperationMessages(
    success="Carro cadastrado com sucesso!",
    no_rows="Erro ao cadastra o carro. Entre em contato com o administrador do sistema.",
    store_error="Não foi possível cadastrar o carro. Entre em contato com o administrador do sistema.",
)
DELETE_MESSAGES = OperationMessages(
    success="O carro foi removido com sucesso!",
    no_rows="Erro ao remover o carro. Entre em contato com o administrador do sistema.",
    store_error="Não foi possível remover o carro. Entre em contato com o administrador do sistema.",
)
UPDATE_MESSAGES = OperationMessages(
    success="Carro atualizado com sucesso!",
    no_rows="Não foi possível atualizar o carro. O carro não foi encontrado.",
    store_error="Não foi possível atualizar o carro. Entre em contato com o administrador.",
)


@router.get("/lista/carros", response_model=List[Car])
async def list_cars(repository: CarRepository = Depends(deps.get_car_repository)):
    """Obtiene la lista completa de carros."""
    result = await repository.list_all()
    if not result.ok:
        return message_response(status.HTTP_400_BAD_REQUEST, "Não foi possível acessar a listagem de carros")
    return result.items


@router.post("/novo/carros", response_model=CreatedResponse)
async def create_car(
    car_in: CarBase,
    repository: CarRepository = Depends(deps.get_car_repository),
):
    """Registra un nuevo carro y devuelve el ID asignado."""
    car = Car(**car_in.model_dump())
    result = await repository.create(car)
    return write_response(result, CREATE_MESSAGES, include_id=True)


@router.delete("/delete/carros/{id_carro}", response_model=MessageResponse)
async def delete_car(
    id_carro: int = Path(..., gt=0, le=MAX_INTEGER),
    repository: CarRepository = Depends(deps.get_car_repository),
):
    """Elimina un carro por su ID."""
    result = await repository.delete(id_carro)
    return write_response(result, DELETE_MESSAGES)


@router.put("/atualizar/carros/{id_carro}", response_model=MessageResponse)
async def update_car(
    car_in: CarBase,
    id_carro: int = Path(..., gt=0, le=MAX_INTEGER),
    repository: CarRepository = Depends(deps.get_car_repository),
):
    """Actualiza todos los datos de un carro existente."""
    car = Car(**car_in.model_dump())
    car.id = id_carro
    result = await repository.update(car)
    return write_response(result, UPDATE_MESSAGES)
