# backend/dealership/api/deps.py
"""
Módulo de dependencias para FastAPI.

Centraliza las dependencias inyectadas en los endpoints: el gateway de base
de datos (creado en el arranque y guardado en ``app.state``), un repositorio
por entidad.
"""

from fastapi import Depends, Request

from dealership.crud.car_crud import CarRepository
from dealership.crud.client_crud import ClientRepository
from dealership.crud.sales_order_crud import SalesOrderRepository
from dealership.db.database import DatabaseGateway


def get_gateway(request: Request) -> DatabaseGateway:
    """
    Dependencia de FastAPI para obtener el gateway compartido.
    """
    return request.app.state.gateway


def get_car_repository(gateway: DatabaseGateway = Depends(get_gateway)) -> CarRepository:
    return CarRepository(gateway)


def get_client_repository(gateway: DatabaseGateway = Depends(get_gateway)) -> ClientRepository:
    return ClientRepository(gateway)


def get_sales_order_repository(gateway: DatabaseGateway = Depends(get_gateway)) -> SalesOrderRepository:
    return SalesOrderRepository(gateway)
