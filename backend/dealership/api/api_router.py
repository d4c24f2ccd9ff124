# backend/dealership/api/api_router.py
"""
Este archivo contiene el router principal de la API.

Las rutas son las de la API original (/lista, /novo, /delete, /atualizar),
sin prefijo de versión.
"""

from fastapi import APIRouter

from dealership.api.endpoints import cars, clients, sales_orders

api_router = APIRouter()

# ROUTER DE CARROS
api_router.include_router(cars.router, tags=["Carros"])

# ROUTER DE CLIENTES
api_router.include_router(clients.router, tags=["Clientes"])

# ROUTER DE PEDIDOS DE VENTA
api_router.include_router(sales_orders.router, tags=["Pedidos"])
