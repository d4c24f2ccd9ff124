# backend/dealership/crud/car_crud.py
"""
Operaciones CRUD para la tabla carro.
"""

from typing import Any, Dict, Mapping

from dealership.crud.base_crud import BaseRepository
from dealership.db.models.car_model import car_table
from dealership.schemas.car_schema import Car


class CarRepository(BaseRepository[Car]):
    table = car_table
    id_column = "id_carro"
    entity_name = "carro"

    def _to_values(self, car: Car) -> Dict[str, Any]:
        return {
            "marca": car.brand,
            "modelo": car.model,
            "ano": car.year,
            "cor": car.color,
        }

    def _from_row(self, row: Mapping[str, Any]) -> Car:
        car = Car(brand=row["marca"], model=row["modelo"], year=row["ano"], color=row["cor"])
        car.id = row["id_carro"]
        return car
