# backend/dealership/schemas/car_schema.py

"""
Esquemas Pydantic para la entidad Car.

Los nombres de atributo en Python están en inglés; en JSON se usan los
nombres de columna de la tabla ``carro`` (marca, modelo, ano, cor, id_carro).

Patrón de esquemas utilizado:
- CarBase: Datos recibidos al crear o actualizar (sin identificador)
- Car: Entidad completa, con el identificador asignado por la base de datos
"""

from pydantic import BaseModel, ConfigDict, Field

from dealership.db.database import MAX_INTEGER


class CarBase(BaseModel):
    """Propiedades de un carro, sin identificador."""
    brand: str = Field(..., alias="marca", description="Marca del carro")
    model: str = Field(..., alias="modelo", description="Modelo del carro")
    year: int = Field(..., alias="ano", le=MAX_INTEGER, description="Año de fabricación")
    color: str = Field(..., alias="cor", description="Color del carro")

    model_config = ConfigDict(populate_by_name=True)


class Car(CarBase):
    """Carro; ``id`` vale 0 hasta que la base de datos lo asigna."""
    id: int = Field(0, alias="id_carro")
