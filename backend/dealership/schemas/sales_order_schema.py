# backend/dealership/schemas/sales_order_schema.py
"""
Se encarga de definir los esquemas Pydantic para la entidad SalesOrder.

Además de los nombres de columna se aceptan las claves camelCase de los
clientes antiguos (idCarro, idCliente, dataPedido, valorPedido); las
respuestas usan siempre los nombres de columna.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from dealership.db.database import MAX_INTEGER

# valor_pedido es NUMERIC(10, 2)
MAX_AMOUNT = 10**8


class SalesOrderBase(BaseModel):
    """Propiedades de un pedido de venta, sin identificador."""
    car_id: int = Field(
        ...,
        alias="id_carro",
        validation_alias=AliasChoices("id_carro", "idCarro", "car_id"),
        le=MAX_INTEGER,
        description="ID del carro vendido",
    )
    client_id: int = Field(
        ...,
        alias="id_cliente",
        validation_alias=AliasChoices("id_cliente", "idCliente", "client_id"),
        le=MAX_INTEGER,
        description="ID del cliente comprador",
    )
    order_date: date = Field(
        ...,
        alias="data_pedido",
        validation_alias=AliasChoices("data_pedido", "dataPedido", "order_date"),
        description="Fecha del pedido",
    )
    amount: float = Field(
        ...,
        alias="valor_pedido",
        validation_alias=AliasChoices("valor_pedido", "valorPedido", "amount"),
        gt=-MAX_AMOUNT,
        lt=MAX_AMOUNT,
        description="Valor del pedido, con dos decimales como máximo",
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("order_date", mode="before")
    @classmethod
    def truncate_datetime(cls, v: Any) -> Any:
        """Acepta fecha y hora, y se queda solo con la fecha."""
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, str) and len(v) > 10:
            return datetime.fromisoformat(v.replace("Z", "+00:00")).date()
        return v

    @field_validator("amount")
    @classmethod
    def at_most_two_decimals(cls, v: float) -> float:
        if Decimal(str(v)).as_tuple().exponent < -2:
            raise ValueError("valor_pedido admite como máximo dos casas decimais")
        return v


class SalesOrder(SalesOrderBase):
    """Pedido de venta; ``id`` vale 0 hasta que la base de datos lo asigna."""
    id: int = Field(0, alias="id_pedido")
