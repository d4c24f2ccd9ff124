# backend/dealership/crud/sales_order_crud.py
"""
Operaciones CRUD para la tabla pedido_venda.

El valor del pedido se guarda como NUMERIC(10, 2): se enlaza como Decimal
al escribir y se devuelve como float al leer.
"""

from decimal import Decimal
from typing import Any, Dict, Mapping

from dealership.crud.base_crud import BaseRepository
from dealership.db.models.sales_order_model import sales_order_table
from dealership.schemas.sales_order_schema import SalesOrder


class SalesOrderRepository(BaseRepository[SalesOrder]):
    table = sales_order_table
    id_column = "id_pedido"
    entity_name = "pedido de venta"

    def _to_values(self, order: SalesOrder) -> Dict[str, Any]:
        return {
            "id_carro": order.car_id,
            "id_cliente": order.client_id,
            "data_pedido": order.order_date,
            # vía str(): 45000.1 se enlaza como 45000.1 y no como su aproximación binaria
            "valor_pedido": Decimal(str(order.amount)),
        }

    def _from_row(self, row: Mapping[str, Any]) -> SalesOrder:
        order = SalesOrder(
            car_id=row["id_carro"],
            client_id=row["id_cliente"],
            order_date=row["data_pedido"],
            amount=float(row["valor_pedido"]),
        )
        order.id = row["id_pedido"]
        return order
