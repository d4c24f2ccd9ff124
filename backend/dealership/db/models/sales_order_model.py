# backend/dealership/db/models/sales_order_model.py
"""
Este archivo contiene el modelo de tabla de pedidos de venta.
"""

from sqlalchemy import Column, Date, ForeignKey, Integer, Numeric

from dealership.db.database import Base


class SalesOrderRecord(Base):
    __tablename__ = "pedido_venda"
    __table_args__ = {"sqlite_autoincrement": True}

    id_pedido = Column(Integer, primary_key=True, autoincrement=True)
    # Las FK solo existen en el esquema; la aplicación no valida la referencia
    id_carro = Column(Integer, ForeignKey("carro.id_carro"), nullable=False)
    id_cliente = Column(Integer, ForeignKey("cliente.id_cliente"), nullable=False)
    data_pedido = Column(Date, nullable=False)
    valor_pedido = Column(Numeric(10, 2), nullable=False)

    def __repr__(self):
        return f"<SalesOrderRecord(id={self.id_pedido}, id_carro={self.id_carro}, id_cliente={self.id_cliente})>"


sales_order_table = SalesOrderRecord.__table__
