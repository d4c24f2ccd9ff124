# backend/dealership/db/models/client_model.py
"""
Se encarga de definir el modelo de tabla de clientes.
"""

from sqlalchemy import Column, Integer, String

from dealership.db.database import Base


class ClientRecord(Base):
    __tablename__ = "cliente"
    __table_args__ = {"sqlite_autoincrement": True}

    id_cliente = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String(255), nullable=False)
    # CPF y teléfono son identificadores opacos: se guardan como texto
    cpf = Column(String(20), nullable=False)
    telefone = Column(String(20), nullable=False)

    def __repr__(self):
        return f"<ClientRecord(id={self.id_cliente}, nome='{self.nome}')>"


client_table = ClientRecord.__table__
