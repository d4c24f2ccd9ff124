# backend/dealership/db/models/car_model.py
"""
Se encarga de definir el modelo de tabla de carros.
"""

from sqlalchemy import Column, Integer, String

from dealership.db.database import Base


class CarRecord(Base):
    __tablename__ = "carro"
    __table_args__ = {"sqlite_autoincrement": True}

    id_carro = Column(Integer, primary_key=True, autoincrement=True)
    marca = Column(String(100), nullable=False)
    modelo = Column(String(100), nullable=False)
    ano = Column(Integer, nullable=False)
    cor = Column(String(50), nullable=False)

    def __repr__(self):
        return f"<CarRecord(id={self.id_carro}, marca='{self.marca}', modelo='{self.modelo}')>"


car_table = CarRecord.__table__
