# datagatekit/models/row_store_models.py
from sqlalchemy import Column, Integer, String, JSON, ForeignKey, UniqueConstraint
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class StoredTable(Base):
    __tablename__ = "datagate_tables"
    id = Column(Integer, primary_key=True, autoincrement=True)  # storage order
    full_name = Column(String(255), unique=True, nullable=False)  # e.g., 'sales.orders'


class StoredRow(Base):
    __tablename__ = "datagate_rows"
    __table_args__ = (UniqueConstraint("table_id", "position"),)
    id = Column(Integer, primary_key=True, autoincrement=True)
    table_id = Column(Integer, ForeignKey("datagate_tables.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    data = Column(JSON, nullable=False)
