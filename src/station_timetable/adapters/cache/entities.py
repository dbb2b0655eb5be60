"""SQLAlchemy ORM models for the local station and cause category cache."""

from sqlalchemy import Boolean, Column, Float, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class StationCacheEntity(Base):
    __tablename__ = "stations"

    code = Column(Integer, primary_key=True, autoincrement=False)
    type = Column(String, nullable=False)
    passenger_traffic = Column(Boolean, nullable=False)
    name = Column(String, nullable=False, index=True)
    short_code = Column(String, nullable=False)
    country_code = Column(String, nullable=False)
    longitude = Column(Float, nullable=False)
    latitude = Column(Float, nullable=False)


class CauseCategoryCacheEntity(Base):
    __tablename__ = "cause_categories"

    id = Column(Integer, primary_key=True, autoincrement=False)
    level = Column(Integer, primary_key=True, autoincrement=False)  # 1, 2 or 3
    name = Column(String, nullable=False)
    # Passenger friendly names are either all present or all missing
    passenger_term_fi = Column(String, nullable=True)
    passenger_term_en = Column(String, nullable=True)
    passenger_term_sv = Column(String, nullable=True)
