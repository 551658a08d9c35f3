# apnacart/data/models/vegetable.py
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String

from apnacart.data.database import Base


def _now():
    return datetime.now(timezone.utc)


class VegetableModel(Base):
    __tablename__ = "vegetables"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    fixed_weight = Column(String(10), nullable=False, default="500g")
    image_url = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_now, onupdate=_now)
