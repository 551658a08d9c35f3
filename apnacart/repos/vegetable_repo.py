# apnacart/repos/vegetable_repo.py
from typing import List

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from apnacart.data.models.vegetable import VegetableModel


class VegetableRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_vegetables(self) -> List[VegetableModel]:
        stmt = select(VegetableModel).order_by(
            VegetableModel.created_at.desc(),
            VegetableModel.id.desc(),
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_vegetable(self, vegetable_id: int) -> VegetableModel | None:
        return self.db.get(VegetableModel, vegetable_id)

    def count(self) -> int:
        return self.db.execute(select(func.count(VegetableModel.id))).scalar_one()

    def save(self, vegetable: VegetableModel) -> VegetableModel:
        self.db.add(vegetable)
        self.db.commit()
        self.db.refresh(vegetable)
        return vegetable

    def delete_vegetable(self, vegetable: VegetableModel) -> None:
        self.db.delete(vegetable)
        self.db.commit()

    def replace_all(self, vegetables: List[VegetableModel]) -> int:
        self.db.execute(delete(VegetableModel))
        self.db.add_all(vegetables)
        self.db.commit()
        return len(vegetables)

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
