# apnacart/services/catalog_service.py
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from apnacart.data.models.vegetable import VegetableModel
from apnacart.data.seed import default_vegetables
from apnacart.domain.catalog import CatalogItem
from apnacart.domain.errors import VegetableNotFound
from apnacart.domain.schemas import VegetableIn, VegetableUpdate
from apnacart.repos.vegetable_repo import VegetableRepo
from apnacart.services.image_matcher import auto_link_image, normalize_image_path, resolve_image
from apnacart.services.weights import parse_token
from apnacart.utils.logging import get_logger

logger = get_logger(__name__)


def to_catalog_item(vegetable: VegetableModel) -> CatalogItem:
    return CatalogItem(
        id=vegetable.id,
        name=vegetable.name,
        fixed_weight=parse_token(vegetable.fixed_weight),
        image_ref=normalize_image_path(vegetable.image_url),
    )


class CatalogService:
    """
    Admin use cases for the vegetable catalog, plus the read interface the
    cart routes use (list_catalog_items / get_catalog_item).
    """

    def __init__(self, db: Session):
        self.repo = VegetableRepo(db)

    # =====================================================
    # QUERY
    # =====================================================
    def list_vegetables(self) -> List[VegetableModel]:
        return self.repo.list_vegetables()

    def get_vegetable(self, vegetable_id: int) -> VegetableModel:
        vegetable = self.repo.get_vegetable(vegetable_id)
        if not vegetable:
            raise VegetableNotFound(vegetable_id)
        return vegetable

    def count(self) -> int:
        return self.repo.count()

    def list_catalog_items(self) -> List[CatalogItem]:
        return [to_catalog_item(v) for v in self.repo.list_vegetables()]

    def get_catalog_item(self, vegetable_id: int) -> CatalogItem:
        return to_catalog_item(self.get_vegetable(vegetable_id))

    # =====================================================
    # COMMANDS
    # =====================================================
    def create_vegetable(self, payload: VegetableIn) -> VegetableModel:
        name = payload.name.strip()
        if not name:
            raise ValueError("Name is required")

        vegetable = VegetableModel(
            name=name,
            fixed_weight=parse_token(payload.fixed_weight).value,
            image_url=auto_link_image(name, payload.image_url),
        )
        created = self._save(vegetable)

        logger.info(f"Created vegetable {created.id} '{created.name}' ({created.fixed_weight}) -> {created.image_url}")
        return created

    def update_vegetable(self, vegetable_id: int, payload: VegetableUpdate) -> VegetableModel:
        vegetable = self.get_vegetable(vegetable_id)
        data = payload.model_dump(exclude_unset=True)

        old_name = vegetable.name
        if data.get("name") is not None:
            name = data["name"].strip()
            if not name:
                raise ValueError("Name is required")
            vegetable.name = name

        if data.get("fixed_weight") is not None:
            vegetable.fixed_weight = parse_token(data["fixed_weight"]).value

        if "image_url" in data:
            vegetable.image_url = auto_link_image(vegetable.name, data["image_url"])
        elif vegetable.name != old_name and vegetable.image_url in (None, "", resolve_image(old_name)):
            # image was auto-linked, follow the new name
            vegetable.image_url = resolve_image(vegetable.name)

        updated = self._save(vegetable)
        logger.info(f"Updated vegetable {updated.id} '{updated.name}'")
        return updated

    def delete_vegetable(self, vegetable_id: int) -> None:
        vegetable = self.get_vegetable(vegetable_id)
        try:
            self.repo.delete_vegetable(vegetable)
        except SQLAlchemyError as e:
            logger.error(f"Deleting vegetable {vegetable_id} failed: {e}")
            self.repo.rollback()
            raise
        logger.info(f"Deleted vegetable {vegetable_id}")

    def relink_images(self, only_missing: bool = True) -> int:
        updated = 0
        for vegetable in self.repo.list_vegetables():
            if only_missing and vegetable.image_url:
                continue
            image = resolve_image(vegetable.name)
            if image != vegetable.image_url:
                logger.info(f"Linking '{vegetable.name}' -> {image}")
                vegetable.image_url = image
                updated += 1
        try:
            self.repo.commit()
        except SQLAlchemyError as e:
            logger.error(f"Linking images failed: {e}")
            self.repo.rollback()
            raise
        return updated

    def setup_database(self) -> int:
        """Replace the whole catalog with the default vegetable list."""
        try:
            count = self.repo.replace_all(default_vegetables())
        except SQLAlchemyError as e:
            logger.error(f"Seeding catalog failed: {e}")
            self.repo.rollback()
            raise
        logger.info(f"Seeded catalog with {count} vegetables")
        return count

    def _save(self, vegetable: VegetableModel) -> VegetableModel:
        name = vegetable.name
        try:
            return self.repo.save(vegetable)
        except SQLAlchemyError as e:
            # session is unusable until rolled back
            logger.error(f"Saving vegetable '{name}' failed: {e}")
            self.repo.rollback()
            raise
