# apnacart/api/routers/setup.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from apnacart.data.database import get_db
from apnacart.domain.schemas import SetupOut
from apnacart.services.catalog_service import CatalogService

router = APIRouter(prefix="/api/setup-database", tags=["setup"])


@router.get("", response_model=SetupOut)
def check_database(db: Session = Depends(get_db)):
    count = CatalogService(db).count()
    return {"message": f"Database has {count} vegetables", "count": count}


@router.post("", response_model=SetupOut)
def setup_database(db: Session = Depends(get_db)):
    """
    Wipes the catalog and loads the default vegetables.
    """
    count = CatalogService(db).setup_database()
    return {"message": f"Successfully added {count} vegetables to the database", "count": count}
