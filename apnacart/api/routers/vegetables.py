# apnacart/api/routers/vegetables.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from apnacart.data.database import get_db
from apnacart.domain.errors import VegetableNotFound
from apnacart.domain.schemas import LinkImagesOut, VegetableIn, VegetableOut, VegetableUpdate
from apnacart.services.catalog_service import CatalogService

router = APIRouter(prefix="/api/vegetables", tags=["vegetables"])


def get_service(db: Session):
    return CatalogService(db)


@router.get("", response_model=List[VegetableOut])
def list_vegetables(db: Session = Depends(get_db)):
    return get_service(db).list_vegetables()


@router.post("", response_model=VegetableOut, status_code=201)
def create_vegetable(payload: VegetableIn, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.create_vegetable(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/link-images", response_model=LinkImagesOut)
def link_images(only_missing: bool = True, db: Session = Depends(get_db)):
    """Fill in images for vegetables by name matching."""
    return {"updated": get_service(db).relink_images(only_missing=only_missing)}


@router.get("/{vegetable_id}", response_model=VegetableOut)
def get_vegetable(vegetable_id: int, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.get_vegetable(vegetable_id)
    except VegetableNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{vegetable_id}", response_model=VegetableOut)
def update_vegetable(vegetable_id: int, payload: VegetableUpdate, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.update_vegetable(vegetable_id, payload)
    except VegetableNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{vegetable_id}", status_code=204)
def delete_vegetable(vegetable_id: int, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        svc.delete_vegetable(vegetable_id)
    except VegetableNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
