"""Supplier administration router."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from techstock.database import get_db
from techstock.dependencies.admin import get_admin_user
from techstock.schemas.auth import TokenClaims
from techstock.schemas.supplier import SupplierCreate, SupplierCreated, SupplierRead
from techstock.services.repositories import SupplierRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/suppliers", tags=["suppliers"])


@router.get("", response_model=list[SupplierRead])
def list_suppliers(
    db: Session = Depends(get_db),
    admin: TokenClaims = Depends(get_admin_user),
):
    """List all suppliers ordered by name."""
    return SupplierRepository(db).find_all()


@router.post("", response_model=SupplierCreated, status_code=status.HTTP_201_CREATED)
def add_supplier(
    data: SupplierCreate,
    db: Session = Depends(get_db),
    admin: TokenClaims = Depends(get_admin_user),
) -> dict:
    """Add a new supplier."""
    supplier = SupplierRepository(db).add(data.name, data.contact)
    db.commit()

    logger.info(f"Supplier {supplier.id} added by user {admin.user_id}")
    return {"message": "Supplier added successfully", "supplier_id": supplier.id}
