"""Admin invoice endpoints."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from drivedesk.app.core.directory import Directory, get_directory
from drivedesk.app.core.principal import Principal
from drivedesk.app.db.session import get_db
from drivedesk.app.dependencies.auth import require_admin
from drivedesk.app.schemas.invoice import InvoiceGenerate, InvoiceGenerated, InvoiceRead
from drivedesk.app.services.billing import create_invoice_for_candidate, list_invoices

router = APIRouter(prefix="/api/invoices", tags=["invoices"])


@router.post("/generate", response_model=InvoiceGenerated, status_code=status.HTTP_201_CREATED)
async def generate_invoice(
    payload: InvoiceGenerate,
    db: Session = Depends(get_db),
    directory: Directory = Depends(get_directory),
    current_admin: Principal = Depends(require_admin),
):
    invoice, lessons = create_invoice_for_candidate(db, directory, payload.candidate_id)
    return {"invoice": invoice, "lessons": lessons}


@router.get("", response_model=List[InvoiceRead])
async def read_invoices(
    db: Session = Depends(get_db),
    current_admin: Principal = Depends(require_admin),
):
    return list_invoices(db)
