"""Billing service: turns completed, uninvoiced lessons into draft invoices."""

import logging
from typing import List, Tuple

from sqlalchemy.orm import Session

from drivedesk.app.core.directory import Directory
from drivedesk.app.core.enums import InvoiceStatus, LessonStatus
from drivedesk.app.core.exceptions import CandidateNotFound, NothingToInvoice
from drivedesk.app.core.time import epoch_millis, utc_now
from drivedesk.app.db.session import store_lock
from drivedesk.app.models.invoice import Invoice
from drivedesk.app.models.lesson import Lesson

logger = logging.getLogger(__name__)


def get_uninvoiced_lessons_for_candidate(db: Session, candidate_id: int) -> List[Lesson]:
    """Return completed lessons for the candidate that no invoice has claimed yet."""
    return (
        db.query(Lesson)
        .filter(
            Lesson.candidate_id == candidate_id,
            Lesson.status == LessonStatus.COMPLETED.value,
            Lesson.invoice_id.is_(None),
        )
        .order_by(Lesson.id.asc())
        .all()
    )


def create_invoice_for_candidate(db: Session, directory: Directory, candidate_id: int) -> Tuple[Invoice, List[Lesson]]:
    candidate = directory.get_candidate(candidate_id)
    if candidate is None:
        raise CandidateNotFound()

    with store_lock:
        lessons = get_uninvoiced_lessons_for_candidate(db, candidate_id)
        if not lessons:
            raise NothingToInvoice()

        total_amount = sum(lesson.price or 0 for lesson in lessons)
        created_at = utc_now()
        invoice = Invoice(
            invoice_number=f"INV-{epoch_millis(created_at)}",
            candidate_id=candidate.id,
            candidate_name=candidate.name,
            total_amount=total_amount,
            status=InvoiceStatus.DRAFT.value,
            created_at=created_at,
        )
        try:
            db.add(invoice)
            db.flush()  # obtain invoice id for the lesson links
            for lesson in lessons:
                lesson.invoice_id = invoice.id
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(invoice)
        for lesson in lessons:
            db.refresh(lesson)

    logger.info(
        "Invoice %s (%s) generated for candidate %s covering %d lessons, total %s",
        invoice.id,
        invoice.invoice_number,
        candidate_id,
        len(lessons),
        total_amount,
    )
    return invoice, lessons


def list_invoices(db: Session) -> List[Invoice]:
    return db.query(Invoice).order_by(Invoice.id.asc()).all()
