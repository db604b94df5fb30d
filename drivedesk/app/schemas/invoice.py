"""Invoice schemas."""

from datetime import datetime
from typing import List

from drivedesk.app.schemas.base import CamelModel
from drivedesk.app.schemas.lesson import LessonRead


class InvoiceGenerate(CamelModel):
    candidate_id: int


class InvoiceRead(CamelModel):
    id: int
    invoice_number: str
    candidate_id: int
    candidate_name: str
    total_amount: int
    status: str
    created_at: datetime


class InvoiceGenerated(CamelModel):
    invoice: InvoiceRead
    lessons: List[LessonRead]
