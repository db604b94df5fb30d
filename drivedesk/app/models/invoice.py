"""Invoice model for billing completed lessons."""

from sqlalchemy import Column, Integer, String

from drivedesk.app.core.enums import InvoiceStatus
from drivedesk.app.core.time import utc_now
from drivedesk.app.db.base_class import Base
from drivedesk.app.db.types import UTCDateTime


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True, index=True)
    invoice_number = Column(String(32), nullable=False, index=True)
    candidate_id = Column(Integer, nullable=False, index=True)
    candidate_name = Column(String(255), nullable=False)
    total_amount = Column(Integer, nullable=False, default=0)
    status = Column(String(20), default=InvoiceStatus.DRAFT.value, nullable=False)
    created_at = Column(UTCDateTime, default=utc_now, nullable=False)
