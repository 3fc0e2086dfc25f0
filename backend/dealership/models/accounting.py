from sqlalchemy import Column, String, Date, Numeric, Text
from ..core.db import Base
from .base import RecordMixin

class AccountingEntry(RecordMixin, Base):
    __tablename__ = "accounting"

    accounting_id      = Column(String(50),  nullable=False, unique=True)
    transaction_date   = Column(Date,        nullable=False)
    transaction_type   = Column(String(50),  nullable=False)
    account_name       = Column(String(200), nullable=False)
    debit_amount       = Column(Numeric(12, 2))
    credit_amount      = Column(Numeric(12, 2))
    payment_method     = Column(String(50),  nullable=False)
    reference_id       = Column(String(100))
    description        = Column(Text)
    transaction_status = Column(String(30),  nullable=False, index=True)
    processed_by       = Column(String(100))
    approval_date      = Column(Date)
