from datetime import date
from typing import Optional

from .common import CreateModel, Money, PatchModel, Text


class AccountingCreate(CreateModel):
    accounting_id: Text
    transaction_date: date
    transaction_type: Text
    account_name: Text
    debit_amount: Optional[Money] = None
    credit_amount: Optional[Money] = None
    payment_method: Text
    reference_id: Optional[str] = None
    description: Optional[str] = None
    transaction_status: Text
    processed_by: Optional[str] = None
    approval_date: Optional[date] = None


class AccountingUpdate(PatchModel):
    transaction_date: Optional[date] = None
    transaction_type: Optional[Text] = None
    account_name: Optional[Text] = None
    debit_amount: Optional[Money] = None
    credit_amount: Optional[Money] = None
    payment_method: Optional[Text] = None
    reference_id: Optional[str] = None
    description: Optional[str] = None
    transaction_status: Optional[Text] = None
    processed_by: Optional[str] = None
    approval_date: Optional[date] = None
