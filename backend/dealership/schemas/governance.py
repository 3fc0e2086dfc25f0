from datetime import date
from typing import Optional

from .common import CreateModel, PatchModel, Text


# ---- Audits ----
class AuditCreate(CreateModel):
    audit_id: Text
    audit_type: Text
    audit_date: date
    auditor_name: Text
    area_audited: Text
    audit_status: Text
    non_compliance_issues: Optional[str] = None
    corrective_actions: Optional[str] = None
    report_submission_date: Optional[date] = None
    follow_up_date: Optional[date] = None
    audit_summary: Optional[str] = None


class AuditUpdate(PatchModel):
    audit_id: Optional[Text] = None
    audit_type: Optional[Text] = None
    audit_date: Optional[date] = None
    auditor_name: Optional[Text] = None
    area_audited: Optional[Text] = None
    audit_status: Optional[Text] = None
    non_compliance_issues: Optional[str] = None
    corrective_actions: Optional[str] = None
    report_submission_date: Optional[date] = None
    follow_up_date: Optional[date] = None
    audit_summary: Optional[str] = None


# ---- Compliance ----
class ComplianceCreate(CreateModel):
    compliance_id: Text
    compliance_type: Text
    applicable_regulation: Text
    effective_date: date
    due_date: date
    responsible_person: Text
    compliance_status: Text
    documentation_link: Optional[str] = None
    audit_trail_id: Optional[str] = None
    remarks: Optional[str] = None
    department: Text


class ComplianceUpdate(PatchModel):
    compliance_type: Optional[Text] = None
    applicable_regulation: Optional[Text] = None
    effective_date: Optional[date] = None
    due_date: Optional[date] = None
    responsible_person: Optional[Text] = None
    compliance_status: Optional[Text] = None
    documentation_link: Optional[str] = None
    audit_trail_id: Optional[str] = None
    remarks: Optional[str] = None
    department: Optional[Text] = None
