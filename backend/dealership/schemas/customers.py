from datetime import date, datetime
from typing import Optional

from pydantic import Field

from .common import CreateModel, PatchModel, Text


# ---- Communication ----
class CommunicationCreate(CreateModel):
    communication_id: Text
    customer_id: Text
    communication_date: date
    communication_type: Text
    subject: Text
    message_content: Text
    sent_by: Text
    response_status: Text
    follow_up_required: bool
    follow_up_date: Optional[date] = None
    channel_used: Text


class CommunicationUpdate(PatchModel):
    communication_id: Optional[Text] = None
    customer_id: Optional[Text] = None
    communication_date: Optional[date] = None
    communication_type: Optional[Text] = None
    subject: Optional[Text] = None
    message_content: Optional[Text] = None
    sent_by: Optional[Text] = None
    response_status: Optional[Text] = None
    follow_up_required: Optional[bool] = None
    follow_up_date: Optional[date] = None
    channel_used: Optional[Text] = None


# ---- Customer engagements ----
class EngagementCreate(CreateModel):
    engagement_id: Text
    customer_id: Text
    engagement_type: Text
    engagement_date: date
    campaign_id: Optional[str] = None
    response_received: bool = False
    reward_points: Optional[int] = Field(default=None, ge=0)
    communication_method: Text
    engagement_outcome: Optional[str] = None
    follow_up_needed: bool = False
    next_engagement_date: Optional[date] = None


class EngagementUpdate(PatchModel):
    engagement_id: Optional[Text] = None
    customer_id: Optional[Text] = None
    engagement_type: Optional[Text] = None
    engagement_date: Optional[date] = None
    campaign_id: Optional[str] = None
    response_received: Optional[bool] = None
    reward_points: Optional[int] = Field(default=None, ge=0)
    communication_method: Optional[Text] = None
    engagement_outcome: Optional[str] = None
    follow_up_needed: Optional[bool] = None
    next_engagement_date: Optional[date] = None


# ---- Customer service (service_request_id sunucuda üretilir) ----
class ServiceRequestCreate(CreateModel):
    customer_id: Text
    issue_type: Text
    issue_description: Text
    assigned_agent: Optional[str] = None
    priority_level: Text
    communication_mode: Text


class ServiceRequestUpdate(PatchModel):
    issue_type: Optional[Text] = None
    issue_description: Optional[Text] = None
    assigned_agent: Optional[str] = None
    priority_level: Optional[Text] = None
    resolution_status: Optional[Text] = None
    resolution_date: Optional[datetime] = None
    feedback_score: Optional[int] = Field(default=None, ge=1, le=5)
    communication_mode: Optional[Text] = None
