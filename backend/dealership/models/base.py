from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RecordMixin:
    """Her tabloda ortak: iç kimlik + created_at/updated_at damgaları."""

    id         = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    def as_dict(self) -> dict:
        return {c.name: getattr(self, c.key) for c in self.__table__.columns}
