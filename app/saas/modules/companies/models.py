from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.saas.models import Base


def _new_company_id() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Company(Base):
    __tablename__ = "companies"
    __table_args__ = (
        Index("idx_companies_created_at", "created_at"),
    )

    # Opaque, server-generated; never reassigned after insert.
    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=_new_company_id)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Naive UTC, serialized with a trailing "Z".
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, default=_utcnow)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "createdAt": self.created_at.isoformat(timespec="microseconds") + "Z" if self.created_at else None,
        }
