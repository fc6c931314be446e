import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from form_import.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Form(Base):
    __tablename__ = "forms"
    __table_args__ = (
        Index("ix_forms_owner_email_created_at", "owner_email", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    # dev-auth identity of the importing user
    owner_email: Mapped[str] = mapped_column(String(320), nullable=False)

    title: Mapped[str] = mapped_column(String(500), nullable=False)

    # internal FormSchema document (camelCase JSON)
    form_schema: Mapped[dict] = mapped_column("schema", JSON, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)
