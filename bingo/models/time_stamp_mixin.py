from datetime import UTC, datetime

from sqlalchemy import Column, DateTime
from sqlalchemy.orm import Mapped, declared_attr


def utc_now() -> datetime:
    return datetime.now(UTC)


class TimeStampMixin:
    @declared_attr
    def created_at(cls) -> Mapped[datetime]:  # noqa: N805
        return Column(
            DateTime(timezone=True),
            default=utc_now,
            nullable=False,
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:  # noqa: N805
        return Column(
            DateTime(timezone=True),
            default=None,
            nullable=True,
            onupdate=utc_now,
        )
