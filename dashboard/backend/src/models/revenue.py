"""Revenue reporting model."""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from dashboard.backend.src.db.base import Base


class Revenue(Base):
    """Monthly revenue as exposed by the ``revenue`` reporting view."""

    __tablename__ = "revenue"

    month: Mapped[str] = mapped_column(String(16), primary_key=True)
    revenue: Mapped[int] = mapped_column(Integer, nullable=False)


__all__ = ["Revenue"]
