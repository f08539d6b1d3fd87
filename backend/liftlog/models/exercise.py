from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, String, Text, DateTime, Index, UniqueConstraint, func
from liftlog.db import Base

class Exercise(Base):
    """Catalog entry shared by every user. Referenced rows cannot be deleted."""
    __tablename__ = "exercises"
    __table_args__ = (
        UniqueConstraint("name", name="exercises_name_unique"),
        Index("idx_exercises_name", "name"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    muscle_group: Mapped[str | None] = mapped_column(String(100), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, server_default=func.now())
