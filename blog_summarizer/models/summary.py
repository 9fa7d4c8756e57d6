from sqlalchemy import String, Integer, Float, Text, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column
from blog_summarizer.core.database import Base
from typing import Optional

class Summary(Base):
    __tablename__ = "summaries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    url: Mapped[str] = mapped_column(String, nullable=False, index=True)
    summary: Mapped[str] = mapped_column(Text, nullable=False)
    urdu_translation: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    sentiment_score: Mapped[float] = mapped_column(Float, default=0)
    sentiment_classification: Mapped[str] = mapped_column(String(16), default="neutral")
    # Object name of the raw page text in MinIO
    text_object: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())
