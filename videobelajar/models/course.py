"""ORM model for catalog courses."""

from sqlalchemy import Column, DateTime, Float, Integer, String, Text, func

from videobelajar.models.base import Base

COURSE_CATEGORIES = ("Pemasaran", "Desain", "Pengembangan Diri", "Bisnis")


class Course(Base):
    """Catalog entry shown on the landing page; price is free-form (e.g. "300K")."""

    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    photos = Column(String(1024), nullable=True)
    mentor = Column(String(255), nullable=False)
    rolementor = Column(String(255), nullable=False)
    avatar = Column(String(1024), nullable=True)
    company = Column(String(255), nullable=False)
    rating = Column(Float, nullable=False, default=0)
    review_count = Column(Integer, nullable=False, default=0)
    price = Column(String(64), nullable=False)
    category = Column(String(64), nullable=False, index=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        index=True,
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
