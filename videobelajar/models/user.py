"""ORM model for application users (auth and user management)."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, func

from videobelajar.models.base import Base

USER_ROLES = ("admin", "user", "student")
GENDERS = ("Laki-laki", "Perempuan")


class User(Base):
    """
    Registered account.

    password holds a bcrypt hash; rows created before hashing was introduced may
    still hold the plain value and are accepted at login.
    role: 'admin', 'user' or 'student'
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    phone = Column(String(32), nullable=True)
    gender = Column(String(32), nullable=True)
    role = Column(String(32), nullable=False, default="student")
    avatar = Column(String(1024), nullable=True)
    email_verified = Column(Boolean, nullable=False, default=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
