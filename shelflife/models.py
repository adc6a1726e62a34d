import enum

from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    Date,
    DateTime,
    Boolean,
    ForeignKey,
    Enum,
    Index,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship, declarative_base

Base = declarative_base()

# =========================
# Enums
# =========================


class WorkType(str, enum.Enum):
    BOOK = "BOOK"
    MOVIE = "MOVIE"
    GAME = "GAME"
    SHOW = "SHOW"
    OTHER = "OTHER"


class WorkStatus(str, enum.Enum):
    TO_EXPLORE = "TO_EXPLORE"    # on the shelf, not started
    IN_PROGRESS = "IN_PROGRESS"
    FINISHED = "FINISHED"


# =========================
# User
# =========================


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # stored lowercase-trimmed
    username = Column(String(50), nullable=False)
    email = Column(String(255), nullable=False)
    password_hash = Column(String(255), nullable=False)
    display_name = Column(String(100), nullable=True)

    # stamped by the services, not the ORM
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    # only used for cascading deletes; lookups go through user_id columns
    works = relationship(
        "Work",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    sessions = relationship(
        "WorkSession",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    reviews = relationship(
        "Review",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        UniqueConstraint("username", name="uq_users_username"),
        UniqueConstraint("email", name="uq_users_email"),
    )


# =========================
# Work / Session / Review
# =========================


class Work(Base):
    __tablename__ = "works"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    title = Column(String(255), nullable=False)
    type = Column(Enum(WorkType, name="work_type"), nullable=False, default=WorkType.BOOK)
    creator = Column(String(255), nullable=True)  # author / director / studio
    genre = Column(String(100), nullable=True)
    status = Column(Enum(WorkStatus, name="work_status"), nullable=False, default=WorkStatus.TO_EXPLORE)
    total_units = Column(Integer, nullable=True)  # pages / episodes / chapters
    cover_url = Column(String(500), nullable=True)
    started_at = Column(Date, nullable=True)
    finished_at = Column(Date, nullable=True)

    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    user = relationship("User", back_populates="works")
    sessions = relationship(
        "WorkSession",
        back_populates="work",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    reviews = relationship(
        "Review",
        back_populates="work",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("idx_works_user_id", "user_id"),
        Index("idx_works_status", "status"),
        Index("idx_works_type", "type"),
    )


class WorkSession(Base):
    __tablename__ = "sessions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    work_id = Column(Integer, ForeignKey("works.id", ondelete="CASCADE"), nullable=False)

    started_at = Column(DateTime, nullable=False)
    ended_at = Column(DateTime, nullable=True)
    minutes = Column(Integer, nullable=True)
    units_completed = Column(Integer, nullable=True)
    note = Column(String(500), nullable=True)

    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    user = relationship("User", back_populates="sessions")
    work = relationship("Work", back_populates="sessions")

    __table_args__ = (
        Index("idx_sessions_user_id", "user_id"),
        Index("idx_sessions_work_id", "work_id"),
        Index("idx_sessions_started_at", "started_at"),
    )


class Review(Base):
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    work_id = Column(Integer, ForeignKey("works.id", ondelete="CASCADE"), nullable=False)

    rating = Column(Integer, nullable=False)  # 1~5
    title = Column(String(255), nullable=True)
    body = Column(Text, nullable=True)
    is_private = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    user = relationship("User", back_populates="reviews")
    work = relationship("Work", back_populates="reviews")

    __table_args__ = (
        UniqueConstraint("user_id", "work_id", name="uq_reviews_user_work"),
        Index("idx_reviews_user_id", "user_id"),
        Index("idx_reviews_work_id", "work_id"),
    )
