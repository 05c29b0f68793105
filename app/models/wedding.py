"""결혼식 및 하객 관련 SQLAlchemy ORM 모델 정의.

Wedding-related SQLAlchemy ORM model definitions.
A wedding member can attend many weddings and a wedding has many members.
Both sides are kept as sets linked through ``back_populates``, so adding or
removing on one side updates the other within the session.

Tables:
    - weddings: 결혼식 (Weddings identified by a shareable code)
    - wedding_members: 하객 (Members with profile and stored photo paths)
    - wedding_attendees: 결혼식-하객 다대다 연결 (Attendance association)
"""

import random
import string
from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.config import settings
from app.database import Base


def generate_wedding_code(length: int | None = None) -> str:
    """랜덤 결혼식 공유 코드 생성 (대문자 + 숫자).

    Generate a random shareable wedding code (uppercase letters + digits).
    """
    chars = string.ascii_uppercase + string.digits
    return "".join(random.choices(chars, k=length or settings.WEDDING_CODE_LENGTH))


# 결혼식-하객 연결 테이블 — Attends-set / back-reference association
wedding_attendees: Table = Table(
    "wedding_attendees",
    Base.metadata,
    Column("wedding_id", Integer, ForeignKey("weddings.id", ondelete="CASCADE"), primary_key=True),
    Column("member_id", Integer, ForeignKey("wedding_members.id", ondelete="CASCADE"), primary_key=True),
)


class Wedding(Base):
    """결혼식 모델 — 공유 코드로 식별되는 이벤트.

    Wedding model — An event identified by a unique, human-shareable code.
    The code is generated once and never changes.

    Attributes:
        id: 고유 식별자 (Numeric primary key)
        code: 공유 코드 (Unique shareable code, immutable)
        title: 결혼식 이름 (Display title)
        created_at: 생성 일시 UTC (Creation timestamp)

    Relationships:
        members: 참석 하객 집합 (Set of attending members, back-reference)
    """

    __tablename__ = "weddings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 공유 코드 — 생성 후 변경 불가 (Immutable after creation)
    code: Mapped[str] = mapped_column(String(32), unique=True, nullable=False, default=lambda: generate_wedding_code())
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    members: Mapped[set["WeddingMember"]] = relationship(
        "WeddingMember",
        secondary=wedding_attendees,
        back_populates="attends_weddings",
        collection_class=set,
    )

    def __repr__(self) -> str:
        return f"<Wedding id={self.id} code={self.code!r}>"


class WeddingMember(Base):
    """하객 모델 — 여러 결혼식에 참석하고 사진을 업로드하는 사람.

    Wedding member model — A person attending one or more weddings
    and accumulating uploaded photo paths.

    Attributes:
        id: 고유 식별자 (Numeric primary key)
        name: 이름 (Member name)
        email: 이메일 (Member email)
        relation: 관계 (Free-text role, e.g. "friend", "family")
        photo_paths: 저장된 사진 경로 목록 (Ordered stored photo paths, duplicates allowed)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)

    Relationships:
        attends_weddings: 참석 결혼식 집합 (Attends-set)
    """

    __tablename__ = "wedding_members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    relation: Mapped[str | None] = mapped_column(String(100), nullable=True)
    # 사진 경로 목록 — 재할당으로만 변경 (Replaced, never mutated in place)
    photo_paths: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    attends_weddings: Mapped[set[Wedding]] = relationship(
        Wedding,
        secondary=wedding_attendees,
        back_populates="members",
        collection_class=set,
    )

    def __repr__(self) -> str:
        return f"<WeddingMember id={self.id} name={self.name!r}>"
