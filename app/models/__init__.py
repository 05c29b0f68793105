"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    wedding: 결혼식, 하객, 참석 연결 (Wedding, WeddingMember, attendance association)
"""

from app.models.wedding import Wedding, WeddingMember, wedding_attendees

__all__ = [
    "Wedding", "WeddingMember", "wedding_attendees",
]
