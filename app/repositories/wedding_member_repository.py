"""하객 레포지토리 — 하객 조회 및 참석 결혼식 로딩.

Wedding Member Repository — Member lookup with the attends-set and each
wedding's back-reference set eagerly loaded, so both sides of the
association can be changed without lazy loads.
"""

from sqlalchemy import Select, select
from sqlalchemy.orm import selectinload

from app.models.wedding import Wedding, WeddingMember
from app.repositories.base import BaseRepository


class WeddingMemberRepository(BaseRepository[WeddingMember]):
    """하객 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the wedding_members table.
    """

    def __init__(self) -> None:
        super().__init__(WeddingMember)

    def _by_id_query(self, record_id: int) -> Select:
        return (
            select(WeddingMember)
            .options(
                selectinload(WeddingMember.attends_weddings).selectinload(Wedding.members)
            )
            .where(WeddingMember.id == record_id)
        )


# 싱글턴 인스턴스 — Singleton instance
wedding_member_repository: WeddingMemberRepository = WeddingMemberRepository()
