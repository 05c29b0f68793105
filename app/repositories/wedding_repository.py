"""결혼식 레포지토리 — 결혼식 조회 및 코드 검색.

Wedding Repository — Lookup by id or shareable code with the member
back-reference set eagerly loaded.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.wedding import Wedding
from app.repositories.base import BaseRepository


class WeddingRepository(BaseRepository[Wedding]):
    """결혼식 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the weddings table.
    """

    def __init__(self) -> None:
        super().__init__(Wedding)

    def _by_id_query(self, record_id: int) -> Select:
        return (
            select(Wedding)
            .options(selectinload(Wedding.members))
            .where(Wedding.id == record_id)
        )

    async def get_by_code(
        self,
        db: AsyncSession,
        code: str,
    ) -> Wedding | None:
        """공유 코드로 결혼식을 조회합니다.

        Retrieve a wedding by its shareable code, with members loaded.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            code: 결혼식 공유 코드 (Shareable wedding code)

        Returns:
            Wedding | None: 조회된 결혼식 또는 None (Found wedding or None)
        """
        query: Select = (
            select(Wedding)
            .options(selectinload(Wedding.members))
            .where(Wedding.code == code)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
wedding_repository: WeddingRepository = WeddingRepository()
