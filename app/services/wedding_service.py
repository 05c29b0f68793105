"""결혼식 서비스 — 결혼식 생성 및 코드 조회 비즈니스 로직.

Wedding Service — Business logic for creating weddings and resolving
shareable codes to Wedding entities.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.wedding import Wedding, WeddingMember, generate_wedding_code
from app.repositories.wedding_repository import wedding_repository
from app.schemas.wedding import WeddingCreate, WeddingResponse
from app.utils.exceptions import BadRequestError, DuplicateError, NotFoundError

logger = logging.getLogger(__name__)

# 코드 충돌 시 재시도 횟수 — Attempts before giving up on a unique code
_MAX_CODE_ATTEMPTS: int = 10


class WeddingService:
    """결혼식 관련 비즈니스 로직을 처리하는 서비스.

    Service handling wedding business logic.
    """

    def to_response(self, wedding: Wedding) -> WeddingResponse:
        """결혼식 모델을 응답 스키마로 변환합니다.

        Convert a Wedding model instance to a WeddingResponse schema.
        """
        return WeddingResponse(
            id=wedding.id,
            code=wedding.code,
            title=wedding.title,
            member_ids=sorted(m.id for m in wedding.members),
            created_at=wedding.created_at,
        )

    async def create_wedding(
        self,
        db: AsyncSession,
        data: WeddingCreate,
    ) -> Wedding:
        """새 결혼식을 생성하고 고유 공유 코드를 발급합니다.

        Create a new wedding with a freshly generated unique code.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 결혼식 생성 데이터 (Wedding creation data)

        Returns:
            Wedding: 생성된 결혼식 (Created wedding)

        Raises:
            BadRequestError: 제목이 비어있을 때 (Blank title)
            DuplicateError: 고유 코드를 만들지 못했을 때 (No unique code found)
        """
        title: str = data.title.strip()
        if not title:
            raise BadRequestError("Wedding title must not be blank")

        for _ in range(_MAX_CODE_ATTEMPTS):
            code: str = generate_wedding_code()
            if not await wedding_repository.exists(db, {"code": code}):
                break
        else:
            raise DuplicateError("Could not generate a unique wedding code")

        wedding: Wedding = await wedding_repository.save(
            db, Wedding(code=code, title=title, members=set())
        )
        logger.info("Created wedding %s with code %s", wedding.id, wedding.code)
        return wedding

    async def get_wedding_by_code(
        self,
        db: AsyncSession,
        code: str,
    ) -> Wedding:
        """공유 코드로 결혼식을 조회합니다.

        Resolve a shareable code to its Wedding. Codes are trimmed and
        compared upper-cased.

        Raises:
            NotFoundError: 코드에 해당하는 결혼식이 없을 때 (Unknown code)
        """
        normalized: str = (code or "").strip().upper()
        wedding: Wedding | None = await wedding_repository.get_by_code(db, normalized)
        if wedding is None:
            raise NotFoundError(f"Wedding with code {code} does not exist")
        return wedding

    async def get_wedding(
        self,
        db: AsyncSession,
        wedding_id: int,
    ) -> Wedding:
        """ID로 결혼식을 조회합니다.

        Raises:
            NotFoundError: 결혼식이 없을 때 (Wedding not found)
        """
        wedding: Wedding | None = await wedding_repository.get_by_id(db, wedding_id)
        if wedding is None:
            raise NotFoundError(f"Wedding with id {wedding_id} does not exist")
        return wedding

    async def list_members(
        self,
        db: AsyncSession,
        wedding_id: int,
    ) -> list[WeddingMember]:
        """결혼식에 참석하는 하객 목록을 ID 순으로 반환합니다.

        List the members attending a wedding, ordered by member id.
        """
        wedding: Wedding = await self.get_wedding(db, wedding_id)
        return sorted(wedding.members, key=lambda m: m.id)


# 싱글턴 인스턴스 — Singleton instance
wedding_service: WeddingService = WeddingService()
