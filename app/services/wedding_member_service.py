"""하객 서비스 — 하객 생명주기 및 사진 관리 비즈니스 로직.

Wedding Member Service — Business logic for the wedding member lifecycle:
creation, lookup, wedding registration, photo upload/retrieval, profile
patching and deletion.

Writes are flushed through the repository; the caller commits. None of the
operations coordinate with concurrent callers (last write wins).
"""

import logging
from io import BytesIO
from pathlib import Path

from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.wedding import Wedding, WeddingMember
from app.repositories.wedding_member_repository import wedding_member_repository
from app.schemas.wedding import (
    WeddingMemberCreate,
    WeddingMemberResponse,
    WeddingMemberUpdate,
)
from app.services.storage_service import PhotoStorage, photo_storage
from app.services.wedding_service import WeddingService, wedding_service
from app.utils.exceptions import DuplicateError, NotFoundError, PhotoStorageError

logger = logging.getLogger(__name__)


def _has_text(value: str | None) -> bool:
    """값이 None이 아니고 공백만으로 이루어지지 않았는지 확인합니다."""
    return value is not None and bool(value.strip())


class WeddingMemberService:
    """하객 관련 비즈니스 로직을 처리하는 서비스.

    Service handling wedding member business logic.

    Attributes:
        weddings: 결혼식 코드 조회 협력자 (Wedding lookup collaborator)
        storage: 사진 파일 저장소 (Photo file store)
    """

    def __init__(
        self,
        weddings: WeddingService = wedding_service,
        storage: PhotoStorage = photo_storage,
    ) -> None:
        self.weddings: WeddingService = weddings
        self.storage: PhotoStorage = storage

    def to_response(self, member: WeddingMember) -> WeddingMemberResponse:
        """하객 모델을 응답 스키마로 변환합니다.

        Convert a WeddingMember model instance to a WeddingMemberResponse schema.
        """
        return WeddingMemberResponse(
            id=member.id,
            name=member.name,
            email=member.email,
            relation=member.relation,
            photo_paths=list(member.photo_paths),
            wedding_codes=sorted(w.code for w in member.attends_weddings),
            created_at=member.created_at,
        )

    async def create_wedding_member(
        self,
        db: AsyncSession,
        data: WeddingMemberCreate,
    ) -> WeddingMember:
        """새 하객을 생성하고 코드로 참석 결혼식을 연결합니다.

        Create a member, resolving every wedding code to its Wedding first.
        Nothing is written when any code is unknown.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 하객 생성 데이터 (Member creation data)

        Returns:
            WeddingMember: ID가 할당된 하객 (Persisted member with its id)

        Raises:
            NotFoundError: 결혼식 코드가 존재하지 않을 때 (Unknown wedding code)
        """
        weddings: set[Wedding] = set()
        for code in data.wedding_codes:
            weddings.add(await self.weddings.get_wedding_by_code(db, code))

        member = WeddingMember(
            name=data.name,
            email=data.email,
            relation=data.relation,
            photo_paths=[],
            attends_weddings=weddings,
        )
        member = await wedding_member_repository.save(db, member)
        logger.info(
            "Created wedding member %s attending %d wedding(s)", member.id, len(weddings)
        )
        return member

    async def get_wedding_member(
        self,
        db: AsyncSession,
        member_id: int,
    ) -> WeddingMember:
        """ID로 하객을 조회합니다.

        Retrieve a member by id with its weddings loaded.

        Raises:
            NotFoundError: 하객이 없을 때 (Member not found)
        """
        member: WeddingMember | None = await wedding_member_repository.get_by_id(db, member_id)
        if member is None:
            raise NotFoundError(f"Wedding member with id {member_id} does not exist")
        return member

    async def register_to_wedding(
        self,
        db: AsyncSession,
        member_id: int,
        code: str,
    ) -> WeddingMember:
        """하객을 코드에 해당하는 결혼식에 등록합니다.

        Register a member to the wedding identified by ``code``.

        Raises:
            NotFoundError: 하객 또는 결혼식이 없을 때 (Member or wedding not found)
            DuplicateError: 이미 등록된 결혼식일 때 (Already registered)
        """
        member: WeddingMember = await self.get_wedding_member(db, member_id)
        wedding: Wedding = await self.weddings.get_wedding_by_code(db, code)

        # 세션 identity map 덕분에 같은 PK는 같은 객체 (Same PK -> same object in a session)
        if wedding in member.attends_weddings:
            raise DuplicateError(
                f"Wedding with code {code} already registered to wedding member with id {member_id}"
            )
        member.attends_weddings.add(wedding)
        member = await wedding_member_repository.save(db, member)
        logger.info("Registered wedding member %s to wedding %s", member_id, wedding.id)
        return member

    async def add_photo_paths(
        self,
        db: AsyncSession,
        member: WeddingMember,
        paths: list[str],
    ) -> list[str]:
        """하객의 사진 경로 목록 끝에 경로들을 추가합니다.

        Append storage paths to the member's photo list and persist it.

        Returns:
            list[str]: 갱신된 전체 사진 경로 목록 (Full updated path list)
        """
        member.photo_paths = [*member.photo_paths, *paths]
        member = await wedding_member_repository.save(db, member)
        return list(member.photo_paths)

    async def upload_photos(
        self,
        db: AsyncSession,
        member_id: int,
        files: list[UploadFile],
    ) -> tuple[list[str], list[str]]:
        """업로드된 사진을 저장하고 경로를 하객에 추가합니다.

        Store each uploaded file under a generated name and record the
        stored paths on the member. A failing file is logged and reported
        by its original filename; the remaining files are still processed.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            member_id: 하객 ID (Member id)
            files: 업로드 파일 목록 (Uploaded files)

        Returns:
            tuple[list[str], list[str]]: (저장 후 전체 사진 경로, 실패한 원본 파일명)
                                         (Full stored path list, failed original filenames)

        Raises:
            NotFoundError: 하객이 없을 때 (Member not found)
        """
        member: WeddingMember = await self.get_wedding_member(db, member_id)

        to_add: list[str] = []
        failed: list[str] = []
        for upload in files:
            try:
                destination: Path = self.storage.build_destination(
                    member.id, member.name, upload.filename
                )
                to_add.append(self.storage.save(upload.file, destination))
            except (OSError, ValueError):
                logger.warning(
                    "Could not store photo %r for wedding member %s",
                    upload.filename,
                    member_id,
                    exc_info=True,
                )
                failed.append(upload.filename or "")

        added: list[str] = await self.add_photo_paths(db, member, to_add)
        logger.info(
            "Stored %d photo(s) for wedding member %s, %d failed",
            len(to_add),
            member_id,
            len(failed),
        )
        return added, failed

    async def get_all_photos(
        self,
        db: AsyncSession,
        member_id: int,
    ) -> list[BytesIO]:
        """하객의 모든 사진을 메모리 버퍼로 읽어 반환합니다.

        Read every stored photo of a member into an in-memory buffer, in
        upload order. One unreadable file fails the whole request.

        Raises:
            NotFoundError: 하객이 없을 때 (Member not found)
            PhotoStorageError: 사진을 읽을 수 없을 때 (A stored photo is missing or unreadable)
        """
        member: WeddingMember = await self.get_wedding_member(db, member_id)

        photos: list[BytesIO] = []
        for path in member.photo_paths:
            try:
                photos.append(BytesIO(self.storage.read(path)))
            except OSError as exc:
                logger.error("Could not read photo %s of wedding member %s", path, member_id)
                raise PhotoStorageError(f"Could not read photo {path}") from exc
        return photos

    async def update_attended_weddings(
        self,
        db: AsyncSession,
        member_id: int,
        register_codes: list[str],
        unregister_ids: list[int],
    ) -> WeddingMember:
        """하객의 참석 결혼식을 일괄 변경합니다.

        Unregister the member from the weddings whose ids are listed, then
        register it to each listed code. Registrations flush one by one; a
        conflict stops the remaining codes without undoing earlier steps.

        Raises:
            NotFoundError: 하객 또는 결혼식이 없을 때 (Member or wedding not found)
            DuplicateError: 이미 등록된 코드가 있을 때 (A code is already registered)
        """
        member: WeddingMember = await self.get_wedding_member(db, member_id)

        to_remove: set[Wedding] = {
            wedding for wedding in member.attends_weddings if wedding.id in unregister_ids
        }
        for wedding in to_remove:
            wedding.members.discard(member)
        member.attends_weddings.difference_update(to_remove)
        if to_remove:
            logger.info(
                "Unregistered wedding member %s from wedding(s) %s",
                member_id,
                sorted(w.id for w in to_remove),
            )

        for code in register_codes:
            await self.register_to_wedding(db, member_id, code)

        return await wedding_member_repository.save(db, member)

    async def update_profile(
        self,
        db: AsyncSession,
        data: WeddingMemberUpdate,
    ) -> WeddingMember:
        """하객 프로필(이름, 이메일, 관계)을 부분 수정합니다.

        Patch name, email and relation. Missing or blank values keep the
        existing field; photos and weddings are untouched.

        Raises:
            NotFoundError: 하객이 없을 때 (Member not found)
        """
        member: WeddingMember = await self.get_wedding_member(db, data.id)

        if _has_text(data.name):
            member.name = data.name
        if _has_text(data.email):
            member.email = data.email
        if _has_text(data.relation):
            member.relation = data.relation

        return await wedding_member_repository.save(db, member)

    async def delete_wedding_member(
        self,
        db: AsyncSession,
        member_id: int,
    ) -> bool:
        """하객을 삭제하고 모든 결혼식에서 연결을 끊습니다.

        Detach the member from every wedding's member set, then delete it.

        Raises:
            NotFoundError: 하객이 없을 때 (Member not found)
        """
        member: WeddingMember = await self.get_wedding_member(db, member_id)

        for wedding in list(member.attends_weddings):
            wedding.members.discard(member)

        await wedding_member_repository.delete(db, member)
        logger.info("Deleted wedding member %s", member_id)
        return True


# 싱글턴 인스턴스 — Singleton instance
wedding_member_service: WeddingMemberService = WeddingMemberService()
