"""하객 서비스 테스트.

Wedding member service tests — creation, lookup, registration, bulk
attendance update, profile patch, and deletion.
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.wedding import WeddingMember, wedding_attendees
from app.schemas.wedding import WeddingMemberCreate, WeddingMemberUpdate
from app.services.wedding_member_service import wedding_member_service
from app.services.wedding_service import wedding_service
from app.utils.exceptions import DuplicateError, NotFoundError


async def _member_count(db: AsyncSession) -> int:
    return (await db.execute(select(func.count()).select_from(WeddingMember))).scalar()


class TestMemberCreate:
    """하객 생성 테스트."""

    async def test_create_member(self, db: AsyncSession, wedding):
        """코드로 결혼식을 연결하며 하객 생성."""
        member = await wedding_member_service.create_wedding_member(db, WeddingMemberCreate(
            name="John", email="john@example.com", relation="family",
            wedding_codes=[wedding.code],
        ))
        assert member.id is not None
        assert member.attends_weddings == {wedding}
        assert member in wedding.members
        assert member.photo_paths == []

    async def test_create_member_without_weddings(self, db: AsyncSession):
        """참석 결혼식 없이 생성."""
        member = await wedding_member_service.create_wedding_member(
            db, WeddingMemberCreate(name="Solo")
        )
        assert member.attends_weddings == set()

    async def test_duplicate_codes_collapse(self, db: AsyncSession, wedding, other_wedding):
        """같은 코드를 두 번 보내면 하나로 합쳐짐."""
        member = await wedding_member_service.create_wedding_member(db, WeddingMemberCreate(
            name="Twice",
            wedding_codes=[wedding.code, wedding.code.lower(), other_wedding.code],
        ))
        assert member.attends_weddings == {wedding, other_wedding}

    async def test_unknown_code_saves_nothing(self, db: AsyncSession, wedding):
        """존재하지 않는 코드가 있으면 404, 하객은 저장되지 않음."""
        with pytest.raises(NotFoundError):
            await wedding_member_service.create_wedding_member(db, WeddingMemberCreate(
                name="Ghost", wedding_codes=[wedding.code, "MISSING1"],
            ))
        assert await _member_count(db) == 0


class TestMemberLookup:
    """하객 조회 테스트."""

    async def test_get_member(self, db: AsyncSession, member):
        """저장된 값이 그대로 조회됨."""
        found = await wedding_member_service.get_wedding_member(db, member.id)
        assert found.name == "Jane Doe"
        assert found.email == "jane@example.com"
        assert found.relation == "friend"

    async def test_get_member_after_reload(self, db: AsyncSession, member, wedding):
        """세션을 비운 뒤에도 마지막 저장값이 조회됨."""
        member_id = member.id
        db.expunge_all()
        found = await wedding_member_service.get_wedding_member(db, member_id)
        assert found.name == "Jane Doe"
        assert {w.code for w in found.attends_weddings} == {wedding.code}

    async def test_get_missing_member(self, db: AsyncSession):
        """존재하지 않는 하객은 404."""
        with pytest.raises(NotFoundError) as exc_info:
            await wedding_member_service.get_wedding_member(db, 12345)
        assert exc_info.value.status_code == 404

    async def test_to_response(self, db: AsyncSession, member, wedding):
        """응답 스키마 변환."""
        response = wedding_member_service.to_response(member)
        assert response.id == member.id
        assert response.wedding_codes == [wedding.code]
        assert response.photo_paths == []


class TestRegister:
    """결혼식 등록 테스트."""

    async def test_register(self, db: AsyncSession, member, other_wedding):
        """새 결혼식 등록 성공, 양방향 연결."""
        updated = await wedding_member_service.register_to_wedding(db, member.id, other_wedding.code)
        assert other_wedding in updated.attends_weddings
        assert updated in other_wedding.members

    async def test_register_twice_conflicts(self, db: AsyncSession, member, other_wedding):
        """같은 코드를 두 번 등록하면 409, 집합 크기 변화 없음."""
        await wedding_member_service.register_to_wedding(db, member.id, other_wedding.code)
        size = len(member.attends_weddings)

        with pytest.raises(DuplicateError) as exc_info:
            await wedding_member_service.register_to_wedding(db, member.id, other_wedding.code)
        assert exc_info.value.status_code == 409
        assert len(member.attends_weddings) == size

    async def test_register_already_attended_on_create(self, db: AsyncSession, member, wedding):
        """생성 시 연결된 결혼식 재등록은 409."""
        with pytest.raises(DuplicateError):
            await wedding_member_service.register_to_wedding(db, member.id, wedding.code)

    async def test_register_unknown_code(self, db: AsyncSession, member):
        """존재하지 않는 코드는 404."""
        with pytest.raises(NotFoundError):
            await wedding_member_service.register_to_wedding(db, member.id, "UNKNOWN0")

    async def test_register_unknown_member(self, db: AsyncSession, wedding):
        """존재하지 않는 하객은 404."""
        with pytest.raises(NotFoundError):
            await wedding_member_service.register_to_wedding(db, 999, wedding.code)


class TestUpdateAttendedWeddings:
    """참석 결혼식 일괄 변경 테스트."""

    async def test_unregister_and_register(self, db: AsyncSession, member, wedding, other_wedding):
        """등록 해제 후 새 결혼식 등록."""
        updated = await wedding_member_service.update_attended_weddings(
            db, member.id, [other_wedding.code], [wedding.id]
        )
        assert updated.attends_weddings == {other_wedding}
        assert member not in wedding.members
        assert member in other_wedding.members

    async def test_unregister_unattended_id_is_ignored(self, db: AsyncSession, member, wedding, other_wedding):
        """참석하지 않는 ID의 등록 해제는 무시됨."""
        updated = await wedding_member_service.update_attended_weddings(
            db, member.id, [], [other_wedding.id, 424242]
        )
        assert updated.attends_weddings == {wedding}

    async def test_reregister_same_code_in_one_call(self, db: AsyncSession, member, wedding):
        """같은 호출에서 해제 후 재등록은 성공."""
        updated = await wedding_member_service.update_attended_weddings(
            db, member.id, [wedding.code], [wedding.id]
        )
        assert updated.attends_weddings == {wedding}
        assert member in wedding.members

    async def test_conflict_keeps_earlier_steps(self, db: AsyncSession, member, wedding, other_wedding):
        """중복 등록 충돌 시 이전 단계는 되돌리지 않음."""
        third = await wedding_service.get_wedding(db, other_wedding.id)
        with pytest.raises(DuplicateError):
            await wedding_member_service.update_attended_weddings(
                db, member.id, [third.code, third.code], [wedding.id]
            )
        assert member.attends_weddings == {other_wedding}
        assert member not in wedding.members

    async def test_unregister_persisted(self, db: AsyncSession, member, wedding):
        """등록 해제가 연결 테이블에 반영됨."""
        await wedding_member_service.update_attended_weddings(db, member.id, [], [wedding.id])
        rows = (await db.execute(
            select(func.count()).select_from(wedding_attendees)
            .where(wedding_attendees.c.member_id == member.id)
        )).scalar()
        assert rows == 0


class TestProfilePatch:
    """프로필 수정 테스트."""

    async def test_blank_name_keeps_old_name(self, db: AsyncSession, member):
        """공백 이름은 무시, 이메일만 변경."""
        updated = await wedding_member_service.update_profile(db, WeddingMemberUpdate(
            id=member.id, name="   ", email="new@example.com",
        ))
        assert updated.name == "Jane Doe"
        assert updated.email == "new@example.com"
        assert updated.relation == "friend"

    async def test_all_fields(self, db: AsyncSession, member, wedding):
        """세 필드 모두 변경, 사진과 결혼식은 유지."""
        updated = await wedding_member_service.update_profile(db, WeddingMemberUpdate(
            id=member.id, name="Janet", email="janet@example.com", relation="family",
        ))
        assert (updated.name, updated.email, updated.relation) == ("Janet", "janet@example.com", "family")
        assert updated.attends_weddings == {wedding}
        assert updated.photo_paths == []

    async def test_missing_member(self, db: AsyncSession):
        """존재하지 않는 하객 수정은 404."""
        with pytest.raises(NotFoundError):
            await wedding_member_service.update_profile(db, WeddingMemberUpdate(id=777, name="X"))


class TestMemberDelete:
    """하객 삭제 테스트."""

    async def test_delete_detaches_from_weddings(self, db: AsyncSession, member, wedding, other_wedding):
        """삭제 시 모든 결혼식의 하객 집합에서 제거됨."""
        await wedding_member_service.register_to_wedding(db, member.id, other_wedding.code)
        member_id = member.id

        assert await wedding_member_service.delete_wedding_member(db, member_id) is True
        assert member not in wedding.members
        assert member not in other_wedding.members

        with pytest.raises(NotFoundError):
            await wedding_member_service.get_wedding_member(db, member_id)
        assert await wedding_service.list_members(db, wedding.id) == []

    async def test_delete_missing_member(self, db: AsyncSession):
        """존재하지 않는 하객 삭제는 404."""
        with pytest.raises(NotFoundError):
            await wedding_member_service.delete_wedding_member(db, 31337)
