"""테스트 인프라 — 임시 SQLite DB, 세션, 사진 디렉토리 픽스처.

Test infrastructure — Temporary SQLite (aiosqlite) database, session, and
photo upload directory fixtures. Every test gets a fresh database file and
upload directory under ``tmp_path``.
"""

from collections.abc import AsyncGenerator
from io import BytesIO
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine

from app.config import settings
from app.database import Base, async_session
from app.database import engine as app_engine
from app.models import *  # noqa: F401,F403 — register all models with metadata
from app.models.wedding import Wedding, WeddingMember
from app.schemas.wedding import WeddingCreate, WeddingMemberCreate
from app.services.wedding_member_service import wedding_member_service
from app.services.wedding_service import wedding_service


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 업로드 디렉토리
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 스키마를 생성하고 앱 세션 팩토리를 이 엔진에 연결합니다."""
    eng = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async_session.configure(bind=eng)
    yield eng
    async_session.configure(bind=app_engine)
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    async with async_session() as session:
        yield session
        await session.rollback()


@pytest.fixture(autouse=True)
def upload_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """사진 업로드 디렉토리를 tmp_path 아래로 지정합니다."""
    path = tmp_path / "photos"
    path.mkdir()
    monkeypatch.setattr(settings, "PHOTOS_UPLOAD_DIR", str(path))
    return path


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def wedding(db: AsyncSession) -> Wedding:
    """테스트 결혼식을 생성합니다."""
    return await wedding_service.create_wedding(db, WeddingCreate(title="Kim & Lee"))


@pytest_asyncio.fixture
async def other_wedding(db: AsyncSession) -> Wedding:
    """두 번째 테스트 결혼식을 생성합니다."""
    return await wedding_service.create_wedding(db, WeddingCreate(title="Park & Choi"))


@pytest_asyncio.fixture
async def member(db: AsyncSession, wedding: Wedding) -> WeddingMember:
    """첫 번째 결혼식에 참석하는 하객을 생성합니다."""
    return await wedding_member_service.create_wedding_member(
        db,
        WeddingMemberCreate(
            name="Jane Doe",
            email="jane@example.com",
            relation="friend",
            wedding_codes=[wedding.code],
        ),
    )


def make_upload(filename: str, content: bytes) -> UploadFile:
    """테스트용 업로드 파일을 생성합니다."""
    return UploadFile(file=BytesIO(content), filename=filename)


class BrokenStream(BytesIO):
    """읽기 시 항상 OSError를 내는 스트림."""

    def read(self, *args, **kwargs) -> bytes:
        raise OSError("simulated read failure")
