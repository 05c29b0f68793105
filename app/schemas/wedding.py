"""결혼식 및 하객 관련 Pydantic 요청/응답 스키마 정의.

Wedding and wedding member Pydantic request/response schema definitions.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# === 결혼식 (Wedding) 스키마 ===

class WeddingCreate(BaseModel):
    """결혼식 생성 요청 스키마.

    Wedding creation request schema. The shareable code is generated by the server.

    Attributes:
        title: 결혼식 이름 (Wedding display title)
    """

    title: str = Field(..., max_length=255)  # 결혼식 이름 (Wedding display title)


class WeddingResponse(BaseModel):
    """결혼식 응답 스키마.

    Wedding response schema.

    Attributes:
        id: 결혼식 ID (Wedding numeric identifier)
        code: 공유 코드 (Shareable code)
        title: 결혼식 이름 (Display title)
        member_ids: 참석 하객 ID 목록 (Attending member ids, ascending)
        created_at: 생성 일시 (Creation timestamp)
    """

    id: int
    code: str
    title: str
    member_ids: list[int] = []
    created_at: datetime


# === 하객 (WeddingMember) 스키마 ===

class WeddingMemberCreate(BaseModel):
    """하객 생성 요청 스키마.

    Wedding member creation request schema. Weddings are referenced by their
    shareable code only and resolved by the service.

    Attributes:
        name: 이름 (Member name)
        email: 이메일 (Member email, optional)
        relation: 관계 (Free-text relation, optional)
        wedding_codes: 참석할 결혼식 코드 목록 (Codes of weddings to attend, may be empty)
    """

    name: str = Field(..., max_length=255)
    email: str | None = None
    relation: str | None = None
    wedding_codes: list[str] = []  # 중복 코드는 하나로 합쳐짐 (Duplicates collapse to one)


class WeddingMemberUpdate(BaseModel):
    """하객 프로필 수정 요청 스키마 (부분 업데이트).

    Wedding member profile patch. Blank or missing values leave the
    existing field unchanged.

    Attributes:
        id: 대상 하객 ID (Target member id)
        name: 이름 (New name, optional)
        email: 이메일 (New email, optional)
        relation: 관계 (New relation, optional)
    """

    id: int
    name: str | None = None
    email: str | None = None
    relation: str | None = None


class WeddingMemberResponse(BaseModel):
    """하객 응답 스키마.

    Wedding member response schema.

    Attributes:
        id: 하객 ID (Member id)
        name: 이름 (Member name)
        email: 이메일 (Member email)
        relation: 관계 (Relation)
        photo_paths: 저장된 사진 경로 (Stored photo paths, upload order)
        wedding_codes: 참석 결혼식 코드 (Attended wedding codes, sorted)
        created_at: 생성 일시 (Creation timestamp)
    """

    id: int
    name: str
    email: str | None = None
    relation: str | None = None
    photo_paths: list[str] = []
    wedding_codes: list[str] = []
    created_at: datetime

