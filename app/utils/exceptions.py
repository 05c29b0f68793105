"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for the error conditions
raised by the services. Each carries its status code so a web layer can
re-raise them unchanged.

Usage:
    from app.utils.exceptions import NotFoundError, DuplicateError
    raise NotFoundError("Wedding member with id 3 does not exist")
    raise DuplicateError("Wedding already registered")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a requested resource (wedding member, wedding) does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 리소스 생성 시도 시 사용.

    409 Conflict exception.
    Raised when a member registers to a wedding it already attends,
    or when no unique wedding code could be generated.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource already exists")
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request data is invalid beyond what Pydantic validation catches
    (e.g. a wedding title made only of whitespace).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class PhotoStorageError(HTTPException):
    """500 예외 — 저장된 사진을 읽을 수 없을 때 사용.

    500 Internal Server Error exception.
    Raised when a stored photo cannot be read back from disk. Retrieval is
    all-or-nothing, so one unreadable file fails the whole request.

    Args:
        detail: 오류 메시지 (Error message, default: "Stored photo could not be read")
    """

    def __init__(self, detail: str = "Stored photo could not be read") -> None:
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
