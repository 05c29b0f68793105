"""사진 스토리지 서비스 — 로컬 파일 시스템 저장.

Photo Storage Service — Local filesystem store for member photos.
업로드된 파일은 PHOTOS_UPLOAD_DIR 아래에 생성된 이름으로 저장됩니다.
Uploaded files are written under PHOTOS_UPLOAD_DIR using generated names;
the original filename only contributes a sanitized extension.
"""

import random
import re
import shutil
from pathlib import Path
from typing import BinaryIO

from app.config import settings

# 기본 업로드 디렉토리 — PHOTOS_UPLOAD_DIR이 비어있을 때 사용
_PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent.parent
_DEFAULT_UPLOADS_DIR: Path = _PROJECT_ROOT / "uploads" / "photos"

_UNSAFE_NAME_CHARS = re.compile(r"[^A-Za-z0-9_-]+")
_SAFE_EXTENSION = re.compile(r"^[A-Za-z0-9]+$")

# 파일명 랜덤 접미사 상한 — Upper bound of the random filename suffix
_RANDOM_SUFFIX_MAX: int = 2**31 - 1


def generate_random_file_name(member_id: int, member_name: str) -> str:
    """하객 ID + 이름 + 랜덤 정수로 파일명을 생성합니다 (확장자 제외).

    Generate a destination filename stem from the member id, the member name
    and a random integer. Characters outside ``[A-Za-z0-9_-]`` in the name
    collapse to ``_``.
    """
    safe_name: str = _UNSAFE_NAME_CHARS.sub("_", member_name or "").strip("_") or "member"
    return f"{member_id}_{safe_name}_{random.randint(0, _RANDOM_SUFFIX_MAX)}"


def get_extension(original_filename: str | None) -> str:
    """원본 파일명에서 확장자를 추출합니다.

    Return the lower-cased substring after the last ``.`` of the filename.
    Returns ``""`` when there is no dot, nothing after it, or the extension
    contains anything but ASCII letters and digits.
    The stored extension can therefore differ from the original (e.g. ``x.tar-gz`` -> ``""``).
    """
    if not original_filename or "." not in original_filename:
        return ""
    extension: str = original_filename.rsplit(".", 1)[1]
    if not _SAFE_EXTENSION.match(extension):
        return ""
    return extension.lower()


class PhotoStorage:
    """사진 파일 저장소 — 생성된 이름으로 복사하고 다시 읽습니다.

    Photo file store: copies uploads to generated paths and reads them back.
    """

    def __init__(self, upload_dir: str | Path | None = None) -> None:
        self._upload_dir: Path | None = Path(upload_dir) if upload_dir else None

    @property
    def upload_dir(self) -> Path:
        if self._upload_dir is not None:
            return self._upload_dir
        return Path(settings.PHOTOS_UPLOAD_DIR) if settings.PHOTOS_UPLOAD_DIR else _DEFAULT_UPLOADS_DIR

    def build_destination(
        self,
        member_id: int,
        member_name: str,
        original_filename: str | None,
    ) -> Path:
        """업로드 파일의 저장 경로를 생성합니다.

        Build the destination path for one uploaded file. The result always
        resolves inside the upload directory.

        Raises:
            ValueError: 경로가 업로드 디렉토리를 벗어날 때 (Path escapes the upload dir)
        """
        file_name: str = generate_random_file_name(member_id, member_name)
        extension: str = get_extension(original_filename)
        if extension:
            file_name = f"{file_name}.{extension}"

        base: Path = self.upload_dir.resolve()
        destination: Path = (base / file_name).resolve()
        if destination.parent != base:
            raise ValueError(f"Refusing to write outside upload dir: {file_name}")
        return destination

    def save(self, source: BinaryIO, destination: Path) -> str:
        """스트림을 대상 경로로 복사합니다. 절대 경로를 반환합니다.

        Copy a binary stream to ``destination``. The file must not exist yet.

        Returns:
            str: 저장된 파일의 절대 경로 (Absolute path of the stored file)

        Raises:
            OSError: 파일이 이미 있거나 쓰기에 실패했을 때
                     (Destination exists or the copy failed)
        """
        destination.parent.mkdir(parents=True, exist_ok=True)
        with destination.open("xb") as target:
            shutil.copyfileobj(source, target)
        return str(destination.absolute())

    def read(self, path: str) -> bytes:
        """저장된 사진의 전체 내용을 읽습니다.

        Read the full content of a stored photo. ``OSError`` propagates.
        """
        return Path(path).read_bytes()


photo_storage: PhotoStorage = PhotoStorage()
