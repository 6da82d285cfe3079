from loguru import logger
from starlette.datastructures import FormData, UploadFile

from core.constants import ALLOWED_MIME_TYPES, MAX_FILE_SIZE_BYTES
from core.exceptions import (
    AppException,
    FileTooLarge,
    InvalidMimeType,
    MissingFile,
    TooManyFiles,
    UnexpectedField,
)
from model.image import ImageRecord
from service.image_store import ImageStore


def validate_upload(mimetype: str | None, size: int) -> None:
    """선언된 MIME 타입과 크기를 검사한다.

    - 내용 스니핑은 하지 않는다. 클라이언트가 선언한 타입을 그대로 믿는다.
    - 타입 검사가 크기 검사보다 먼저다.
    """
    if mimetype not in ALLOWED_MIME_TYPES:
        raise InvalidMimeType
    if size > MAX_FILE_SIZE_BYTES:
        raise FileTooLarge


def select_upload(form: FormData, field: str) -> UploadFile | str | None:
    """폼에서 업로드 대상 값 하나를 고른다.

    - 다른 필드에 파일이 있으면 UnexpectedField
    - 같은 필드에 값이 둘 이상이면 TooManyFiles
    - 필드가 없으면 None (save_upload에서 MissingFile)
    """
    for key, value in form.multi_items():
        if key != field and isinstance(value, UploadFile):
            logger.warning(f"Upload rejected: file in unexpected field {key!r}")
            raise UnexpectedField

    values = form.getlist(field)
    if len(values) > 1:
        logger.warning(f"Upload rejected: {len(values)} values in field {field!r}")
        raise TooManyFiles
    return values[0] if values else None


def save_upload(file: UploadFile | str | None, store: ImageStore) -> ImageRecord:
    """업로드 파일을 검증하고 저장소 맨 앞에 기록한다.

    1. 파일 존재 확인 (MissingFile)
    2. MIME 타입 확인 (InvalidMimeType)
    3. 크기 확인 (FileTooLarge): 한도 + 1바이트까지만 읽는다
    4. ImageRecord 생성 후 insert_front
    """
    if file is None or not isinstance(file, UploadFile):
        logger.warning("Upload rejected: no file in request")
        raise MissingFile

    content = file.file.read(MAX_FILE_SIZE_BYTES + 1)
    try:
        validate_upload(file.content_type, len(content))
    except AppException as exc:
        logger.warning(f"Upload rejected: {file.filename} ({file.content_type}) - {exc.message}")
        raise

    record = ImageRecord.from_bytes(
        filename=file.filename or "unknown",
        mimetype=file.content_type,
        content=content,
    )
    store.insert_front(record)
    logger.info(
        f"Uploaded {record.filename} ({record.mimetype}, {record.size}B). "
        f"Total images: {len(store)}"
    )
    return record


def list_images(store: ImageStore) -> list[ImageRecord]:
    """최신 업로드가 먼저 오는 전체 목록. 페이지네이션 없음."""
    return store.list()


def delete_image(image_id: str, store: ImageStore) -> str:
    """이미지를 삭제하고 삭제된 id를 반환한다."""
    deleted_id = store.remove_by_id(image_id)
    logger.info(f"Deleted image {deleted_id}. Total images: {len(store)}")
    return deleted_id
