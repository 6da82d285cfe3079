from fastapi import APIRouter, Depends, Request, status
from starlette.concurrency import run_in_threadpool

from core.config import Settings
from core.dependencies import get_settings, get_store
from model.image import DeleteResponse, ImageRecord
from service import image_service
from service.image_store import ImageStore

router = APIRouter(tags=["images"])


@router.post("/upload", response_model=ImageRecord, status_code=status.HTTP_201_CREATED)
async def upload_image(
    request: Request,
    store: ImageStore = Depends(get_store),
    config: Settings = Depends(get_settings),
):
    """단일 이미지 업로드 (multipart, 필드 이름은 UPLOAD_FIELD).

    - 필드가 없거나 파일이 아니면 MissingFile(400)
    - 파일이 둘 이상이면 TooManyFiles(400), 다른 필드의 파일은 UnexpectedField(400)
    파일 읽기는 스레드풀에서 실행한다.
    """
    async with request.form() as form:
        file = image_service.select_upload(form, config.UPLOAD_FIELD)
        return await run_in_threadpool(image_service.save_upload, file, store)


@router.get("/images", response_model=list[ImageRecord])
def list_images(store: ImageStore = Depends(get_store)):
    return image_service.list_images(store)


@router.delete("/images/{image_id}", response_model=DeleteResponse)
def delete_image(image_id: str, store: ImageStore = Depends(get_store)):
    return DeleteResponse(id=image_service.delete_image(image_id, store))
