import base64
import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


class ImageRecord(BaseModel):
    """업로드된 이미지 한 건. 생성 후에는 변경하지 않는다.

    id와 uploadedAt은 서버가 from_bytes()에서 한 번만 정한다. 기본값이 없으므로
    클라이언트가 응답을 파싱할 때 두 필드가 빠져 있으면 검증에 실패한다.
    JSON으로는 camelCase(uploadedAt)로 주고받는다.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    filename: str
    mimetype: str
    size: int
    uploaded_at: datetime = Field(alias="uploadedAt")
    data: str  # base64

    @classmethod
    def from_bytes(cls, filename: str, mimetype: str, content: bytes) -> "ImageRecord":
        return cls(
            id=str(uuid.uuid4()),
            filename=filename,
            mimetype=mimetype,
            size=len(content),
            uploaded_at=datetime.now(UTC),
            data=base64.b64encode(content).decode("ascii"),
        )

    def decoded(self) -> bytes:
        return base64.b64decode(self.data)


class DeleteResponse(BaseModel):
    id: str
