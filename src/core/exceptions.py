"""앱 전역 커스텀 예외 클래스.

AppException을 상속하면 전역 핸들러(error_handlers.py)가 자동으로
{"error_code": "...", "message": "..."} 형식의 JSON 응답을 생성한다.
"""


class AppException(Exception):
    """앱 전역 베이스 예외.

    서브클래스에서 status_code, error_code, message를 클래스 변수로 정의하면
    전역 핸들러가 해당 값을 읽어 HTTP 응답을 생성한다.
    """

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"
    message: str = "Something went wrong."

    def __init__(self, message: str | None = None):
        if message:
            self.message = message
        super().__init__(self.message)


# --- 업로드 검증 ---


class MissingFile(AppException):
    status_code = 400
    error_code = "MISSING_FILE"
    message = "Please attach a JPEG or PNG image ≤ 3 MB."


class TooManyFiles(AppException):
    status_code = 400
    error_code = "TOO_MANY_FILES"
    message = "Only one image can be uploaded at a time."


class UnexpectedField(AppException):
    status_code = 400
    error_code = "UNEXPECTED_FIELD"
    message = "Unexpected field"


class InvalidMimeType(AppException):
    status_code = 400
    error_code = "INVALID_MIME_TYPE"
    message = "Only JPEG and PNG images are allowed"


class FileTooLarge(AppException):
    status_code = 400
    error_code = "FILE_TOO_LARGE"
    message = "File exceeds 3 MB limit."


# --- 이미지 조회/삭제 ---


class ImageNotFound(AppException):
    status_code = 404
    error_code = "IMAGE_NOT_FOUND"
    message = "Image not found"


class RouteNotFound(AppException):
    status_code = 404
    error_code = "NOT_FOUND"
    message = "Not found"
