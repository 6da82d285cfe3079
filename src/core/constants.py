"""서버 검증과 클라이언트 검증이 공유하는 업로드 제한값."""

MAX_FILE_SIZE_BYTES = 3 * 1024 * 1024  # 3 MB
ALLOWED_MIME_TYPES = ("image/jpeg", "image/png")

# API 경로 prefix (프로덕션 SPA fallback에서 제외)
API_PATH_PREFIXES = ("/health", "/images", "/upload")
