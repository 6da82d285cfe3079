import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def setup_logger(level: str = "INFO"):
    """Loguru 기본 설정. 앱 시작 시(lifespan) 한 번 호출.

    DEBUG 레벨일 때만 예외 traceback에 변수 값까지 남긴다.
    """
    debug = level == "DEBUG"
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level, backtrace=debug, diagnose=debug)
    return logger
