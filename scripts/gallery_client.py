"""
갤러리 서버를 터미널에서 다루는 간단한 클라이언트.

사용법:
    uv run python scripts/gallery_client.py list
    uv run python scripts/gallery_client.py upload ./cat.png
    uv run python scripts/gallery_client.py delete <image-id>

--base-url을 생략하면 GALLERY_MODE / GALLERY_DEV_API_ORIGIN 설정을 따른다.
"""

import argparse
import sys

from client.api import GalleryApi
from client.config import ClientSettings
from client.controller import GalleryController
from client.files import LocalFile
from client.notifier import TransientNotifier
from client.view import format_bytes


def _build_controller(base_url: str | None) -> GalleryController:
    settings = ClientSettings()
    if base_url:
        settings = settings.model_copy(update={"MODE": "development", "DEV_API_ORIGIN": base_url})
    api = GalleryApi.from_settings(settings, origin=base_url or "")
    return GalleryController(api, TransientNotifier(settings.NOTIFICATION_DELAY))


def _print_progress(percent: int) -> None:
    bar = "#" * (percent // 5)
    print(f"\r  [{bar:<20s}] {percent:3d}%", end="", flush=True)


def cmd_list(controller: GalleryController, _args) -> bool:
    if not controller.refresh():
        return False
    view = controller.view
    for image in view.images:
        print(f"  {image.id}  {image.filename:<30s} {format_bytes(image.size):>9s}  {image.uploaded_at:%Y-%m-%d %H:%M:%S}")
    print(f"{view.count} images, {format_bytes(view.total_bytes)}")
    return True


def cmd_upload(controller: GalleryController, args) -> bool:
    controller.on_progress(_print_progress)
    outcome = controller.select_file(LocalFile.from_path(args.path))
    print()
    return outcome.ok


def cmd_delete(controller: GalleryController, args) -> bool:
    return controller.delete(args.image_id)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Mini image gallery client")
    parser.add_argument("--base-url", default=None, help="서버 origin (예: http://localhost:4000)")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="이미지 목록 조회").set_defaults(func=cmd_list)

    upload = sub.add_parser("upload", help="JPEG/PNG 한 장 업로드 (3 MB 이하)")
    upload.add_argument("path")
    upload.set_defaults(func=cmd_upload)

    delete = sub.add_parser("delete", help="id로 이미지 삭제")
    delete.add_argument("image_id")
    delete.set_defaults(func=cmd_delete)

    args = parser.parse_args(argv)
    controller = _build_controller(args.base_url)
    try:
        ok = args.func(controller, args)
        notification = controller.notifier.current
        if notification:
            print(notification.text, file=sys.stdout if notification.kind == "success" else sys.stderr)
    finally:
        controller.close()
        controller.api.close()
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
