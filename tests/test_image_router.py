"""이미지 API (upload, list, delete) + 검증 실패 시 저장소 불변 테스트."""

import asyncio
import base64
from datetime import datetime

from service import image_service

MAX = 3 * 1024 * 1024


def _upload(client, data: bytes, filename: str = "a.png", mimetype: str = "image/png", field: str = "image"):
    return client.post("/upload", files={field: (filename, data, mimetype)})


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


class TestUpload:
    def test_upload_png(self, client, make_image):
        """1 KB PNG 업로드 → 201 + 레코드 반환."""
        resp = _upload(client, make_image("PNG", size=1024))
        assert resp.status_code == 201
        data = resp.json()
        assert data["filename"] == "a.png"
        assert data["mimetype"] == "image/png"
        assert data["size"] == 1024
        assert data["id"]
        assert data["uploadedAt"]

    def test_upload_jpeg(self, client, make_image):
        content = make_image("JPEG")
        resp = _upload(client, content, "photo.jpg", "image/jpeg")
        assert resp.status_code == 201
        assert resp.json()["mimetype"] == "image/jpeg"
        assert resp.json()["size"] == len(content)

    def test_upload_exactly_at_limit(self, client, make_image):
        """정확히 3 MB는 허용된다."""
        resp = _upload(client, make_image("PNG", size=MAX))
        assert resp.status_code == 201
        assert resp.json()["size"] == MAX

    def test_ids_are_unique(self, client, make_image):
        ids = {_upload(client, make_image()).json()["id"] for _ in range(5)}
        assert len(ids) == 5


class TestUploadValidation:
    def test_too_large(self, client, store, make_image):
        """4 MB JPEG → 400 FILE_TOO_LARGE, 저장소는 비어 있다."""
        resp = _upload(client, make_image("JPEG", size=4 * 1024 * 1024), "big.jpg", "image/jpeg")
        assert resp.status_code == 400
        assert resp.json()["message"] == "File exceeds 3 MB limit."
        assert resp.json()["error_code"] == "FILE_TOO_LARGE"
        assert len(store) == 0

    def test_one_byte_over_limit(self, client, store, make_image):
        resp = _upload(client, make_image("PNG", size=MAX + 1))
        assert resp.status_code == 400
        assert resp.json()["error_code"] == "FILE_TOO_LARGE"
        assert len(store) == 0

    def test_invalid_mime_type(self, client, store):
        for mimetype in ("image/gif", "text/plain", "image/webp", "application/octet-stream"):
            resp = _upload(client, b"GIF89a....", "x.gif", mimetype)
            assert resp.status_code == 400
            assert resp.json()["error_code"] == "INVALID_MIME_TYPE"
        assert len(store) == 0

    def test_missing_file(self, client, store):
        resp = client.post("/upload", data={"note": "no file here"})
        assert resp.status_code == 400
        assert resp.json()["error_code"] == "MISSING_FILE"
        assert len(store) == 0

    def test_wrong_field_name(self, client, store, make_image):
        """기대하는 필드(image)가 아닌 곳에 파일이 있으면 UnexpectedField."""
        resp = _upload(client, make_image(), field="file")
        assert resp.status_code == 400
        assert resp.json()["error_code"] == "UNEXPECTED_FIELD"
        assert len(store) == 0

    def test_two_files_in_image_field(self, client, store, make_image):
        """image 필드에 파일이 두 개면 어느 것도 저장하지 않고 400."""
        resp = client.post(
            "/upload",
            files=[
                ("image", ("a.png", make_image(), "image/png")),
                ("image", ("b.png", make_image(), "image/png")),
            ],
        )
        assert resp.status_code == 400
        assert resp.json()["error_code"] == "TOO_MANY_FILES"
        assert len(store) == 0

    def test_extra_file_in_other_field(self, client, store, make_image):
        resp = client.post(
            "/upload",
            files=[
                ("image", ("a.png", make_image(), "image/png")),
                ("other", ("b.png", make_image(), "image/png")),
            ],
        )
        assert resp.status_code == 400
        assert resp.json()["error_code"] == "UNEXPECTED_FIELD"
        assert len(store) == 0

    def test_text_field_next_to_file_is_ignored(self, client, store, make_image):
        resp = client.post(
            "/upload",
            data={"caption": "hello"},
            files={"image": ("a.png", make_image(), "image/png")},
        )
        assert resp.status_code == 201
        assert len(store) == 1

    def test_file_is_read_off_the_event_loop(self, client, monkeypatch, make_image):
        """save_upload은 스레드풀에서 실행된다 (실행 중인 이벤트 루프가 없다)."""
        loop_running = []
        original = image_service.save_upload

        def _recording_save_upload(file, store):
            try:
                asyncio.get_running_loop()
                loop_running.append(True)
            except RuntimeError:
                loop_running.append(False)
            return original(file, store)

        monkeypatch.setattr(image_service, "save_upload", _recording_save_upload)

        resp = _upload(client, make_image())
        assert resp.status_code == 201
        assert loop_running == [False]

    def test_field_is_not_a_file(self, client, store):
        resp = client.post("/upload", data={"image": "just text"})
        assert resp.status_code == 400
        assert resp.json()["error_code"] == "MISSING_FILE"

    def test_rejection_keeps_existing_records(self, client, store, make_image):
        _upload(client, make_image())
        before = store.list()

        _upload(client, b"nope", "x.txt", "text/plain")

        assert store.list() == before


class TestList:
    def test_empty(self, client):
        resp = client.get("/images")
        assert resp.status_code == 200
        assert resp.json() == []

    def test_newest_first(self, client, make_image):
        names = [f"{i}.png" for i in range(4)]
        for name in names:
            _upload(client, make_image(), name)

        listed = client.get("/images").json()
        assert [item["filename"] for item in listed] == list(reversed(names))
        stamps = [datetime.fromisoformat(item["uploadedAt"]) for item in listed]
        assert stamps == sorted(stamps, reverse=True)

    def test_round_trip_bytes(self, client, make_image):
        """업로드한 바이트가 base64 data로 그대로 돌아온다."""
        content = make_image("PNG", color="red")
        _upload(client, content)

        record = client.get("/images").json()[0]
        assert base64.b64decode(record["data"]) == content
        assert record["size"] == len(content)


class TestDelete:
    def test_scenario_upload_list_delete(self, client, make_image):
        created = _upload(client, make_image("PNG", size=1024)).json()

        listed = client.get("/images").json()
        assert len(listed) == 1
        assert listed[0] == created

        resp = client.delete(f"/images/{created['id']}")
        assert resp.status_code == 200
        assert resp.json() == {"id": created["id"]}

        assert client.get("/images").json() == []

    def test_delete_unknown_id(self, client, store, make_image):
        _upload(client, make_image())
        before = store.list()

        resp = client.delete("/images/does-not-exist")
        assert resp.status_code == 404
        assert resp.json()["error_code"] == "IMAGE_NOT_FOUND"
        assert store.list() == before

    def test_delete_removes_only_that_record(self, client, make_image):
        ids = [_upload(client, make_image(), f"{i}.png").json()["id"] for i in range(3)]
        before = {item["id"]: item for item in client.get("/images").json()}

        client.delete(f"/images/{ids[1]}")

        after = client.get("/images").json()
        assert len(after) == 2
        assert [item["id"] for item in after] == [ids[2], ids[0]]
        for item in after:
            assert item == before[item["id"]]

    def test_delete_twice(self, client, make_image):
        image_id = _upload(client, make_image()).json()["id"]
        assert client.delete(f"/images/{image_id}").status_code == 200
        assert client.delete(f"/images/{image_id}").status_code == 404
