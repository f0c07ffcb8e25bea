import io
import os


def _image(name="photo.png", data=b"\x89PNG fake bytes"):
    return {"image": (io.BytesIO(data), name)}


def test_upload_stores_file(app, client, admin_headers):
    resp = client.post("/api/upload", headers=admin_headers, data=_image(),
                       content_type="multipart/form-data")

    assert resp.status_code == 200
    url = resp.get_json()["url"]
    assert url.startswith("/uploads/") and url.endswith(".png")

    stored = os.path.join(app.config["UPLOAD_FOLDER"], url.rsplit("/", 1)[1])
    with open(stored, "rb") as fh:
        assert fh.read() == b"\x89PNG fake bytes"

    served = client.get(url)
    assert served.status_code == 200
    assert served.data == b"\x89PNG fake bytes"
    served.close()


def test_upload_names_do_not_collide(client, admin_headers):
    urls = {
        client.post("/api/upload", headers=admin_headers, data=_image("same.jpg"),
                    content_type="multipart/form-data").get_json()["url"]
        for _ in range(5)
    }
    assert len(urls) == 5


def test_upload_requires_file(client, admin_headers):
    resp = client.post("/api/upload", headers=admin_headers, data={},
                       content_type="multipart/form-data")
    assert resp.status_code == 400


def test_upload_rejects_unknown_extension(client, admin_headers):
    resp = client.post("/api/upload", headers=admin_headers, data=_image("script.exe"),
                       content_type="multipart/form-data")
    assert resp.status_code == 400


def test_upload_requires_admin(app):
    resp = app.test_client().post("/api/upload", data=_image(), content_type="multipart/form-data")
    assert resp.status_code == 401


def test_upload_too_large(app, client, admin_headers):
    app.config["MAX_CONTENT_LENGTH"] = 16
    resp = client.post("/api/upload", headers=admin_headers, data=_image(data=b"x" * 1024),
                       content_type="multipart/form-data")
    assert resp.status_code == 413
    assert resp.get_json()["error"] == "payload_too_large"


def test_upload_without_extension_defaults_to_jpg(app, client, admin_headers):
    resp = client.post("/api/upload", headers=admin_headers, data=_image("blob"),
                       content_type="multipart/form-data")

    assert resp.status_code == 200
    url = resp.get_json()["url"]
    assert url.endswith(".jpg")
    assert os.path.exists(os.path.join(app.config["UPLOAD_FOLDER"], url.rsplit("/", 1)[1]))
