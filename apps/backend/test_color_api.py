import io

from fastapi.testclient import TestClient
from PIL import Image

from api.color_server import app

client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_harmonize_defaults_to_complementary():
    response = client.post("/api/colors/harmonize", json={"baseColor": "#2563EB"})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["palette"] == {
        "colors": ["#2563eb", "#ebad25", "#ffffff", "#f5f5f5", "#333333"],
        "harmony": "complementary",
        "baseColor": "#2563eb",
    }
    assert body["variations"] is None


def test_harmonize_with_variations():
    response = client.post(
        "/api/colors/harmonize",
        json={"baseColor": "#2563EB", "harmony": "monochromatic", "includeVariations": True},
    )
    body = response.json()
    assert len(body["palette"]["colors"]) == 7
    assert len(body["variations"]["lighter"]) == 3
    assert len(body["variations"]["darker"]) == 3


def test_harmonize_requires_base_color():
    response = client.post("/api/colors/harmonize", json={})
    assert response.status_code == 400
    assert response.json() == {"error": "Base color is required"}


def test_harmonize_rejects_bad_input():
    response = client.post("/api/colors/harmonize", json={"baseColor": "blue"})
    assert response.status_code == 400
    assert response.json()["error"] == "Failed to generate color harmony"

    response = client.post("/api/colors/harmonize", json={"baseColor": "#2563eb", "harmony": "pentadic"})
    assert response.status_code == 400


def test_contrast_endpoint():
    response = client.post("/api/colors/contrast", json={"foreground": "#FFFFFF", "background": "#2563EB"})
    assert response.status_code == 200
    assert response.json() == {"ratio": 5.17, "passesAA": True, "passesAAA": False, "level": "AA"}

    response = client.post(
        "/api/colors/contrast",
        json={"foreground": "#FFFFFF", "background": "#2563EB", "isLargeText": True},
    )
    assert response.json()["level"] == "AAA"


def test_contrast_endpoint_rejects_bad_color():
    response = client.post("/api/colors/contrast", json={"foreground": "#FFF", "background": "#2563EB"})
    assert response.status_code == 400


def test_evaluate_endpoint():
    response = client.post(
        "/api/colors/evaluate",
        json={"colors": ["#2563eb", "#ebad25", "#ffffff", "#f5f5f5", "#333333"]},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["score"] == 100
    assert len(body["issues"]) == 1
    assert body["passes"] == ["Text contrast AAA compliant (12.63:1)"]


def test_text_color_endpoint():
    response = client.post("/api/colors/text-color", json={"background": "#000000"})
    assert response.status_code == 200
    body = response.json()
    assert body["text"] == "#ffffff"
    assert body["header"] == "#ffffff"
    assert body["button"] == {"background": "#000000", "text": "#ffffff"}
    assert body["textContrast"]["ratio"] == 21.0


def test_text_color_endpoint_validates_target():
    response = client.post("/api/colors/text-color", json={"background": "#000000", "targetRatio": 30})
    assert response.status_code == 422


def test_extract_endpoint():
    buffer = io.BytesIO()
    Image.new("RGB", (40, 40), (255, 0, 0)).save(buffer, format="PNG")
    response = client.post(
        "/api/colors/extract",
        params={"harmony": "triadic"},
        files={"file": ("logo.png", buffer.getvalue(), "image/png")},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["colors"][0]["hex"] == "#ff0000"
    assert body["palette"]["baseColor"] == "#ff0000"
    assert len(body["palette"]["colors"]) == 6


def test_extract_endpoint_rejects_garbage():
    response = client.post(
        "/api/colors/extract",
        files={"file": ("logo.png", b"nope", "image/png")},
    )
    assert response.status_code == 400


def _red_logo() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (40, 40), (255, 0, 0)).save(buffer, format="PNG")
    return buffer.getvalue()


def test_extract_endpoint_rejects_non_positive_max_colors():
    for value in (0, -1):
        response = client.post(
            "/api/colors/extract",
            params={"max_colors": value},
            files={"file": ("logo.png", _red_logo(), "image/png")},
        )
        assert response.status_code == 422


def test_extract_endpoint_honours_max_colors():
    response = client.post(
        "/api/colors/extract",
        params={"max_colors": 1},
        files={"file": ("logo.png", _red_logo(), "image/png")},
    )
    assert response.status_code == 200
    assert [c["hex"] for c in response.json()["colors"]] == ["#ff0000"]
