"""Tests for the Flask endpoints."""

import pytest


def test_render_svg(client):
    resp = client.get("/render/svg?text=HELLO&size=180&margin=1&dot=dots&corner=dot")
    assert resp.status_code == 200
    assert resp.mimetype == "image/svg+xml"
    body = resp.get_data(as_text=True)
    assert body.startswith("<svg")
    assert 'width="180"' in body


def test_render_svg_missing_text(client):
    assert client.get("/render/svg").status_code == 400


def test_render_svg_bad_numbers(client):
    assert client.get("/render/svg?text=HELLO&size=big").status_code == 400


def test_render_svg_bad_ecc(client):
    assert client.get("/render/svg?text=HELLO&ecc=Z").status_code == 400


def test_size_out_of_range_is_clamped(client):
    body = client.get("/render/svg?text=HELLO&size=5").get_data(as_text=True)
    assert 'width="256"' in body


def test_template_with_override(client):
    body = client.get("/render/svg?text=HELLO&template=system-sunset&fg=%23000000").get_data(as_text=True)
    assert 'fill="#000000"' in body
    assert 'fill="#FFF7ED"' in body


def test_render_elements(client):
    resp = client.get("/render/elements?text=HELLO&size=120&margin=6")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["module_count"] == 21
    assert data["view_box"] == "0 0 120 120"
    assert data["finder_modules"] == 147
    assert set(data) == {
        "background", "data_dots", "finder_modules", "finder_patterns", "module_count", "view_box",
    }


def test_preview(client):
    resp = client.get("/preview/cornerDot/dot")
    assert resp.status_code == 200
    assert resp.mimetype == "image/svg+xml"
    assert client.get("/preview/frame/square").status_code == 404


@pytest.mark.parametrize("size,expected", [("64", "64"), ("0", "40"), ("9999", "40"), ("big", "40")])
def test_preview_size_is_clamped(client, size, expected):
    body = client.get(f"/preview/dot/dots?size={size}").get_data(as_text=True)
    assert f'width="{expected}"' in body


def test_templates(client):
    data = client.get("/templates?category=playful").get_json()
    assert [t["id"] for t in data] == ["system-neon"]


def test_render_svg_with_frame(client):
    body = client.get(
        "/render/svg?text=HELLO&size=200&margin=8&frame=banner-top&frame_text=Scan%20Me!"
    ).get_data(as_text=True)
    assert body.startswith('<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 232 268"')
    assert '<g transform="translate(16, 52)">' in body
    assert ">Scan Me!</text>" in body


def test_render_svg_template_frame(client):
    body = client.get("/render/svg?text=HELLO&size=200&template=system-cafe").get_data(as_text=True)
    assert 'viewBox="0 0 232 268"' in body
    assert ">View Menu</text>" in body
    plain = client.get("/render/svg?text=HELLO&size=200&template=system-cafe&frame=none")
    assert plain.get_data(as_text=True).count("<svg") == 1
