import json

import numpy as np
import pytest

from mapboot.cli import main


def test_print_center(capsys):
    assert main(["--print-center"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "# x,y,lon,lat,zoom"
    x, y, lon, lat, zoom = out[1].split(",")
    assert float(lon) == pytest.approx(10.9689, abs=1e-6)
    assert float(lat) == pytest.approx(52.13695, abs=1e-6)
    assert zoom == "13"


def test_cli_overrides_config(tmp_path, capsys):
    cfg = tmp_path / "map.json"
    cfg.write_text(json.dumps({"zoom": 5, "lon": 13.405, "lat": 52.52}), encoding="utf-8")
    assert main(["--config", str(cfg), "--zoom", "8", "--print-center"]) == 0
    x, y, lon, lat, zoom = capsys.readouterr().out.splitlines()[1].split(",")
    assert zoom == "8"
    assert float(lon) == pytest.approx(13.405, abs=1e-6)


def test_html_output(tmp_path):
    out = tmp_path / "map.html"
    assert main(["--html", str(out)]) == 0
    assert out.exists()


def test_bad_projection(capsys):
    assert main(["--projection", "EPSG:not-a-code"]) == 2
    assert "unknown projection" in capsys.readouterr().err


def test_bad_tiles(tmp_path, capsys):
    assert main(["--tiles", "Nope.Nothing", "--html", str(tmp_path / "m.html")]) == 2
    assert "unknown tile provider" in capsys.readouterr().err


@pytest.mark.parametrize("zoom", ["40", "-1"])
def test_out_of_range_zoom_flag(zoom, capsys):
    assert main(["--zoom", zoom, "--print-center"]) == 2
    captured = capsys.readouterr()
    assert "invalid config" in captured.err
    assert captured.out == ""


def test_png_and_show_draw_once(monkeypatch, tmp_path):
    seen = []

    def fake_bounds2img(w, s, e, n, source=None, zoom=None, ll=True):
        seen.append(zoom)
        return np.zeros((256, 256, 3), dtype=np.uint8), (w, e, s, n)

    monkeypatch.setattr("contextily.bounds2img", fake_bounds2img)
    monkeypatch.setattr("matplotlib.pyplot.show", lambda *a, **k: None)
    out = tmp_path / "map.png"
    assert main(["--png", str(out), "--show"]) == 0
    assert out.exists()
    assert seen == [13]
