import json

from tilemosaic.components.planner.cli import main


def test_key_command(capsys) -> None:
    assert main(["key", "0", "0", "2"]) == 0
    assert json.loads(capsys.readouterr().out) == "2,2,2"


def test_select_command_reads_residency(tmp_path, capsys) -> None:
    residency = tmp_path / "residency.json"
    residency.write_text(json.dumps({"2,2,3": True, "3,2,3": True, "2,3,3": True, "3,3,3": True}))

    assert main(["--max-zoom", "3", "select", "1,1,2", "--residency", str(residency)]) == 0
    assert json.loads(capsys.readouterr().out) == ["2,2,3", "2,3,3", "3,2,3", "3,3,3"]


def test_select_without_residency_requests_target(capsys) -> None:
    assert main(["--max-zoom", "0", "select", "0,0,0"]) == 0
    assert json.loads(capsys.readouterr().out) == ["0,0,0"]


def test_siblings_command(capsys) -> None:
    assert main(["siblings", "0,0,1", "--width", "1536", "--height", "512", "--zoom", "1"]) == 0
    assert json.loads(capsys.readouterr().out) == {"1,0,1": [[-1, 0, 1], [1, 0, 1]], "0,0,1": [[0, 0, 1]]}


def test_plan_command(capsys) -> None:
    assert main(["--max-zoom", "2", "plan", "0", "0", "2", "--width", "512", "--height", "512"]) == 0
    records = json.loads(capsys.readouterr().out)
    assert records
    assert {r["rendered_key"] for r in records} == {r["key"] for r in records}


def test_invalid_key_fails(capsys) -> None:
    assert main(["select", "not-a-key"]) == 1


def test_invalid_settings_fail(capsys) -> None:
    assert main(["--pixel-ratio", "0", "key", "0", "0", "1"]) == 1
    assert "Invalid settings" in capsys.readouterr().err


def test_region_command(tmp_path, capsys) -> None:
    region = {
        "type": "Feature",
        "properties": {"center": {"lng": 0.0, "lat": 0.0}, "radius": 50.0, "units": "degrees"},
        "geometry": {
            "type": "Polygon",
            "coordinates": [[[50.0, 0.0], [0.0, 10.0], [-10.0, 0.0], [0.0, -10.0], [50.0, 0.0]]],
        },
    }
    path = tmp_path / "region.json"
    path.write_text(json.dumps(region))

    assert main(["region", str(path), "--level", "4"]) == 0
    assert json.loads(capsys.readouterr().out) == ["8,8,4", "10,8,4", "9,8,4", "8,7,4", "7,8,4"]


def test_invalid_log_level_fails(monkeypatch, capsys) -> None:
    monkeypatch.setenv("MOSAIC_LOG_LEVEL", "verbose")
    assert main(["key", "0", "0", "1"]) == 1
    assert "Invalid settings" in capsys.readouterr().err
