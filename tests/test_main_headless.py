from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

from pixel_restaurant.__main__ import main
from pixel_restaurant.app import run_headless
from pixel_restaurant.config.settings import SceneSettings, Settings

SRC = Path(__file__).resolve().parents[1] / "src"


def _env() -> dict:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC), env.get("PYTHONPATH")]))
    env["PIXEL_RESTAURANT_HEADLESS"] = "1"
    return env


def test_headless_entrypoint_seats_guests():
    cmd = [sys.executable, "-m", "pixel_restaurant"]
    proc = subprocess.run(cmd, capture_output=True, text=True, env=_env(), timeout=30)

    assert proc.returncode == 0, proc.stderr
    assert "Pixel Restaurant (headless)" in proc.stdout
    assert "Path Found! 21 steps" in proc.stdout
    assert "Guests have been seated!" in proc.stdout
    assert "Loop complete" in proc.stdout


def test_headless_max_steps_stops_early(capsys):
    code = main(["--headless", "--max-steps", "3"])
    out = capsys.readouterr().out

    assert code == 0
    assert "Stopped with status SHOWING_PATH" in out
    assert "Loop complete (steps=3)" in out


def test_bad_settings_file_exits_with_error(tmp_path, capsys):
    bad = tmp_path / "bad.yaml"
    bad.write_text("bogus:\n  x: 1\n", encoding="utf-8")

    code = main(["--headless", "--settings", str(bad)])

    assert code == 2
    assert "Unknown settings sections" in capsys.readouterr().err


def test_too_small_scene_exits_with_error(tmp_path):
    cfg = tmp_path / "small.yaml"
    cfg.write_text("scene:\n  size: 10\n", encoding="utf-8")

    assert main(["--headless", "--settings", str(cfg)]) == 2


def test_empty_party_exits_with_error(tmp_path, capsys):
    cfg = tmp_path / "nobody.yaml"
    cfg.write_text("timing:\n  follower_lags: []\n", encoding="utf-8")

    code = main(["--headless", "--settings", str(cfg)])

    assert code == 2
    assert "follower_lags" in capsys.readouterr().err


def test_runner_rejects_unbuildable_scene_without_traceback():
    settings = Settings(scene=SceneSettings(size=10))
    assert run_headless(settings) == 2
