import pytest
from pydantic import ValidationError

from sharp_score.config import Settings
from sharp_score.pipeline import sharpness_score
from sharp_score.scoring import ScoreCalibration, map_score


def test_defaults(monkeypatch):
    for name in ("VARIANCE_FLOOR", "SCORE_DIVISOR", "SCORE_CAP", "LAPLACIAN_WORKERS"):
        monkeypatch.delenv(f"SHARP_SCORE_{name}", raising=False)
    s = Settings()
    assert s.VARIANCE_FLOOR == 1.0
    assert s.SCORE_DIVISOR == 3.5
    assert s.SCORE_CAP == 10.0
    assert s.LAPLACIAN_WORKERS is None
    assert ScoreCalibration.from_settings(s) == ScoreCalibration()


def test_environment_overrides_calibration(monkeypatch, linear_ramp):
    monkeypatch.setenv("SHARP_SCORE_SCORE_DIVISOR", "1.0")
    monkeypatch.setenv("SHARP_SCORE_VARIANCE_FLOOR", "0.5")
    monkeypatch.setenv("SHARP_SCORE_LAPLACIAN_WORKERS", "2")
    s = Settings()
    calibration = ScoreCalibration.from_settings(s)
    assert calibration.divisor == 1.0
    assert s.LAPLACIAN_WORKERS == 2
    assert map_score(4.0, calibration) == 2.0
    assert sharpness_score(linear_ramp, calibration=calibration) == pytest.approx(2.0)


def test_invalid_values_are_rejected(monkeypatch):
    monkeypatch.setenv("SHARP_SCORE_SCORE_DIVISOR", "0")
    with pytest.raises(ValidationError):
        Settings()
