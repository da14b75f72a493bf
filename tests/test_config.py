from pathlib import Path

from task_classifier.config import Settings


def test_settings_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    settings = Settings()
    assert settings.title_fallback_length == 100
    assert settings.max_description_length == 5000
    assert settings.title_seed is None
    assert settings.output_dir == Path("outputs")


def test_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TASK_CLASSIFIER_TITLE_SEED", "7")
    monkeypatch.setenv("TASK_CLASSIFIER_LOG_LEVEL", "DEBUG")
    settings = Settings()
    assert settings.title_seed == 7
    assert settings.log_level == "DEBUG"


def test_seeded_pickers_agree():
    settings = Settings(title_seed=11)
    options = ["a", "b", "c", "d"]
    first = settings.make_picker()
    second = settings.make_picker()
    assert [first.choice(options) for _ in range(5)] == [second.choice(options) for _ in range(5)]
