from pixelgate.core.config import Settings


def test_settings_read_unprefixed_environment(monkeypatch):
    monkeypatch.setenv("DATASET_FILE", "pixels/other.json")
    monkeypatch.setenv("UNCLAIMED_USERNAME", "nobody")
    monkeypatch.setenv("LOG_JSON", "true")

    settings = Settings()

    assert settings.DATASET_FILE == "pixels/other.json"
    assert settings.UNCLAIMED_USERNAME == "nobody"
    assert settings.LOG_JSON is True


def test_settings_defaults(monkeypatch):
    for name in ("DATASET_FILE", "UNCLAIMED_USERNAME", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.DATASET_FILE == "_data/pixels.json"
    assert settings.UNCLAIMED_USERNAME == "<UNCLAIMED>"
    assert settings.LOG_LEVEL == "INFO"
