from pathlib import Path

from timeledger.config import Settings


def test_settings_read_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TIMELEDGER_LEDGER", "ledgers/2019.json")
    monkeypatch.setenv("TIMELEDGER_LOG_LEVEL", "DEBUG")

    settings = Settings()

    assert settings.ledger_path == Path("ledgers/2019.json")
    assert settings.log_level == "DEBUG"


def test_settings_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TIMELEDGER_LEDGER", raising=False)
    monkeypatch.delenv("TIMELEDGER_LOG_LEVEL", raising=False)

    settings = Settings()

    assert settings.ledger_path is None
    assert settings.log_level == "INFO"


def test_settings_read_dotenv(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TIMELEDGER_LEDGER", raising=False)
    (tmp_path / ".env").write_text("TIMELEDGER_LEDGER=from_env_file.json\n", encoding="utf-8")

    assert Settings().ledger_path == Path("from_env_file.json")
