import logging

import pytest

from combiner.config import ConfigurationError, Settings
from combiner.main import EXIT_FAILURE, EXIT_OK, main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("COMBINER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("COMBINER_LOG_FILE", raising=False)
    yield
    logger = logging.getLogger("combiner")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_cli_success(solid_image, tmp_path, red, blue):
    a = solid_image("a.png", (4, 4), red)
    b = solid_image("b.png", (2, 2), blue)
    target = tmp_path / "out.png"

    assert main([str(a), str(b), str(target)]) == EXIT_OK
    assert target.exists()


def test_cli_format_mismatch_returns_failure(solid_image, tmp_path, red, blue):
    a = solid_image("a.png", (2, 2), red)
    b = solid_image("b.jpg", (2, 2), blue, fmt="JPEG")
    target = tmp_path / "out.png"

    assert main([str(a), str(b), str(target)]) == EXIT_FAILURE
    assert not target.exists()


def test_cli_wrong_argument_count_exits_before_work(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["only_one.png"])
    assert exc.value.code == 2
    assert "usage: combiner" in capsys.readouterr().err


def test_cli_writes_log_file(solid_image, tmp_path, red, blue):
    a = solid_image("a.png", (2, 2), red)
    b = solid_image("b.png", (2, 2), blue)
    log_file = tmp_path / "logs" / "combiner.log"

    code = main([str(a), str(b), str(tmp_path / "out.png"), "--log-level", "debug", "--log-file", str(log_file)])

    assert code == EXIT_OK
    assert log_file.exists()
    assert str(tmp_path / "out.png") in log_file.read_text(encoding="utf-8")


def test_cli_rejects_unknown_log_level(solid_image, tmp_path, red):
    a = solid_image("a.png", (2, 2), red)
    with pytest.raises(SystemExit) as exc:
        main([str(a), str(a), str(tmp_path / "o.png"), "--log-level", "loud"])
    assert exc.value.code == 2


def test_settings_from_env(tmp_path):
    settings = Settings.from_env({"COMBINER_LOG_LEVEL": "warning", "COMBINER_LOG_FILE": str(tmp_path / "x.log")})
    assert settings.log_level == "WARNING"
    assert settings.log_file == tmp_path / "x.log"

    assert Settings.from_env({}) == Settings()
    with pytest.raises(ConfigurationError):
        Settings.from_env({"COMBINER_LOG_LEVEL": "verbose"})
