import json
import logging

from dino_dash.storage import JsonHighScoreStore


def test_missing_file_reads_zero(tmp_path) -> None:
    """A missing file means no high score yet."""
    store = JsonHighScoreStore(str(tmp_path / "nope.json"))
    assert store.read_high_score() == 0


def test_write_then_read(tmp_path) -> None:
    """Written score reads back from disk."""
    path = tmp_path / "nested" / "scores.json"
    store = JsonHighScoreStore(str(path))
    store.write_high_score(1234)
    assert json.loads(path.read_text(encoding="utf-8")) == {"high_score": 1234}
    assert JsonHighScoreStore(str(path)).read_high_score() == 1234


def test_corrupt_file_reads_zero(tmp_path, caplog) -> None:
    """Malformed JSON is logged and read as zero."""
    path = tmp_path / "scores.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="dino_dash.storage"):
        assert JsonHighScoreStore(str(path)).read_high_score() == 0
    assert "unreadable" in caplog.text


def test_unexpected_payload_reads_zero(tmp_path) -> None:
    """Odd payloads read as zero."""
    path = tmp_path / "scores.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert JsonHighScoreStore(str(path)).read_high_score() == 0
    path.write_text('{"high_score": -40}', encoding="utf-8")
    assert JsonHighScoreStore(str(path)).read_high_score() == 0


def test_write_failure_is_logged(tmp_path, caplog) -> None:
    """Write errors are logged, not raised."""
    # A directory where the file should be makes open() fail
    path = tmp_path / "taken"
    path.mkdir()
    with caplog.at_level(logging.WARNING, logger="dino_dash.storage"):
        JsonHighScoreStore(str(path)).write_high_score(10)
    assert "Could not save" in caplog.text
