import json

from game.arena.storage import JsonFileStore, MemoryStore


def test_memory_store_roundtrip():
    store = MemoryStore()
    assert store.get("highScore") is None
    store.set("highScore", 120)
    assert store.get("highScore") == 120


def test_memory_store_rejects_non_integers():
    store = MemoryStore({"highScore": "abc"})
    assert store.get("highScore") is None


def test_json_store_creates_directories(tmp_path):
    path = tmp_path / "nested" / "scores.json"
    store = JsonFileStore(str(path))
    assert store.get("highScore") is None
    store.set("highScore", 250)
    assert json.loads(path.read_text()) == {"highScore": 250}
    assert JsonFileStore(str(path)).get("highScore") == 250


def test_json_store_keeps_other_keys(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"other": 1}))
    store = JsonFileStore(str(path))
    store.set("highScore", 5)
    assert json.loads(path.read_text()) == {"other": 1, "highScore": 5}


def test_json_store_corrupt_file_reads_empty(tmp_path, capsys):
    path = tmp_path / "scores.json"
    path.write_text("{not json")
    store = JsonFileStore(str(path))
    assert store.get("highScore") is None
    assert "[JsonFileStore]" in capsys.readouterr().out
    store.set("highScore", 9)
    assert store.get("highScore") == 9


def test_json_store_string_number(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"highScore": "77"}))
    assert JsonFileStore(str(path)).get("highScore") == 77


def test_json_store_integral_float(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"highScore": 150.0}))
    assert JsonFileStore(str(path)).get("highScore") == 150


def test_json_store_fractional_float_ignored(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"highScore": 150.5}))
    assert JsonFileStore(str(path)).get("highScore") is None
