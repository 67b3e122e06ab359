import os

from envbind.loader import find_dotenv, load


def test_find_dotenv_in_directory(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("A=1\n")
    assert find_dotenv(tmp_path) == env_file


def test_find_dotenv_walks_up(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("A=1\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert find_dotenv(nested) == env_file


def test_find_dotenv_prefers_nearest(tmp_path):
    (tmp_path / ".env").write_text("A=1\n")
    nested = tmp_path / "inner"
    nested.mkdir()
    inner_file = nested / ".env"
    inner_file.write_text("A=2\n")
    assert find_dotenv(nested) == inner_file


def test_load_overrides_existing(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("ENVBIND_LOADER_VAR=from_file\n")
    monkeypatch.setenv("ENVBIND_LOADER_VAR", "original")
    monkeypatch.chdir(tmp_path)
    found = load()
    try:
        assert found == tmp_path / ".env"
        assert os.environ["ENVBIND_LOADER_VAR"] == "from_file"
    finally:
        os.environ.pop("ENVBIND_LOADER_VAR", None)