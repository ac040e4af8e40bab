import os
from unittest import mock

from gosight_shared.utils.path import get_working_dir


def test_returns_current_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert os.path.realpath(get_working_dir()) == os.path.realpath(str(tmp_path))


def test_returns_empty_on_error():
    with mock.patch("gosight_shared.utils.path.os.getcwd", side_effect=FileNotFoundError("gone")):
        assert get_working_dir() == ""