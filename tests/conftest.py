import pytest

from student_info import Store


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "students.txt"


@pytest.fixture
def store(data_file):
    return Store(str(data_file))


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with answers taken from a list; EOF once exhausted."""
    def _feed(*answers):
        it = iter(answers)

        def fake_input(prompt=""):
            try:
                return next(it)
            except StopIteration:
                raise EOFError
        monkeypatch.setattr("builtins.input", fake_input)
    return _feed
