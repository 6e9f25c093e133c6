# tests/conftest.py
import io
import pytest
from roster.processing import Roster

@pytest.fixture
def sample_roster() -> Roster:
    """Фикстура, предоставляющая тестовый список студентов."""
    roster = Roster()
    alice = roster.add_student("Alice", 20)
    roster.add_grade(alice, 90)
    roster.add_grade(alice, 85)
    bob = roster.add_student("Bob", 22)
    roster.add_grade(bob, 78)
    roster.add_student("Mary Ann Smith", 19)
    return roster

@pytest.fixture
def fake_stdin(monkeypatch):
    """Подменяет sys.stdin заданным текстом."""
    def _set(text: str):
        monkeypatch.setattr('sys.stdin', io.StringIO(text))
    return _set
