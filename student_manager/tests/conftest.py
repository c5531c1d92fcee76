import pytest
from typing import List
from scorebook.models import StudentRecord, Roster, Session

@pytest.fixture
def sample_students() -> List[StudentRecord]:
    """Фикстура, предоставляющая тестовый набор студентов (3 курса)."""
    return [
        StudentRecord(1003, "Иванов Иван", [78, 85, 90]),
        StudentRecord(1001, "петров Петр", [92, 88, 95]),
        StudentRecord(1002, "Сидорова Анна", [65, 70, 59.5]),
    ]

@pytest.fixture
def sample_roster(sample_students) -> Roster:
    roster = Roster(3, 3)
    roster.replace_all(sample_students)
    return roster

@pytest.fixture
def example_roster() -> Roster:
    """Два студента, два курса: Ann [100, 100] и Bo [50, 70]."""
    roster = Roster(2, 2)
    roster.replace_all([
        StudentRecord(1001, "Ann", [100, 100]),
        StudentRecord(1002, "Bo", [50, 70]),
    ])
    return roster

@pytest.fixture
def empty_session() -> Session:
    return Session(Roster(2, 2))

@pytest.fixture
def scripted_input(monkeypatch):
    """Подменяет input() заданной последовательностью ответов.

    Когда ответы заканчиваются, выбрасывается EOFError - как при закрытом stdin.
    """
    def install(answers):
        answers = iter(answers)

        def mock_input(prompt=""):
            try:
                return next(answers)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr('builtins.input', mock_input)
    return install
