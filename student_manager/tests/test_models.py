import pytest
from scorebook.models import StudentRecord, Roster, Session
from scorebook.errors import RangeError, DuplicateStudentIdError, NameCharsetError

def test_student_creation():
    s = StudentRecord(1001, "Тестов Тест", [80, 90])
    assert s.id == 1001
    assert s.name == "Тестов Тест"
    assert s.scores == [80.0, 90.0]

def test_student_total_and_average():
    s = StudentRecord(1001, "С оценками", [70, 80, 90])
    assert s.total == 240.0
    assert s.average == 80.0

    s2 = StudentRecord(1002, "Без оценок", [])
    assert s2.total == 0.0
    assert s2.average == 0.0

def test_student_derived_values_follow_scores():
    s = StudentRecord(1001, "Ann", [10, 20])
    s.scores = [50.0, 100.0]
    assert s.total == 150.0
    assert s.average == 75.0

def test_student_rejects_invalid_fields():
    with pytest.raises(RangeError):
        StudentRecord(999, "Ann", [50])
    with pytest.raises(NameCharsetError):
        StudentRecord(1001, "123", [50])
    with pytest.raises(RangeError):
        StudentRecord(1001, "Ann", [101])

def test_student_str_representation(capsys):
    s = StudentRecord(1005, "Анна Котова", [100, 95])
    print(s)
    captured = capsys.readouterr()
    assert "ID: 1005" in captured.out
    assert "Анна Котова" in captured.out
    assert "97.50" in captured.out
    assert "[100.0, 95.0]" in captured.out

def test_roster_starts_empty():
    roster = Roster(3, 2)
    assert len(roster) == 0
    assert roster.records == []
    assert roster.capacity == 3
    assert roster.course_count == 2

@pytest.mark.parametrize("capacity, course_count", [(0, 1), (31, 1), (1, 0), (1, 7)])
def test_roster_bounds(capacity, course_count):
    with pytest.raises(RangeError):
        Roster(capacity, course_count)

def test_roster_replace_all(sample_students):
    roster = Roster(3, 3)
    roster.replace_all(sample_students)
    assert len(roster) == 3
    assert roster.ids == [1003, 1001, 1002]

def test_roster_replace_all_is_atomic(sample_roster):
    bad = [StudentRecord(2001, "Ann", [50, 60, 70]), StudentRecord(2002, "Bo", [50, 60])]
    with pytest.raises(RangeError):
        sample_roster.replace_all(bad)
    assert sample_roster.ids == [1003, 1001, 1002]

def test_roster_rejects_duplicate_ids():
    roster = Roster(2, 1)
    with pytest.raises(DuplicateStudentIdError):
        roster.replace_all([StudentRecord(1001, "Ann", [50]), StudentRecord(1001, "Bo", [60])])
    assert len(roster) == 0

def test_roster_rejects_overflow():
    roster = Roster(1, 1)
    with pytest.raises(RangeError):
        roster.replace_all([StudentRecord(1001, "Ann", [50]), StudentRecord(1002, "Bo", [60])])

def test_session_commit():
    session = Session(Roster(1, 1))
    assert session.data_entered is False
    session.commit([StudentRecord(1001, "Ann", [50])])
    assert session.data_entered is True
    assert session.roster.ids == [1001]
