# tests/test_processing.py
import io
import pytest
from roster.processing import Roster, seed_roster, get_group_statistics, StudentNotFoundError

def test_add_student_returns_sequential_handles():
    roster = Roster()
    assert roster.add_student("Alice", 20) == 0
    assert roster.add_student("Alice", 20) == 1  # имена не уникальны
    assert len(roster) == 2

def test_add_grade_by_handle(sample_roster):
    sample_roster.add_grade(1, 95)
    assert sample_roster.get(1).grades == (78, 95)
    assert sample_roster.get(0).grades == (90, 85)

@pytest.mark.parametrize("handle", [3, 100, -1])
def test_add_grade_unknown_handle(sample_roster, handle):
    with pytest.raises(StudentNotFoundError):
        sample_roster.add_grade(handle, 50)

def test_iteration_keeps_insertion_order(sample_roster):
    assert [s.name for s in sample_roster] == ["Alice", "Bob", "Mary Ann Smith"]

def test_print_all_format(sample_roster, capsys):
    sample_roster.print_all()
    captured = capsys.readouterr()
    assert captured.out == (
        "Name: Alice, Age: 20, Grades: 90 85 \n"
        "Name: Bob, Age: 22, Grades: 78 \n"
        "Name: Mary Ann Smith, Age: 19, Grades: \n"
    )

def test_print_all_is_idempotent(sample_roster):
    first, second = io.StringIO(), io.StringIO()
    sample_roster.print_all(first)
    sample_roster.print_all(second)
    assert first.getvalue() == second.getvalue()
    assert sample_roster.report_lines() == first.getvalue().splitlines()

def test_seed_roster():
    roster = seed_roster()
    assert roster.report_lines() == [
        "Name: Alice, Age: 20, Grades: 90 85 ",
        "Name: Bob, Age: 22, Grades: 78 ",
    ]

def test_get_group_statistics(sample_roster):
    stats = get_group_statistics(sample_roster)
    assert stats["total_students"] == 3
    assert stats["total_grades"] == 3
    assert stats["best_student"].name == "Alice"
    assert stats["worst_student"].name == "Mary Ann Smith"
    assert pytest.approx(stats["overall_average"], 0.01) == 84.33

def test_get_group_statistics_empty():
    assert get_group_statistics(Roster()) is None
