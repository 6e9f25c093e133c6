# roster/processing.py
"""Модуль для обработки данных: список студентов, отчет, статистика."""
import logging
import sys
from typing import List, Dict, Any, Optional, Iterable, Iterator, TextIO

from .config import SEED_STUDENTS
from .errors import StudentNotFoundError
from .models import Student

logger = logging.getLogger(__name__)


class Roster:
    """Упорядоченный список студентов в порядке добавления.

    add_student возвращает номер записи, по которому затем добавляются оценки.
    """
    def __init__(self):
        self._students: List[Student] = []

    def add_student(self, name: str, age: int) -> int:
        """Добавляет студента без оценок и возвращает его номер."""
        self._students.append(Student(name, age))
        handle = len(self._students) - 1
        logger.debug("Добавлен студент #%d: %r, возраст %d", handle, name, age)
        return handle

    def get(self, handle: int) -> Student:
        """Возвращает студента по номеру."""
        if not 0 <= handle < len(self._students):
            raise StudentNotFoundError(f"Студент с номером {handle} не найден.")
        return self._students[handle]

    def add_grade(self, handle: int, value: int):
        """Добавляет оценку студенту с заданным номером."""
        self.get(handle).add_grade(value)
        logger.debug("Студенту #%d добавлена оценка %d", handle, value)

    def report_lines(self) -> List[str]:
        return [s.format_info() for s in self._students]

    def print_all(self, stream: Optional[TextIO] = None):
        """Выводит всех студентов по одному на строку. Данные не меняются."""
        out = stream if stream is not None else sys.stdout
        for line in self.report_lines():
            out.write(line + "\n")
        logger.info("Выведено студентов: %d", len(self._students))

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)


def seed_roster(seed: Iterable = SEED_STUDENTS) -> Roster:
    """Создает список с начальными студентами из настроек."""
    roster = Roster()
    for name, age, grades in seed:
        handle = roster.add_student(name, age)
        for grade in grades:
            roster.add_grade(handle, grade)
    return roster


def get_group_statistics(students: Iterable[Student]) -> Optional[Dict[str, Any]]:
    """Рассчитывает статистику по группе студентов."""
    students = list(students)
    if not students:
        return None

    all_grades = [grade for s in students for grade in s.grades]
    overall_avg = sum(all_grades) / len(all_grades) if all_grades else 0.0

    # max/min берут первого из равных, то есть более раннего по порядку добавления
    best_student = max(students, key=lambda s: s.average)
    worst_student = min(students, key=lambda s: s.average)

    return {
        "total_students": len(students),
        "total_grades": len(all_grades),
        "overall_average": overall_avg,
        "best_student": best_student,
        "worst_student": worst_student,
    }
