# roster/models.py
"""Модуль, определяющий модель данных Student."""
from typing import List, Tuple


class Student:
    """Представляет студента с именем, возрастом и оценками.

    Имя и возраст задаются при создании и дальше не меняются.
    Оценки можно только добавлять: порядок добавления = порядок вывода.
    """
    def __init__(self, name: str, age: int):
        self._name = name
        self._age = age
        self._grades: List[int] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def age(self) -> int:
        return self._age

    @property
    def grades(self) -> Tuple[int, ...]:
        """Копия оценок только для чтения."""
        return tuple(self._grades)

    def add_grade(self, grade: int):
        """Добавляет оценку в конец списка. Повторы разрешены."""
        self._grades.append(grade)

    @property
    def average(self) -> float:
        """Рассчитывает средний балл студента. Возвращает 0.0, если оценок нет."""
        if not self._grades:
            return 0.0
        return sum(self._grades) / len(self._grades)

    def format_info(self) -> str:
        """Строка отчета. После каждой оценки идет пробел, включая последнюю."""
        grades_str = "".join(f"{g} " for g in self._grades)
        return f"Name: {self._name}, Age: {self._age}, Grades: {grades_str}"

    def __repr__(self) -> str:
        """Возвращает строковое представление объекта для отладки."""
        return f"Student(name='{self._name}', age={self._age}, grades={self._grades})"

    def __str__(self) -> str:
        return self.format_info()
