# roster/errors.py
"""Модуль для определения пользовательских исключений приложения."""

class RosterAppError(Exception):
    """Базовый класс для всех исключений в этом приложении."""
    pass

class DataValidationError(RosterAppError):
    """Исключение, связанное с некорректным вводом (только в строгом режиме)."""
    pass

class StudentNotFoundError(RosterAppError):
    """Исключение, когда студента с заданным номером нет в списке."""
    pass
