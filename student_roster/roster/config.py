# roster/config.py
"""Настройки приложения: начальные данные, тексты подсказок и логирование."""
import logging

# --- НАЧАЛЬНЫЕ ДАННЫЕ ---
# (имя, возраст, оценки) в порядке добавления
SEED_STUDENTS = (
    ("Alice", 20, (90, 85)),
    ("Bob", 22, (78,)),
)

# --- ТЕКСТЫ ---
REPORT_HEADER = "Student Information:"
PROMPT_STUDENT_COUNT = "Enter the number of additional students: "
PROMPT_NAME = "Enter name for student {index}: "
PROMPT_AGE = "Enter age for {name}: "
PROMPT_GRADE_COUNT = "Enter the number of grades for {name}: "
PROMPT_GRADE = "Enter grade {index} for {name}: "

# --- ЛОГИРОВАНИЕ ---
LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# По умолчанию некорректный ввод не прерывает программу
DEFAULT_STRICT_INPUT = False
