# roster/io_utils.py
"""Модуль для консольного ввода/вывода: чтение чисел и строк, печать отчета."""
import logging
import re
import sys
from typing import Any, Dict, List, Optional, TextIO

from .config import REPORT_HEADER
from .errors import DataValidationError
from .processing import Roster

logger = logging.getLogger(__name__)

_INT_PREFIX = re.compile(r"[+-]?\d+")


class ConsoleReader:
    """Читает из потока целые числа (по словам) и строки целиком.

    Поведение как у потоков ввода в C++: число читается из начала слова,
    остаток слова остается для следующего чтения. В обычном режиме ошибка
    ввода переводит читателя в состояние "failed", после чего все чтения
    возвращают 0 или пустую строку. В строгом режиме бросается
    DataValidationError.
    """
    def __init__(self, stream: Optional[TextIO] = None, out: Optional[TextIO] = None,
                 strict: bool = False):
        self._stream = stream if stream is not None else sys.stdin
        self._out = out if out is not None else sys.stdout
        self._strict = strict
        self._line = ""  # непрочитанный остаток текущей строки
        self.failed = False

    def _prompt(self, prompt: str):
        if prompt:
            self._out.write(prompt)
            self._out.flush()

    def _next_line(self) -> Optional[str]:
        line = self._stream.readline()
        return line if line else None

    def _next_token(self) -> Optional[str]:
        while True:
            stripped = self._line.lstrip()
            if stripped:
                token = stripped.split(None, 1)[0]
                self._line = stripped[len(token):]
                return token
            line = self._next_line()
            if line is None:
                self._line = ""
                return None
            self._line = line

    def _fail(self, message: str, default: Any) -> Any:
        if self._strict:
            raise DataValidationError(message)
        if not self.failed:
            logger.warning("Ошибка ввода: %s. Дальнейший ввод игнорируется.", message)
        self.failed = True
        return default

    def read_int(self, prompt: str = "") -> int:
        """Читает следующее целое число. При ошибке возвращает 0 (или бросает в строгом режиме)."""
        self._prompt(prompt)
        if self.failed:
            return 0

        token = self._next_token()
        if token is None:
            return self._fail("неожиданный конец ввода", 0)

        if self._strict:
            try:
                return int(token)
            except ValueError:
                raise DataValidationError(f"Ожидалось целое число, получено: '{token}'")

        match = _INT_PREFIX.match(token)
        if not match:
            self._line = token + self._line
            return self._fail(f"ожидалось целое число, получено '{token}'", 0)
        # Хвост слова ("12abc" -> "abc") остается для следующего чтения
        self._line = token[match.end():] + self._line
        return int(match.group())

    def read_line(self, prompt: str = "") -> str:
        """Читает строку целиком (может содержать пробелы).

        Если после предыдущего числа в строке ничего не осталось,
        эта строка пропускается и читается следующая.
        """
        self._prompt(prompt)
        if self.failed:
            return ""

        if self._line.strip():
            line = self._line.lstrip()
        else:
            line = self._next_line()
            if line is None:
                return self._fail("неожиданный конец ввода", "")
        self._line = ""
        return line.rstrip("\r\n")


def print_report(roster: Roster, stream: Optional[TextIO] = None):
    """Печатает заголовок и строки всех студентов."""
    out = stream if stream is not None else sys.stdout
    out.write("\n" + REPORT_HEADER + "\n")
    roster.print_all(out)


def format_statistics(stats: Optional[Dict[str, Any]]) -> List[str]:
    if not stats:
        return ["Roster is empty, no statistics available."]
    return [
        "Group Statistics:",
        f"Total students: {stats['total_students']}",
        f"Total grades: {stats['total_grades']}",
        f"Overall average: {stats['overall_average']:.2f}",
        f"Best student: {stats['best_student'].name} (average: {stats['best_student'].average:.2f})",
        f"Worst student: {stats['worst_student'].name} (average: {stats['worst_student'].average:.2f})",
    ]
