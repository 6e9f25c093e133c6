# roster/main.py
"""Главный модуль: интерактивное заполнение списка студентов и печать отчета."""
import argparse
import logging
import sys
from typing import List, Optional, TextIO

from . import config, io_utils, processing
from .errors import RosterAppError
from .processing import Roster

logger = logging.getLogger(__name__)


def read_additional_students(roster: Roster, reader: io_utils.ConsoleReader):
    """Спрашивает количество новых студентов и добавляет их вместе с оценками."""
    count = reader.read_int(config.PROMPT_STUDENT_COUNT)
    for i in range(count):
        name = reader.read_line(config.PROMPT_NAME.format(index=i + 1))
        age = reader.read_int(config.PROMPT_AGE.format(name=name))
        handle = roster.add_student(name, age)

        grade_count = reader.read_int(config.PROMPT_GRADE_COUNT.format(name=name))
        for j in range(grade_count):
            grade = reader.read_int(config.PROMPT_GRADE.format(index=j + 1, name=name))
            roster.add_grade(handle, grade)


def main_cli(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
             strict: bool = config.DEFAULT_STRICT_INPUT) -> Roster:
    """Основной сценарий: начальные студенты, ввод новых, вывод всех."""
    out = stdout if stdout is not None else sys.stdout
    roster = processing.seed_roster()
    reader = io_utils.ConsoleReader(stdin, out, strict=strict)

    read_additional_students(roster, reader)

    io_utils.print_report(roster, out)
    return roster


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Student roster: add students and grades, print a summary",
    )
    parser.add_argument("--strict", action="store_true",
                        help="Stop with an error on malformed input instead of ignoring it")
    parser.add_argument("--stats", action="store_true", help="Print group statistics after the report")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def run(argv: Optional[List[str]] = None) -> int:
    """Точка входа процесса. Возвращает код завершения."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
    )

    try:
        roster = main_cli(strict=args.strict or config.DEFAULT_STRICT_INPUT)
    except KeyboardInterrupt:
        print("\nПрограмма принудительно остановлена.", file=sys.stderr)
        return 130
    except RosterAppError as e:
        logger.error("Ошибка ввода данных: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.stats:
        stats = processing.get_group_statistics(roster)
        print()
        for line in io_utils.format_statistics(stats):
            print(line)
    return 0


if __name__ == '__main__':
    sys.exit(run())
