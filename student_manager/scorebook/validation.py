"""Модуль с чистыми функциями проверки вводимых данных.

Каждая функция либо возвращает проверенное значение, либо выбрасывает
исключение из errors.py. Побочных эффектов нет.
"""
import math
from typing import Iterable

try:
    # Сначала относительный (для pytest)
    from . import config
    from .errors import (
        InputFormatError, RangeError, DuplicateStudentIdError,
        EmptyNameError, NameTooLongError, NameCharsetError,
    )
except (ImportError, ValueError):
    # Затем прямой (для EXE)
    import config
    from errors import (
        InputFormatError, RangeError, DuplicateStudentIdError,
        EmptyNameError, NameTooLongError, NameCharsetError,
    )
# -------------------------

def parse_int(raw: str) -> int:
    """Преобразует строку в целое число."""
    try:
        return int(raw.strip())
    except ValueError:
        raise InputFormatError("Некорректный ввод. Введите только цифры.")

def parse_score(raw: str) -> float:
    """Преобразует строку в балл. Допускается десятичная запятая."""
    try:
        return float(raw.strip().replace(",", "."))
    except ValueError:
        raise InputFormatError("Некорректный ввод. Введите число.")

def validate_count(value: int, low: int, high: int) -> int:
    """Проверяет, что количество лежит в диапазоне [low, high]."""
    if value < low or value > high:
        raise RangeError(f"Введите число от {low} до {high}.")
    return value

def validate_identifier(student_id: int, existing_ids: Iterable[int]) -> int:
    """Проверяет диапазон ID и его уникальность среди уже принятых ID."""
    if student_id < config.MIN_STUDENT_ID or student_id > config.MAX_STUDENT_ID:
        raise RangeError(
            f"ID должен состоять из 4 цифр ({config.MIN_STUDENT_ID}-{config.MAX_STUDENT_ID})."
        )
    if student_id in existing_ids:
        raise DuplicateStudentIdError(f"Студент с ID {student_id} уже существует. Введите уникальный ID.")
    return student_id

def validate_name(name: str) -> str:
    """Проверяет имя студента.

    Правила: не пустое, не длиннее NAME_MAX_LENGTH символов, только буквы,
    пробелы и дефисы, первый символ - буква, без двух пробелов подряд.
    """
    if not name:
        raise EmptyNameError("Имя не может быть пустым.")
    if len(name) > config.NAME_MAX_LENGTH:
        raise NameTooLongError(f"Имя слишком длинное. Максимум {config.NAME_MAX_LENGTH} символов.")

    if not name[0].isalpha():
        raise NameCharsetError("Имя должно начинаться с буквы.")
    if "  " in name:
        raise NameCharsetError("Имя не может содержать два пробела подряд.")
    for char in name:
        if not (char.isalpha() or char in " -"):
            raise NameCharsetError("Недопустимое имя. Используйте только буквы, пробелы и дефисы.")
    return name

def validate_score(score: float) -> float:
    """Проверяет, что балл лежит в диапазоне 0-100 включительно."""
    # NaN не проходит ни одно сравнение, поэтому проверяем явно
    if math.isnan(score) or score < config.MIN_SCORE or score > config.MAX_SCORE:
        raise RangeError(f"Балл должен быть от {config.MIN_SCORE:g} до {config.MAX_SCORE:g}.")
    return score
