"""Модуль для консольного ввода: запросы с повтором до корректного значения."""
import logging
from typing import Callable, TypeVar

try:
    # Сначала относительный (для pytest)
    from . import config
    from .errors import DataValidationError
    from .validation import parse_int, validate_count
except (ImportError, ValueError):
    # Затем прямой (для EXE)
    import config
    from errors import DataValidationError
    from validation import parse_int, validate_count
# -------------------------

logger = logging.getLogger(__name__)

T = TypeVar("T")

def prompt_until_valid(prompt: str, convert: Callable[[str], T], indent: str = "") -> T:
    """Запрашивает значение, пока convert не примет ввод без ошибки валидации.

    EOFError не перехватывается: закрытый поток ввода завершает сессию.
    """
    while True:
        raw = input(prompt)
        try:
            return convert(raw)
        except DataValidationError as e:
            logger.debug("Отклонён ввод %r: %s", raw, e)
            print(f"{indent}❌ Ошибка: {e}")

def prompt_int(prompt: str, low: int, high: int) -> int:
    """Запрашивает целое число в диапазоне [low, high]."""
    return prompt_until_valid(prompt, lambda raw: validate_count(parse_int(raw), low, high))

def confirm(prompt: str) -> bool:
    """Задаёт вопрос да/нет. Подтверждением считаются ответы из YES_ANSWERS."""
    answer = input(prompt)
    return answer.strip().lower() in config.YES_ANSWERS

def parse_menu_choice(raw: str) -> int:
    """Возвращает номер пункта меню или -1, если ввод не число."""
    try:
        return int(raw.strip())
    except ValueError:
        return -1

def wait_for_enter():
    input("\nНажмите Enter, чтобы продолжить...")
