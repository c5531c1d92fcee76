"""Модуль для обработки данных: статистика, сортировка и поиск по ростеру."""
import logging
from typing import List, Dict, Any

import pandas as pd

try:
    # 1. Относительный импорт (для pytest)
    from . import config
    from .models import Roster, StudentRecord
    from .errors import NoDataError, RangeError, StudentNotFoundError
except (ImportError, ValueError):
    # 2. Прямой импорт (для EXE)
    import config
    from models import Roster, StudentRecord
    from errors import NoDataError, RangeError, StudentNotFoundError
# --------------------------------------------------

logger = logging.getLogger(__name__)

GRADE_LABELS = list(config.GRADE_BANDS)
GRADE_BINS = list(config.GRADE_BANDS.values()) + [float("inf")]

def _ensure_data(roster: Roster):
    if len(roster) == 0:
        raise NoDataError("Нет данных. Сначала введите данные студентов (пункт 2).")

def scores_frame(roster: Roster) -> pd.DataFrame:
    """Строит таблицу баллов: строки - студенты (индекс по ID), столбцы - номера курсов."""
    _ensure_data(roster)
    return pd.DataFrame(
        [record.scores for record in roster],
        index=pd.Index(roster.ids, name="id"),
        columns=range(roster.course_count),
        dtype=float,
    )

def _course_column(roster: Roster, course_index: int) -> pd.Series:
    frame = scores_frame(roster)
    if course_index < 0 or course_index >= roster.course_count:
        raise RangeError(f"Курс {course_index + 1} не существует. Доступно курсов: {roster.course_count}.")
    return frame[course_index]

# --- Статистика ---

def course_statistics(roster: Roster, course_index: int) -> Dict[str, float]:
    """Рассчитывает средний, максимальный, минимальный и суммарный балл по одному курсу."""
    column = _course_column(roster, course_index)

    # Максимум стартует с 0, минимум - со 100
    highest = max(config.MIN_SCORE, float(column.max()))
    lowest = min(config.MAX_SCORE, float(column.min()))

    return {
        "average": float(column.mean()),
        "highest": highest,
        "lowest": lowest,
        "total": float(column.sum()),
    }

def all_course_statistics(roster: Roster) -> List[Dict[str, float]]:
    return [course_statistics(roster, j) for j in range(roster.course_count)]

def student_statistics(roster: Roster) -> List[Dict[str, Any]]:
    """Сумма и средний балл каждого студента в порядке ростера."""
    _ensure_data(roster)
    return [
        {"id": s.id, "name": s.name, "total": s.total, "average": s.average}
        for s in roster
    ]

def grade_distribution(roster: Roster, course_index: int) -> Dict[str, int]:
    """Считает количество студентов в каждом оценочном диапазоне (A..F) по курсу."""
    column = _course_column(roster, course_index)
    bands = pd.cut(column, bins=GRADE_BINS, labels=GRADE_LABELS, right=False)
    counts = bands.value_counts()
    return {label: int(counts.get(label, 0)) for label in reversed(GRADE_LABELS)}

def all_grade_distributions(roster: Roster) -> List[Dict[str, int]]:
    return [grade_distribution(roster, j) for j in range(roster.course_count)]

# --- Сортировка ---

def sort_by_total(roster: Roster, descending: bool = False) -> Roster:
    """Сортирует ростер на месте по сумме баллов."""
    roster.sort(key=lambda s: s.total, reverse=descending)
    return roster

def sort_by_id(roster: Roster) -> Roster:
    roster.sort(key=lambda s: s.id)
    return roster

def sort_by_name(roster: Roster) -> Roster:
    """Сортирует ростер на месте по имени без учёта регистра."""
    roster.sort(key=lambda s: s.name.casefold())
    return roster

def sort_students(roster: Roster, by: str) -> Roster:
    """Сортирует ростер на месте по заданному критерию."""
    if by == 'total_desc':
        sort_by_total(roster, descending=True)
    elif by == 'total_asc':
        sort_by_total(roster, descending=False)
    elif by == 'id':
        sort_by_id(roster)
    elif by == 'name':
        sort_by_name(roster)
    else:
        raise ValueError("Неверный ключ для сортировки. Доступно: 'total_desc', 'total_asc', 'id', 'name'.")
    logger.info("Ростер отсортирован по '%s'", by)
    return roster

# --- Поиск ---

def find_by_id(roster: Roster, student_id: int) -> StudentRecord:
    """Возвращает студента с заданным ID."""
    student = next((s for s in roster if s.id == student_id), None)
    if not student:
        raise StudentNotFoundError(f"Студент с ID {student_id} не найден.")
    return student

def find_by_name(roster: Roster, name: str) -> List[StudentRecord]:
    """Возвращает всех студентов с точно таким именем (без учёта регистра)."""
    needle = name.casefold()
    found = [s for s in roster if s.name.casefold() == needle]
    if not found:
        raise StudentNotFoundError(f"Студент '{name}' не найден.")
    return found
