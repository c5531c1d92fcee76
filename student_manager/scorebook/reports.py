"""Модуль для форматирования отчётов в текст для вывода в консоль."""
from typing import List, Dict, Any

try:
    from . import config
    from .models import Roster, StudentRecord
except (ImportError, ValueError):
    import config
    from models import Roster, StudentRecord
# -------------------------

WIDE_RULE = "=" * 100
RULE = "=" * 44

def _banner(title: str) -> List[str]:
    return ["", RULE, title.center(44).rstrip(), RULE]

def format_student_table(roster: Roster) -> str:
    """Таблица всех студентов: ID, имя, баллы по курсам, сумма и средний балл."""
    name_width = config.NAME_MAX_LENGTH + 1
    header = f"{'ID':<6}  {'Имя студента':<{name_width}}"
    underline = f"{'-' * 6}  {'-' * name_width}"
    for j in range(roster.course_count):
        header += f"  {'Курс ' + str(j + 1):>8}"
        underline += f"  {'-' * 8}"
    header += f"  {'Сумма':>9}  {'Среднее':>8}"
    underline += f"  {'-' * 9}  {'-' * 8}"

    lines = ["", WIDE_RULE, "СПИСОК СТУДЕНТОВ".center(100).rstrip(), WIDE_RULE, header, underline]
    for s in roster:
        row = f"{s.id:<6}  {s.name:<{name_width}}"
        for score in s.scores:
            row += f"  {score:8.1f}"
        row += f"  {s.total:9.1f}  {s.average:8.2f}"
        lines.append(row)
    lines.append(WIDE_RULE)
    lines.append(f"Всего студентов: {len(roster)}, всего курсов: {roster.course_count}")
    return "\n".join(lines)

def format_student_details(student: StudentRecord) -> str:
    """Карточка найденного студента со всеми баллами."""
    scores = "  ".join(f"Курс {j + 1}: {score:.1f}" for j, score in enumerate(student.scores))
    return "\n".join([
        "",
        "🔎 СТУДЕНТ НАЙДЕН:",
        f"  ID: {student.id}",
        f"  Имя: {student.name}",
        f"  Баллы: {scores}",
        f"  Сумма: {student.total:.1f}, Средний балл: {student.average:.2f}",
    ])

def format_course_statistics(stats: List[Dict[str, float]]) -> str:
    lines = _banner("СТАТИСТИКА ПО КУРСАМ")
    for j, course in enumerate(stats):
        lines.append(f"\nКурс {j + 1}:")
        lines.append(f"  Средний балл:     {course['average']:.2f}")
        lines.append(f"  Наивысший балл:   {course['highest']:.2f}")
        lines.append(f"  Наименьший балл:  {course['lowest']:.2f}")
        lines.append(f"  Сумма баллов:     {course['total']:.2f}")
    return "\n".join(lines)

def format_student_statistics(rows: List[Dict[str, Any]]) -> str:
    lines = _banner("СТАТИСТИКА ПО СТУДЕНТАМ")
    for row in rows:
        lines.append(f"\nID: {row['id']}, Имя: {row['name']}")
        lines.append(f"  Сумма баллов: {row['total']:.1f}, Средний балл: {row['average']:.2f}")
    return "\n".join(lines)

def format_grade_distribution(distributions: List[Dict[str, int]]) -> str:
    """Распределение оценок по каждому курсу, начиная с A."""
    bounds = list(config.GRADE_BANDS.items())
    ranges = {}
    for k, (label, low) in enumerate(bounds):
        high = bounds[k + 1][1] - 1 if k + 1 < len(bounds) else int(config.MAX_SCORE)
        ranges[label] = f"{low}-{high}"

    lines = _banner("РАСПРЕДЕЛЕНИЕ ОЦЕНОК")
    for j, counts in enumerate(distributions):
        lines.append(f"\nКурс {j + 1}:")
        for label, count in counts.items():
            lines.append(f"  {label} ({ranges[label]}):".ljust(16) + f"{count:2d} студ.")
    return "\n".join(lines)
