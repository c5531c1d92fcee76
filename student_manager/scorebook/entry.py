"""Модуль для массового ввода данных: один проход заполняет весь ростер."""
import logging
from typing import List, Optional, Set

try:
    # Сначала относительный (для pytest)
    from . import io_utils
    from .models import Session, StudentRecord
    from .validation import parse_int, parse_score, validate_identifier, validate_name, validate_score
except (ImportError, ValueError):
    # Затем прямой (для EXE)
    import io_utils
    from models import Session, StudentRecord
    from validation import parse_int, parse_score, validate_identifier, validate_name, validate_score
# -------------------------

logger = logging.getLogger(__name__)

def collect_student_record(accepted_ids: Set[int], course_count: int) -> StudentRecord:
    """Запрашивает ID, имя и баллы одного студента. Каждое поле повторяется до корректного ввода."""
    student_id = io_utils.prompt_until_valid(
        "ID студента (4 цифры, 1000-9999): ",
        lambda raw: validate_identifier(parse_int(raw), accepted_ids),
    )
    name = io_utils.prompt_until_valid(
        "Имя студента (буквы, пробелы и дефисы): ",
        validate_name,
    )

    print(f"Введите баллы по {course_count} курсам:")
    scores = []
    for j in range(course_count):
        score = io_utils.prompt_until_valid(
            f"  Курс {j + 1} (0-100): ",
            lambda raw: validate_score(parse_score(raw)),
            indent="    ",
        )
        scores.append(score)

    return StudentRecord(student_id, name, scores)

def enter_all_records(session: Session) -> Optional[int]:
    """Проводит полный проход ввода и заменяет ростер.

    Возвращает количество сохранённых записей или None, если пользователь
    отказался перезаписывать уже введённые данные.
    """
    roster = session.roster

    if session.data_entered:
        logger.warning("Запрошена перезапись существующих данных (%d записей)", len(roster))
        print("\n⚠️ Данные студентов уже введены!")
        print("Новый ввод перезапишет существующие записи.")
        if not io_utils.confirm("Продолжить? (y/n): "):
            print("ℹ️ Ввод данных отменён.")
            logger.info("Перезапись отменена пользователем")
            return None

    print("\n" + "="*44)
    print("        ВВОД ДАННЫХ СТУДЕНТОВ")
    print("="*44)

    records: List[StudentRecord] = []
    accepted_ids: Set[int] = set()
    for i in range(roster.capacity):
        print(f"\n--- Студент {i + 1} ---")
        record = collect_student_record(accepted_ids, roster.course_count)
        accepted_ids.add(record.id)
        records.append(record)

    session.commit(records)
    logger.info("Проход ввода завершён: сохранено %d записей", len(records))
    print(f"\n✅ Успешно сохранено {len(records)} записей о студентах.")
    return len(records)
