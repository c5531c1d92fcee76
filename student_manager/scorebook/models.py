"""Модуль, определяющий основные модели данных: запись студента, ростер и сессию."""
from typing import Callable, Iterator, List, Optional, Any

try:
    # Сначала относительный (для pytest)
    from . import config
    from .errors import DuplicateStudentIdError, RangeError
    from .validation import validate_identifier, validate_name, validate_score, validate_count
except (ImportError, ValueError):
    # Затем прямой (для EXE)
    import config
    from errors import DuplicateStudentIdError, RangeError
    from validation import validate_identifier, validate_name, validate_score, validate_count
# -------------------------

class StudentRecord:
    """Представляет студента с его ID, именем и баллами по курсам."""
    def __init__(self, student_id: int, name: str, scores: List[float]):
        validate_identifier(student_id, ())
        validate_name(name)
        self.scores = [validate_score(float(score)) for score in scores]
        self.id = student_id
        self.name = name

    @property
    def total(self) -> float:
        """Сумма баллов по всем курсам."""
        return sum(self.scores)

    @property
    def average(self) -> float:
        """Средний балл студента. Возвращает 0.0, если курсов нет."""
        if not self.scores:
            return 0.0
        return self.total / len(self.scores)

    def __repr__(self) -> str:
        """Возвращает строковое представление объекта для отладки."""
        return f"StudentRecord(id={self.id}, name='{self.name}', total={self.total:.1f})"

    def __str__(self) -> str:
        """Возвращает удобное для пользователя строковое представление объекта."""
        scores_str = ", ".join(f"{score:.1f}" for score in self.scores)
        return (f"ID: {self.id} | Имя: {self.name:<{config.NAME_MAX_LENGTH}} | "
                f"Сумма: {self.total:<6.1f} | Средний балл: {self.average:<6.2f} | Баллы: [{scores_str}]")


class Roster:
    """Ростер фиксированной вместимости.

    Вместимость и количество курсов задаются один раз при старте.
    Записи хранятся в заранее выделенных слотах, число занятых слотов
    отслеживается отдельно. Содержимое меняется только целиком через replace_all.
    """
    def __init__(self, capacity: int, course_count: int):
        self.capacity = validate_count(capacity, 1, config.MAX_STUDENTS)
        self.course_count = validate_count(course_count, 1, config.MAX_COURSES)
        self._slots: List[Optional[StudentRecord]] = [None] * capacity
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[StudentRecord]:
        return iter(self.records)

    @property
    def records(self) -> List[StudentRecord]:
        """Занятые слоты в текущем порядке."""
        return self._slots[:self._length]

    @property
    def ids(self) -> List[int]:
        return [record.id for record in self.records]

    def replace_all(self, records: List[StudentRecord]) -> None:
        """Заменяет содержимое ростера целиком. При ошибке ростер не меняется."""
        if len(records) > self.capacity:
            raise RangeError(f"Ростер вмещает не более {self.capacity} студентов.")

        seen_ids = set()
        for record in records:
            if len(record.scores) != self.course_count:
                raise RangeError(
                    f"У студента {record.id} {len(record.scores)} баллов, ожидается {self.course_count}."
                )
            if record.id in seen_ids:
                raise DuplicateStudentIdError(f"Студент с ID {record.id} уже существует.")
            seen_ids.add(record.id)

        self._slots[:len(records)] = records
        self._slots[len(records):] = [None] * (self.capacity - len(records))
        self._length = len(records)

    def sort(self, key: Callable[[StudentRecord], Any], reverse: bool = False) -> None:
        """Переставляет записи на месте по заданному ключу."""
        self._slots[:self._length] = sorted(self.records, key=key, reverse=reverse)


class Session:
    """Состояние одной интерактивной сессии: ростер и флаг «данные введены»."""
    def __init__(self, roster: Roster):
        self.roster = roster
        self.data_entered = False

    def commit(self, records: List[StudentRecord]) -> None:
        """Сохраняет результат прохода ввода и открывает доступ к отчётам."""
        self.roster.replace_all(records)
        self.data_entered = True
