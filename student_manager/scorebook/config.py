"""Модуль с настройками приложения: ограничения ростера, правила валидации и логирование."""
import os

# --- ОГРАНИЧЕНИЯ РОСТЕРА ---
MAX_STUDENTS = 30
MAX_COURSES = 6

# --- ПРАВИЛА ВАЛИДАЦИИ ---
MIN_STUDENT_ID = 1000
MAX_STUDENT_ID = 9999
NAME_MAX_LENGTH = 19
MIN_SCORE = 0.0
MAX_SCORE = 100.0

# Нижние границы оценочных диапазонов (от низшей к высшей).
# Балл на границе попадает в верхний диапазон: 90 -> A, 60 -> D.
GRADE_BANDS = {
    "F": 0,
    "D": 60,
    "C": 70,
    "B": 80,
    "A": 90,
}

# Ответы, которые считаются подтверждением
YES_ANSWERS = ("y", "yes", "д", "да")

# --- ЛОГИРОВАНИЕ ---
LOG_LEVEL = os.environ.get("SCOREBOOK_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
