"""Главный модуль, реализующий консольный интерфейс (CLI) для учёта баллов студентов."""
import sys
import os
import logging
import traceback

if getattr(sys, 'frozen', False):
    base_path = sys._MEIPASS
else:
    base_path = os.path.dirname(os.path.abspath(__file__))

if base_path not in sys.path:
    sys.path.append(base_path)

try:
    # 1. Попытка относительного импорта (Для pytest и запуска через python -m scorebook.main)
    from . import config, entry, errors, io_utils, processing, reports, validation
    from .models import Roster, Session
except (ImportError, ValueError):
    # 2. Попытка прямого импорта (Для EXE и запуска через python scorebook/main.py)
    import config
    import entry
    import errors
    import io_utils
    import processing
    import reports
    import validation
    from models import Roster, Session
# -------------------------

logger = logging.getLogger(__name__)

def print_menu():
    """Выводит на экран главное меню."""
    print("\n" + "="*44)
    print("        СИСТЕМА УЧЁТА СТУДЕНТОВ")
    print("="*44)
    print("1. Показать инструкцию")
    print("2. Ввести данные студентов")
    print("3. Статистика по курсам")
    print("4. Статистика по студентам")
    print("5. Сортировка: от высших баллов к низшим")
    print("6. Сортировка: от низших баллов к высшим")
    print("7. Сортировка по ID студента")
    print("8. Сортировка по имени студента")
    print("9. Поиск по ID студента")
    print("10. Поиск по имени студента")
    print("11. Распределение оценок")
    print("12. Показать всех студентов")
    print("0. Выход")
    print("="*44)

def print_instructions():
    """Выводит правила ввода данных."""
    print("\n" + "="*44)
    print("                ИНСТРУКЦИЯ")
    print("="*44)
    print(f"1. Максимум {config.MAX_STUDENTS} студентов и {config.MAX_COURSES} курсов")
    print(f"2. ID студента - 4 цифры ({config.MIN_STUDENT_ID}-{config.MAX_STUDENT_ID})")
    print(f"3. Имя студента: буквы, пробелы и дефисы, не длиннее {config.NAME_MAX_LENGTH} символов")
    print(f"4. Баллы должны быть от {config.MIN_SCORE:g} до {config.MAX_SCORE:g}")
    print("5. Данные хранятся до завершения программы")
    print("6. Пункты меню можно использовать в любом порядке")
    print("="*44)

# --- Действия, доступные только после ввода данных ---

def show_course_statistics(session: Session):
    stats = processing.all_course_statistics(session.roster)
    print(reports.format_course_statistics(stats))

def show_student_statistics(session: Session):
    rows = processing.student_statistics(session.roster)
    print(reports.format_student_statistics(rows))

def show_sorted(session: Session, by: str, title: str):
    """Сортирует ростер на месте и выводит его таблицей."""
    processing.sort_students(session.roster, by)
    print(f"\n{title}:")
    print(reports.format_student_table(session.roster))

def search_by_id(session: Session):
    raw = input("\nВведите ID студента для поиска: ")
    student_id = validation.parse_int(raw)
    student = processing.find_by_id(session.roster, student_id)
    print(reports.format_student_details(student))

def search_by_name(session: Session):
    name = input("\nВведите имя студента для поиска: ")
    for student in processing.find_by_name(session.roster, name):
        print(reports.format_student_details(student))

def show_grade_distribution(session: Session):
    distributions = processing.all_grade_distributions(session.roster)
    print(reports.format_grade_distribution(distributions))

def show_all_students(session: Session):
    print(reports.format_student_table(session.roster))

GATED_ACTIONS = {
    3: show_course_statistics,
    4: show_student_statistics,
    5: lambda session: show_sorted(session, 'total_desc', "ОТСОРТИРОВАНО ПО УБЫВАНИЮ СУММЫ БАЛЛОВ"),
    6: lambda session: show_sorted(session, 'total_asc', "ОТСОРТИРОВАНО ПО ВОЗРАСТАНИЮ СУММЫ БАЛЛОВ"),
    7: lambda session: show_sorted(session, 'id', "ОТСОРТИРОВАНО ПО ID СТУДЕНТА"),
    8: lambda session: show_sorted(session, 'name', "ОТСОРТИРОВАНО ПО ИМЕНИ СТУДЕНТА"),
    9: search_by_id,
    10: search_by_name,
    11: show_grade_distribution,
    12: show_all_students,
}

def run_menu_loop(session: Session) -> int:
    """Основной цикл меню. Возвращает код завершения."""
    while True:
        print_menu()
        choice = io_utils.parse_menu_choice(input("Выберите пункт меню (0-12): "))

        if choice == 0:
            print("\n👋 Спасибо, что воспользовались системой учёта студентов. До свидания!")
            logger.info("Сессия завершена пользователем")
            return 0

        try:
            if choice == 1:
                print_instructions()

            elif choice == 2:
                entry.enter_all_records(session)

            elif choice in GATED_ACTIONS:
                if not session.data_entered:
                    raise errors.NoDataError("Сначала введите данные студентов (пункт 2).")
                GATED_ACTIONS[choice](session)

            else:
                print("\n❌ Неверный выбор. Пожалуйста, введите число от 0 до 12.")

        except errors.StudentAppError as e:
            print(f"\n❌ Ошибка: {e}")
        except EOFError:
            raise
        except Exception as e:
            logger.exception("Непредвиденная ошибка в пункте меню %s", choice)
            print(f"❌ Произошла непредвиденная ошибка: {e}")

        io_utils.wait_for_enter()

def main_cli() -> int:
    """Запрашивает размеры ростера и запускает основной цикл консольного приложения."""
    print("\n" + "="*44)
    print("        СИСТЕМА УЧЁТА СТУДЕНТОВ")
    print("="*44)

    try:
        student_count = io_utils.prompt_int(
            f"\nВведите количество студентов (1-{config.MAX_STUDENTS}): ", 1, config.MAX_STUDENTS
        )
        course_count = io_utils.prompt_int(
            f"Введите количество курсов (1-{config.MAX_COURSES}): ", 1, config.MAX_COURSES
        )
        session = Session(Roster(student_count, course_count))
        logger.info("Сессия начата: %d студентов, %d курсов", student_count, course_count)
        return run_menu_loop(session)
    except EOFError:
        logger.warning("Поток ввода закрыт до выхода из программы")
        print("\n⚠️ Поток ввода закрыт. Программа завершена.")
        return 1

def configure_logging():
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT, stream=sys.stderr)

def main() -> int:
    configure_logging()
    try:
        return main_cli()
    except KeyboardInterrupt:
        print("\nПрограмма принудительно остановлена.")
        return 130
    except Exception:
        print("\n!!! КРИТИЧЕСКАЯ ОШИБКА ЗАПУСКА !!!")
        traceback.print_exc()
        return 1

if __name__ == '__main__':
    sys.exit(main())
