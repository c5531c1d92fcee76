"""Модуль для определения пользовательских исключений приложения."""

class StudentAppError(Exception):
    """Базовый класс для всех исключений в этом приложении."""
    pass

class DataValidationError(StudentAppError):
    """Исключение, связанное с некорректными данными при вводе."""
    pass

class InputFormatError(DataValidationError):
    """Введено не число там, где ожидается число."""
    pass

class RangeError(DataValidationError):
    """Значение (ID, балл, количество) вне допустимого диапазона."""
    pass

class DuplicateStudentIdError(DataValidationError):
    """Исключение при попытке добавить студента с уже существующим ID."""
    pass

class EmptyNameError(DataValidationError):
    pass

class NameTooLongError(DataValidationError):
    pass

class NameCharsetError(DataValidationError):
    """Имя содержит недопустимые символы, двойные пробелы или начинается не с буквы."""
    pass

class NoDataError(StudentAppError):
    """Операция запрошена до ввода данных студентов."""
    pass

class StudentNotFoundError(StudentAppError):
    """Исключение, когда студент с заданным ID или именем не найден."""
    pass
