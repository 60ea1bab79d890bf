"""
Загрузка конфигурации календаря из plain dict.

Двухступенчатая проверка: сначала JSON Schema контракт (форма данных),
затем Pydantic модель (семантика: существующий часовой пояс, порядок дат).
"""

from typing import Any, Dict

from src.core.contracts.validators import validate_calendar_system
from src.core.domain.calendar_system import CalendarSystem


def load_calendar_system(data: Dict[str, Any]) -> CalendarSystem:
    """
    Создание CalendarSystem из словаря конфигурации хоста.

    Args:
        data: Конфигурация (например, из JSON/YAML файла хоста)

    Returns:
        CalendarSystem

    Raises:
        jsonschema.ValidationError: Нарушение формы контракта
        pydantic.ValidationError: Нарушение семантики модели
    """
    validate_calendar_system(data)
    return CalendarSystem.model_validate(data)
