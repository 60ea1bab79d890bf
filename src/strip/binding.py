"""
Reference date: состояние хоста и binding для компонента.

ReferenceDateState владеет значением и уведомляет подписчиков об
изменении. Компонент получает только DateBinding: чтение текущего
значения и явное предложение нового.
"""

from datetime import datetime
from typing import Callable, List

from loguru import logger

Observer = Callable[[datetime, datetime], None]


class DateBinding:
    """Доступ компонента к reference date хоста."""

    def __init__(self, getter: Callable[[], datetime], proposer: Callable[[datetime], None]):
        self._getter = getter
        self._proposer = proposer

    def get(self) -> datetime:
        return self._getter()

    def propose(self, new_date: datetime) -> None:
        """Предложить хосту новое значение (одно присваивание)."""
        self._proposer(new_date)

    @classmethod
    def constant(cls, value: datetime) -> "DateBinding":
        """Binding только для чтения: предложения игнорируются."""
        return cls(lambda: value, lambda _new: None)


class ReferenceDateState:
    """
    Reference date, которой владеет хост.

    Единственный писатель в каждый момент; observers вызываются
    синхронно после присваивания, в порядке подписки.
    """

    def __init__(self, initial: datetime):
        self._value = initial
        self._observers: List[Observer] = []

    @property
    def value(self) -> datetime:
        return self._value

    def set(self, new_value: datetime) -> None:
        """Установка значения; observers уведомляются только при изменении."""
        previous = self._value
        if new_value == previous:
            return
        self._value = new_value
        logger.debug("binding: reference date changed", previous=str(previous), new=str(new_value))
        for observer in list(self._observers):
            observer(previous, new_value)

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Подписка на изменения.

        Returns:
            Функция отписки
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def binding(self) -> DateBinding:
        return DateBinding(getter=lambda: self._value, proposer=self.set)
