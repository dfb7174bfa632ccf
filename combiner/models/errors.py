"""Иерархия ошибок комбинирования изображений.

Каждый вид ошибки — отдельный класс, чтобы вызывающий код мог
различать их через `except`. Исходные исключения библиотек сохраняются
в цепочке (`raise ... from exc`).
"""
from __future__ import annotations


class CombinerError(Exception):
    """Базовая ошибка для всех сбоев комбинирования."""


class IoError(CombinerError):
    """Путь не удаётся открыть на чтение или запись."""


class DecodeError(CombinerError):
    """Данные файла не распознаны как изображение поддерживаемого формата."""


class FormatMismatch(CombinerError):
    """Входные изображения закодированы в разных форматах (например, PNG и JPEG)."""


class BufferLengthMismatch(FormatMismatch):
    """RGBA-буферы имеют разную длину или длину, не кратную размеру пикселя."""


class InvalidDimensions(CombinerError):
    """У изображения нулевая ширина или высота."""


class BufferTooSmall(CombinerError):
    """Объединённые данные больше ёмкости выходного буфера."""


class EncodeError(CombinerError):
    """Не удалось закодировать выходное изображение."""
