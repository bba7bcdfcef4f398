"""Валидатор идентификационных кодов UTCS."""

__version__ = "0.4.0"
