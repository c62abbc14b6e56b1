"""flashme - генерация квизов по тексту и адаптивная практика."""

__version__ = "0.1.0"
