"""Metaclass that keeps one instance per class."""


class Singleton(type):
    """Each class built with this metaclass hands out a single shared instance."""

    def __init__(cls, name, bases, namespace):
        super().__init__(name, bases, namespace)
        cls._instance = None

    def __call__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__call__(*args, **kwargs)
        return cls._instance
