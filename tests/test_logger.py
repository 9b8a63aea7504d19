from common import Logger, logger
from common.singleton import Singleton


def test_logger_is_shared():
    assert Logger() is logger
    assert Logger() is Logger()
    assert len(logger.logger.handlers) == 1


def test_singleton_instances_are_per_class():
    class First(metaclass=Singleton):
        pass

    class Second(metaclass=Singleton):
        pass

    assert First() is First()
    assert First() is not Second()
    assert isinstance(Second(), Second)
