"""日志配置测试"""
import logging
import sys
import os

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from reactive_controller.core.logging_config import ThrottledLogger, get_logger


class FakeClock:
    """可手动推进的时钟"""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, dt: float) -> None:
        self.now += dt


@pytest.fixture
def throttled(caplog):
    caplog.set_level(logging.DEBUG, logger='test.throttled')
    clock = FakeClock()
    return ThrottledLogger(logging.getLogger('test.throttled'), min_interval=5.0,
                           time_func=clock), clock


def test_first_message_always_logged(throttled, caplog):
    logger, _ = throttled
    logger.warning("empty scan", key='empty')
    assert caplog.text.count('empty scan') == 1


def test_messages_throttled_within_interval(throttled, caplog):
    logger, clock = throttled
    for _ in range(5):
        logger.warning("empty scan", key='empty')
        clock.advance(1.0)

    assert caplog.text.count('empty scan') == 1

    clock.advance(1.0)
    logger.warning("empty scan", key='empty')
    assert caplog.text.count('empty scan') == 2


def test_keys_throttled_independently(throttled, caplog):
    logger, _ = throttled
    logger.warning("a", key='a')
    logger.error("b", key='b')
    logger.warning("a", key='a')

    levels = [r.levelno for r in caplog.records]
    assert levels == [logging.WARNING, logging.ERROR]


def test_no_key_never_throttled(throttled, caplog):
    logger, _ = throttled
    for _ in range(3):
        logger.info("tick")
    assert caplog.text.count('tick') == 3


def test_reset_clears_history(throttled, caplog):
    logger, _ = throttled
    logger.debug("msg", key='k')
    logger.reset()
    logger.debug("msg", key='k')
    assert caplog.text.count('msg') == 2


def test_get_logger_level():
    logger = get_logger('test.get_logger', logging.WARNING)
    assert logger.level == logging.WARNING
    assert logger.name == 'test.get_logger'


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
