import logging
import random

import pytest

import ecmauri

# NOTE: Every ASCII character including C0 controls, plus the first and
#   last code points of each UTF-8 sequence length and a few in between.
_UTF8_BOUNDARIES = '\x80\u07ff\u0800\uffff\U00010000\U0010ffff'
_ALPHABET = ''.join(chr(c) for c in range(0x80)) + _UTF8_BOUNDARIES + 'çéü€中\U0001f600'


class _SuiteUtils:
    """Assorted helpers shared by the test modules."""

    ALPHABET = _ALPHABET
    UTF8_BOUNDARIES = _UTF8_BOUNDARIES

    @staticmethod
    def arbitrary_texts(count, length, alphabet=_ALPHABET, seed=None):
        rng = random.Random(seed)
        return [
            ''.join([rng.choice(alphabet) for _ in range(length)])
            for __ in range(count)
        ]


@pytest.fixture(scope='session')
def util():
    return _SuiteUtils()


@pytest.fixture
def debug_logging(caplog):
    root = logging.getLogger()
    root_handlers = list(root.handlers)

    caplog.set_level(logging.DEBUG, logger='ecmauri')
    yield caplog

    # NOTE: The CLI may have called logging.basicConfig()
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler and handler not in root_handlers:
            root.removeHandler(handler)
            handler.close()

    ecmauri._logger.setLevel(logging.NOTSET)


@pytest.fixture
def texts(util):
    return util.arbitrary_texts(count=100, length=32)
