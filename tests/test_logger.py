import logging

import pytest

from ca_extractor.utils.logger import HANDLER_MARKER, get_logger, set_level


def _own_handlers(logger):
    return [h for h in logger.handlers if getattr(h, HANDLER_MARKER, False)]


@pytest.fixture
def bare_base_logger():
    """Base logger stripped of the package handler, restored afterwards."""
    base = logging.getLogger("ca_extractor")
    saved = list(base.handlers)
    for handler in _own_handlers(base):
        base.removeHandler(handler)
    yield base
    for handler in list(base.handlers):
        base.removeHandler(handler)
    for handler in saved:
        base.addHandler(handler)


def test_logger_names():
    assert get_logger().name == "ca_extractor"
    assert get_logger("fetcher").name == "ca_extractor.fetcher"
    assert get_logger("ca_extractor.extractor").name == "ca_extractor.extractor"


def test_single_handler_on_base_logger():
    get_logger("a")
    get_logger("b")
    base = logging.getLogger("ca_extractor")
    assert len(_own_handlers(base)) == 1
    assert base.propagate is False
    assert not _own_handlers(logging.getLogger("ca_extractor.a"))


def test_foreign_handler_does_not_block_configuration(bare_base_logger, monkeypatch):
    bare_base_logger.addHandler(logging.NullHandler())
    monkeypatch.setenv("CA_EXTRACTOR_LOG", "warning")

    get_logger("fetcher")

    assert len(_own_handlers(bare_base_logger)) == 1
    assert bare_base_logger.level == logging.WARNING


def test_set_level_applies_to_children():
    child = get_logger("writer")
    set_level("DEBUG")
    assert child.isEnabledFor(logging.DEBUG)
    set_level(logging.WARNING)
    assert not child.isEnabledFor(logging.INFO)
