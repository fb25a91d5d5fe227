# Purpose: Env-driven settings and stderr-only logging configuration.

import io
import logging

import pytest

from up_functions.cli.logging_setup import setup_cli_logging
from up_functions.config import get_settings
from up_functions.utils.logging import LogCtx, get_logger, with_ctx


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
    root.setLevel(level)


def test_settings_default_off():
    s = get_settings({})
    assert (s.trace, s.quiet) == (False, False)


@pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
def test_settings_truthy_values(raw):
    assert get_settings({"UP_FUNCTIONS_TRACE": raw}).trace is True


def test_settings_falsy_value():
    assert get_settings({"UP_FUNCTIONS_QUIET": "0"}).quiet is False


@pytest.mark.parametrize(
    "trace,quiet,level",
    [
        (False, False, logging.WARNING),
        (True, False, logging.DEBUG),
        (False, True, logging.ERROR),
        (True, True, logging.ERROR),
    ],
)
def test_setup_levels(trace, quiet, level):
    setup_cli_logging(trace=trace, quiet=quiet, stream=io.StringIO())
    assert logging.getLogger().level == level


def test_context_prefix_reaches_stream():
    stream = io.StringIO()
    setup_cli_logging(trace=True, stream=stream)
    log = with_ctx(get_logger("runner"), LogCtx(provider="math", function="add"))
    log.debug("hello")
    line = stream.getvalue()
    assert "[DEBUG] up_functions.runner:" in line
    assert "function=add provider=math | hello" in line


def test_context_prefix_skips_unset_fields():
    stream = io.StringIO()
    setup_cli_logging(trace=True, stream=stream)
    with_ctx(get_logger("dispatch"), LogCtx(provider="env")).debug("x")
    assert "provider=env | x" in stream.getvalue()
    assert "function=" not in stream.getvalue()


def test_get_logger_namespaces_short_names():
    assert get_logger("runner").name == "up_functions.runner"
    assert get_logger("up_functions.providers.env").name == "up_functions.providers.env"
