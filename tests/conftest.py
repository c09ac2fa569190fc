import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep debug events out of test output; the CLI reconfigures structlog, so restore afterwards."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING))
    yield
    structlog.reset_defaults()
