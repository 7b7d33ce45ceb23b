import logging

import pytest

from common import logging_utils


@pytest.fixture(autouse=True)
def _reset_cli_logging():
    """Detach handlers installed by moddiff.main so they never outlive capsys streams."""
    yield
    root = logging.getLogger()
    while logging_utils._installed_handlers:  # pylint: disable=protected-access
        handler = logging_utils._installed_handlers.pop()  # pylint: disable=protected-access
        root.removeHandler(handler)
        handler.close()
