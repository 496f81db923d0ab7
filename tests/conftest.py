from __future__ import annotations

import logging

import pytest

from records import sample_records


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo configure_logging() so caplog sees package records."""
    yield
    logger = logging.getLogger("cnabparse")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True

@pytest.fixture
def cnab_file(tmp_path):
    path = tmp_path / "remessa.rem"
    path.write_bytes(b"\r\n".join(sample_records()) + b"\r\n")
    return path
