# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

import logging

import pytest

from cmdline_tokenizer.logging import get_logger
from cmdline_tokenizer.reporting import base as reporting_base


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Undo reporter/verbosity/handler changes made by CLI runs."""
    yield
    logger = get_logger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    reporting_base._ACTIVE_REPORTER = None
    reporting_base.set_verbosity(0)
