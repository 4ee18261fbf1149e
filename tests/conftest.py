"""Shared test fixtures and configuration.

Keeps config files and logs written by commands inside ``tmp_path`` instead
of the real platform directories.
"""

from __future__ import annotations

import logging
from datetime import date
from unittest.mock import patch

import pytest

from subosity_rrule.models.billing import BillingItem


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point platformdirs at *tmp_path* and reset the process singletons."""
    import subosity_rrule.utils.logger as logger_mod
    from subosity_rrule.services.config_service import get_config_service

    get_config_service.cache_clear()
    with patch(
        "subosity_rrule.services.config_service.user_config_dir",
        return_value=str(tmp_path / "config"),
    ):
        with patch(
            "subosity_rrule.utils.logger.user_log_dir",
            return_value=str(tmp_path / "logs"),
        ):
            yield tmp_path
    get_config_service.cache_clear()

    app_logger = logging.getLogger("subosity_rrule")
    for handler in list(app_logger.handlers):
        handler.close()
        app_logger.removeHandler(handler)
    app_logger.propagate = True
    logger_mod._logger = None


@pytest.fixture()
def config_service(isolated_dirs):
    """The cached ConfigService the commands will see."""
    from subosity_rrule.services.config_service import get_config_service

    return get_config_service()


@pytest.fixture()
def billing_items() -> list[BillingItem]:
    """A small subscription portfolio with one unusable rule."""
    return [
        BillingItem(
            name="Netflix",
            rule="FREQ=MONTHLY;BYMONTHDAY=15",
            amount="15.49",
            anchor=date(2024, 1, 15),
        ),
        BillingItem(
            name="Gym",
            rule="FREQ=WEEKLY;BYDAY=MO",
            amount="10",
            anchor=date(2025, 1, 6),
        ),
        BillingItem(name="Broken", rule="FREQ=MONTHLY;COUNT=2", amount="5"),
    ]


SUBSCRIPTIONS_YAML = """\
subscriptions:
  - name: Netflix
    rule: FREQ=MONTHLY;BYMONTHDAY=15
    amount: "15.49"
    anchor: 2024-01-15
  - name: Gym
    rule: FREQ=WEEKLY;BYDAY=MO
    amount: "10"
    anchor: 2025-01-06
  - name: Broken
    rule: FREQ=MONTHLY;COUNT=2
    amount: "5"
"""


@pytest.fixture()
def subscriptions_file(tmp_path):
    """The billing_items portfolio written as a YAML file."""
    path = tmp_path / "subscriptions.yaml"
    path.write_text(SUBSCRIPTIONS_YAML, encoding="utf-8")
    return path
