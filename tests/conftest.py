# -*- coding: utf-8 -*-
"""
Fixtures compartilhadas pelos testes
"""

from datetime import datetime

import pytest
import pytz

from countdown.application.services.duration_calculator import DurationCalculator
from countdown.infra.settings import CountdownSettings

FIXED_NOW_UTC = datetime(2025, 6, 1, 12, 0, 0)


def fixed_clock(zone):
    return pytz.utc.localize(FIXED_NOW_UTC).astimezone(zone)


@pytest.fixture
def calculator():
    return DurationCalculator(clock=fixed_clock)


@pytest.fixture
def settings(tmp_path):
    return CountdownSettings(output_dir=str(tmp_path / "tmp"), sink_queue_size=4)
