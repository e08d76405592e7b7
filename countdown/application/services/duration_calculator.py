# -*- coding: utf-8 -*-
"""
Cálculo do tempo restante até a data alvo num fuso nomeado
"""

from datetime import datetime, timedelta, tzinfo
from typing import Callable

import pytz

from ...domain.errors import ParseError
from ...domain.models.duration import Duration
from ...domain.models.frame import Passed, Remaining, TimeResult
from ...domain.models.target import TargetSpec
from ...infra.logging import get_logger

Clock = Callable[[tzinfo], datetime]

DISPLAY_FORMAT = "%Y-%m-%d %H:%M"


def system_clock(zone: tzinfo) -> datetime:
    return datetime.now(zone)


class DurationCalculator:
    """Resolve alvo e instante atual no mesmo fuso e calcula a diferença"""

    def __init__(self, clock: Clock = system_clock):
        self.logger = get_logger("DurationCalculator")
        self.clock = clock

    def parse_target(self, target: TargetSpec) -> datetime:
        """Interpreta a data alvo; valores sem offset são localizados no fuso"""
        zone = pytz.timezone(target.timezone.zone_name)
        try:
            parsed = datetime.fromisoformat(target.target_time.strip())
        except (ValueError, AttributeError) as e:
            raise ParseError(target.target_time, target.timezone.value) from e

        if parsed.tzinfo is None:
            return zone.localize(parsed)
        return parsed.astimezone(zone)

    def compute(self, target: TargetSpec) -> TimeResult:
        zone = pytz.timezone(target.timezone.zone_name)
        target_at = self.parse_target(target)
        current = self.clock(zone).astimezone(zone)

        difference = (target_at - current) // timedelta(milliseconds=1)
        label = target.timezone.value.upper()

        self.logger.info("Target: %s Zone: %s", target_at.strftime(DISPLAY_FORMAT), label)
        self.logger.info("Current: %s Zone: %s", current.strftime(DISPLAY_FORMAT), label)
        self.logger.info("Difference: %s", Duration(difference).humanize())

        if difference <= 0:
            return Passed(target.passed_message)
        return Remaining(Duration(difference))
