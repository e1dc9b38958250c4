"""Sensor line parser for serial communication."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional

from ..core import PartialReading, SensorLimits
from ..core.errors import (
    FieldError,
    FieldParseFailure,
    LineError,
    MalformedLine,
    UnknownFieldPrefix,
    WrongFieldCount,
)
from ..core.reading import HUMIDITY_LIMIT
from .config import SerialConfig

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Outcome of parsing one line.

    ``reading`` holds only the fields that parsed. ``error`` is set when the
    whole line was rejected, ``skipped`` lists fields that were ignored.
    """
    line: str
    reading: PartialReading = field(default_factory=PartialReading)
    error: Optional[LineError] = None
    skipped: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None


class SensorLineParser:
    """Parser for 'H:<humidity>,T:<temperature>,G:<gas>' lines.

    Strict on the number of fields, permissive on their content: a field
    that fails to parse is skipped and the other fields still apply.
    """

    def __init__(self, limits: Optional[SensorLimits] = None,
                 min_line_length: int = SerialConfig.MIN_LINE_LENGTH):
        self.limits = limits or SensorLimits()
        self.min_line_length = min_line_length

    @staticmethod
    def parse_number(text: str) -> Optional[float]:
        """Parse a decimal number with '.' as separator, whatever the locale.

        Returns None for anything that is not a finite number.
        """
        if '_' in text or not text.isascii():
            return None
        try:
            value = float(text.strip())
        except ValueError:
            return None
        if not math.isfinite(value):
            return None
        return value

    @staticmethod
    def clamp(value: float, limit: float) -> float:
        return max(0.0, min(value, limit))

    def split_fields(self, line: str) -> List[str]:
        """Validate the overall shape of a line and return its fields.

        Raises:
            MalformedLine: Line is empty, or has three fields but is too short.
            WrongFieldCount: Line does not have exactly three fields.
        """
        if not line:
            raise MalformedLine(line, self.min_line_length)

        parts = line.split(SerialConfig.FIELD_SEPARATOR)
        if len(parts) != SerialConfig.FIELD_COUNT:
            raise WrongFieldCount(line, len(parts), SerialConfig.FIELD_COUNT)

        if len(line) < self.min_line_length:
            raise MalformedLine(line, self.min_line_length)

        return [p.strip() for p in parts]

    def parse_field(self, part: str, reading: PartialReading) -> None:
        """Store one 'X:value' field into ``reading``.

        Raises:
            UnknownFieldPrefix: Prefix is not H:, T: or G:.
            FieldParseFailure: Value is not a number.
        """
        if part.startswith(SerialConfig.PREFIX_HUMIDITY):
            attr, limit = 'humidity', HUMIDITY_LIMIT
        elif part.startswith(SerialConfig.PREFIX_TEMPERATURE):
            attr, limit = 'temperature', self.limits.max_temperature
        elif part.startswith(SerialConfig.PREFIX_GAS):
            attr, limit = 'gas', self.limits.max_gas
        else:
            raise UnknownFieldPrefix(part)

        raw_value = part[2:]
        value = self.parse_number(raw_value)
        if value is None:
            raise FieldParseFailure(part, raw_value)

        setattr(reading, attr, self.clamp(value, limit))

    def parse(self, line: str) -> ParseResult:
        """Parse a raw line. Never raises."""
        line = (line or '').strip()
        result = ParseResult(line=line)

        try:
            parts = self.split_fields(line)
        except LineError as e:
            logger.warning(str(e))
            result.error = e
            return result

        logger.debug(f"Received: {line}")

        for part in parts:
            try:
                self.parse_field(part, result.reading)
            except UnknownFieldPrefix as e:
                logger.warning(str(e))
                result.skipped.append(e)
            except FieldParseFailure as e:
                logger.debug(str(e))
                result.skipped.append(e)

        return result
