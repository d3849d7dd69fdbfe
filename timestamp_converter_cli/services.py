"""Conversion logic tying the parser and formatter tables together."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping

from .errors import UnsupportedFormatError
from .formatters import FORMATTERS, FormatFunc
from .models import Instant
from .parsers import PARSERS, ParseFunc

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FormatRegistry:
    parsers: Mapping[str, ParseFunc] = field(default_factory=lambda: PARSERS)
    formatters: Mapping[str, FormatFunc] = field(default_factory=lambda: FORMATTERS)


class ConversionService:
    def __init__(self, registry: FormatRegistry | None = None) -> None:
        self.registry = registry or FormatRegistry()

    def input_formats(self) -> list[str]:
        return list(self.registry.parsers)

    def output_formats(self) -> list[str]:
        return list(self.registry.formatters)

    def parser_for(self, in_format: str) -> ParseFunc:
        try:
            return self.registry.parsers[in_format]
        except KeyError:
            raise UnsupportedFormatError(in_format, "in") from None

    def formatter_for(self, out_format: str) -> FormatFunc:
        try:
            return self.registry.formatters[out_format]
        except KeyError:
            raise UnsupportedFormatError(out_format, "out") from None

    def format(self, instant: Instant, out_format: str) -> str:
        return self.formatter_for(out_format)(instant)

    def convert(self, value: str, in_format: str, out_format: str) -> str:
        """Parse ``value`` as ``in_format`` and render it as ``out_format``.

        Both identifiers are resolved before any parsing, so an unknown
        output format is reported even when the input is malformed.
        """
        parse = self.parser_for(in_format)
        render = self.formatter_for(out_format)
        logger.debug("Converting %r from %s to %s", value, in_format, out_format)
        instant = parse(value)
        logger.debug("Parsed instant %s", instant)
        return render(instant)


def build_service() -> ConversionService:
    return ConversionService(FormatRegistry())


_default_service = build_service()


def convert(value: str, in_format: str, out_format: str) -> str:
    return _default_service.convert(value, in_format, out_format)
