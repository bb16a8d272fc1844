"""
Unit Conversion Engine for the engineering converter site.

Every measurable quantity (mass, length, pressure, flow, ...) is a
QuantityCategory holding an ordered list of UnitDefinitions. Each unit
stores one factor to the category's canonical anchor unit, so any-to-any
conversion is two multiplications through the anchor:

    canonical = value * from.to_canonical + from.offset
    result    = (canonical - to.offset) * to.from_canonical

No database tables required -- pure calculation logic over immutable
reference tables (see unit_tables.py).
"""

import logging
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Tuple

from number_format import display_format

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ConversionError(ValueError):
    """Raised when a unit conversion cannot be performed."""
    code = "conversion_error"


class UnknownCategory(ConversionError):
    """The requested quantity category id is not registered."""
    code = "unknown_category"

    def __init__(self, category_id, known: Iterable[str] = ()):
        self.category_id = category_id
        message = f"Unknown quantity category '{category_id}'."
        known = list(known)
        if known:
            message += f" Supported: {', '.join(known)}"
        super().__init__(message)


class UnknownUnit(ConversionError):
    """The unit symbol is not part of the category's unit list."""
    code = "unknown_unit"

    def __init__(self, symbol, category: "QuantityCategory"):
        self.symbol = symbol
        self.category_id = category.id
        super().__init__(
            f"Unknown {category.id} unit '{symbol}'. "
            f"Supported: {', '.join(category.symbols)}"
        )


class InvalidValue(ConversionError):
    """The input cannot be interpreted as a finite number."""
    code = "invalid_value"

    def __init__(self, raw, reason: str = "must be a finite number"):
        self.raw = raw
        if isinstance(raw, int) and raw.bit_length() > 64:
            # repr() of huge ints is slow and capped at 4300 digits
            shown = f"<{raw.bit_length()}-bit integer>"
        else:
            shown = repr(raw)
        super().__init__(f"value {reason}, got {shown}")


# ---------------------------------------------------------------------------
# Reference types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class UnitDefinition:
    """One unit within one quantity category."""
    symbol: str
    label: str
    to_canonical: float
    offset: float = 0.0
    from_canonical: float = field(init=False, repr=False)

    def __post_init__(self):
        if not math.isfinite(self.to_canonical) or self.to_canonical == 0:
            raise ValueError(
                f"Unit '{self.symbol}' needs a finite non-zero factor,"
                f" got {self.to_canonical}"
            )
        # to_canonical * from_canonical == 1 within rounding
        object.__setattr__(self, "from_canonical", 1.0 / self.to_canonical)

    def to_base(self, value: float) -> float:
        return value * self.to_canonical + self.offset

    def from_base(self, canonical: float) -> float:
        return (canonical - self.offset) * self.from_canonical

    def to_dict(self) -> Dict:
        return {
            "symbol": self.symbol,
            "label": self.label,
            "to_canonical": self.to_canonical,
            "from_canonical": self.from_canonical,
            "offset": self.offset,
        }


@dataclass(frozen=True)
class QuantityCategory:
    """A measurable dimension and its convertible units, in display order."""
    id: str
    name: str
    canonical_label: str
    units: Tuple[UnitDefinition, ...]
    group: str = ""
    about: str = ""
    tags: Tuple[str, ...] = ()
    keywords: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "units", tuple(self.units))
        object.__setattr__(self, "tags", tuple(self.tags))
        object.__setattr__(self, "keywords", tuple(self.keywords))
        if not self.group:
            object.__setattr__(self, "group", self.id)
        if not self.units:
            raise ValueError(f"Category '{self.id}' has no units")
        seen = set()
        for unit in self.units:
            if unit.symbol in seen:
                raise ValueError(
                    f"Duplicate unit symbol '{unit.symbol}' in category '{self.id}'"
                )
            seen.add(unit.symbol)

    @property
    def symbols(self) -> Tuple[str, ...]:
        return tuple(u.symbol for u in self.units)

    def unit(self, symbol: str) -> UnitDefinition:
        """Return the unit with *symbol*, or raise UnknownUnit."""
        for unit in self.units:
            if unit.symbol == symbol:
                return unit
        raise UnknownUnit(symbol, self)

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "name": self.name,
            "group": self.group,
            "canonical_label": self.canonical_label,
            "units": [u.to_dict() for u in self.units],
        }


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------

def parse_value(raw) -> float:
    """
    Interpret *raw* as a finite float.

    Accepts ints, floats and numeric strings (surrounding whitespace is
    ignored). Booleans, empty strings, NaN and infinities are rejected.
    """
    if isinstance(raw, bool):
        raise InvalidValue(raw, "must be a number")
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            raise InvalidValue(raw, "is too large") from None
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            raise InvalidValue(raw, "must not be empty")
        try:
            value = float(text)
        except ValueError:
            raise InvalidValue(raw, "is not a number") from None
    else:
        raise InvalidValue(raw, "must be a number")

    if math.isnan(value) or math.isinf(value):
        raise InvalidValue(raw)
    return value


def convert(value, from_unit: str, to_unit: str, category: QuantityCategory) -> float:
    """
    Convert *value* from *from_unit* to *to_unit* within *category*.

    Raises UnknownUnit if either symbol is missing from the category and
    InvalidValue if *value* is not a finite number or the result
    overflows.
    """
    number = parse_value(value)
    source = category.unit(from_unit)
    target = category.unit(to_unit)
    if source is target:
        return number
    result = target.from_base(source.to_base(number))
    if not math.isfinite(result):
        raise InvalidValue(value, f"overflows when converted to {to_unit}")
    return result


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class UnitRegistry:
    """
    Read-only lookup of quantity categories by id.

    Built once from static tables; there is no way to add or remove a
    category afterwards, so instances can be shared freely between threads.
    """

    def __init__(self, categories: Iterable[QuantityCategory]):
        table = {}
        for category in categories:
            if category.id in table:
                raise ValueError(f"Duplicate category id '{category.id}'")
            table[category.id] = category
        self._categories = MappingProxyType(table)
        logger.debug(f"Unit registry built with {len(table)} categories")

    def __contains__(self, category_id) -> bool:
        return category_id in self._categories

    def __iter__(self) -> Iterator[QuantityCategory]:
        return iter(self._categories.values())

    def __len__(self) -> int:
        return len(self._categories)

    def categories(self) -> Tuple[QuantityCategory, ...]:
        return tuple(self._categories.values())

    def get_category(self, category_id: str) -> QuantityCategory:
        try:
            return self._categories[category_id]
        except (KeyError, TypeError):
            raise UnknownCategory(category_id, self._categories) from None

    def get_units_for_category(self, category_id: str) -> Tuple[UnitDefinition, ...]:
        """Units of *category_id* in display order."""
        return self.get_category(category_id).units

    def get_canonical_label(self, category_id: str) -> str:
        return self.get_category(category_id).canonical_label

    def convert(self, value, from_unit: str, to_unit: str, category_id: str) -> float:
        return convert(value, from_unit, to_unit, self.get_category(category_id))

    def describe_conversion(
        self, value, from_unit: str, to_unit: str, category_id: str, decimals: int = 4
    ) -> Dict:
        """
        Convert and explain.

        Returns dict with 'value', 'unit', 'unit_label', 'formula' and
        'display' (the result formatted for presentation).
        """
        category = self.get_category(category_id)
        number = parse_value(value)
        source = category.unit(from_unit)
        target = category.unit(to_unit)
        result = convert(number, from_unit, to_unit, category)
        canonical = source.to_base(number)
        anchor = category.canonical_label

        if source.offset or target.offset:
            formula = (
                f"{number} {from_unit} * {source.to_canonical:g} + {source.offset:g}"
                f" = {canonical:g} {anchor};"
                f" ({canonical:g} - {target.offset:g}) * {target.from_canonical:g}"
                f" = {result:g} {to_unit}"
            )
        else:
            formula = (
                f"{number} {from_unit} * {source.to_canonical:g} = {canonical:g} {anchor};"
                f" {canonical:g} {anchor} * {target.from_canonical:g}"
                f" = {result:g} {to_unit}"
            )

        return {
            "value": result,
            "unit": to_unit,
            "unit_label": target.label,
            "formula": formula,
            "display": display_format(result, decimals),
        }
