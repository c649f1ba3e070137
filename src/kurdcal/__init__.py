"""kurdcal public API.

Kurdish solar calendar conversions under two models: the simplified calendar
(21 March new year, 33-year leap cycle) and the astronomical calendar (new
year on the local day of the March equinox).
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    add_days,
    add_months,
    add_years,
    astronomical_engine,
    clear_equinox_cache,
    clear_equinox_record,
    day_of_year,
    days_difference,
    days_in_month,
    engine_info,
    equinox_moment,
    equinox_record,
    format_date,
    from_gregorian,
    from_location,
    get_engine,
    get_registry,
    is_leap_year,
    list_locations,
    make_date,
    nowruz,
    parse_date,
    set_registry,
    to_astronomical,
    to_astronomical_recalculated,
    to_gregorian,
    to_simplified,
    to_standard_date_recalculated,
    today,
    weekday,
    year_info,
)
from .core.errors import CrossEngineError, DateParseError, KurdcalError, OutOfRangeError
from .core.types import ASTRONOMICAL, SIMPLIFIED, CalendarDate, EquinoxRecord, ReferenceLocation, Weekday
from .culture import Dialect
from .formatting import format_gregorian
from .parsing import parse_gregorian

__version__ = "0.3.0"

__all__ = [
    "add_days",
    "add_months",
    "add_years",
    "astronomical_engine",
    "clear_equinox_cache",
    "clear_equinox_record",
    "day_of_year",
    "days_difference",
    "days_in_month",
    "engine_info",
    "equinox_moment",
    "equinox_record",
    "format_date",
    "from_gregorian",
    "from_location",
    "get_engine",
    "get_registry",
    "is_leap_year",
    "list_locations",
    "make_date",
    "nowruz",
    "parse_date",
    "set_registry",
    "to_astronomical",
    "to_astronomical_recalculated",
    "to_gregorian",
    "to_simplified",
    "to_standard_date_recalculated",
    "today",
    "weekday",
    "year_info",
    "format_gregorian",
    "parse_gregorian",
    "CalendarDate",
    "EquinoxRecord",
    "ReferenceLocation",
    "Weekday",
    "Dialect",
    "ASTRONOMICAL",
    "SIMPLIFIED",
    "KurdcalError",
    "OutOfRangeError",
    "CrossEngineError",
    "DateParseError",
]
