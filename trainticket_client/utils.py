"""Random test-data generators and small string formatting helpers."""

from __future__ import annotations

import logging
import random
import string
from datetime import datetime, timedelta
from enum import Enum
from typing import Iterable, Sequence, TypeVar

logger = logging.getLogger(__name__)

_T = TypeVar("_T")

_VERIFY_CODE_CHARSET = string.ascii_letters + string.digits
_VERIFY_CODE_LENGTH = 6
_NUMBER_STRING_LENGTH = 10
_TRIP_ID_LETTERS = "ZTKGD"
_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class TrainTypeName(str, Enum):
    """Train type names known to the ticketing system."""

    GAO_TIE_ONE = "GaoTieOne"
    GAO_TIE_TWO = "GaoTieTwo"
    DONG_CHE_ONE = "DongCheOne"
    ZHI_DA = "ZhiDa"
    TE_KUAI = "TeKuai"
    KUAI_SU = "KuaiSu"
    UNKNOWN = "Unknown"


_TRAIN_TYPES_BY_LETTER = {
    "Z": TrainTypeName.ZHI_DA,
    "T": TrainTypeName.TE_KUAI,
    "K": TrainTypeName.KUAI_SU,
    "D": TrainTypeName.DONG_CHE_ONE,
}

_REAL_TRAIN_TYPES = (
    TrainTypeName.GAO_TIE_ONE,
    TrainTypeName.GAO_TIE_TWO,
    TrainTypeName.DONG_CHE_ONE,
    TrainTypeName.ZHI_DA,
    TrainTypeName.TE_KUAI,
    TrainTypeName.KUAI_SU,
)


def generate_verify_code() -> str:
    """Return a six character code made of ASCII letters and digits."""
    return "".join(random.choices(_VERIFY_CODE_CHARSET, k=_VERIFY_CODE_LENGTH))


def train_type_for_trip(trip_id: str) -> str:
    """Pick the train type name matching the first letter of a trip id."""
    if not trip_id:
        raise ValueError("trip id must not be empty")
    letter = trip_id[0].upper()
    if letter == "G":
        return random.choice((TrainTypeName.GAO_TIE_ONE, TrainTypeName.GAO_TIE_TWO)).value
    return _TRAIN_TYPES_BY_LETTER.get(letter, TrainTypeName.UNKNOWN).value


def generate_document_number() -> str:
    """Return one of the two document numbers with equal probability."""
    return random.choice(("DocumentNumber_One", "DocumentNumber_Two"))


def generate_trip_id() -> str:
    """Return a trip id: a train letter followed by a zero padded number."""
    letter = random.choice(_TRIP_ID_LETTERS)
    return f"{letter}{random.randrange(10000):03d}"


def to_lower_and_remove_spaces(text: str) -> str:
    """Lower-case the text and drop every space character."""
    return text.lower().replace(" ", "")


def random_train_type_name() -> str:
    """Return a random train type name, never the unknown one."""
    return random.choice(_REAL_TRAIN_TYPES).value


def middle_elements(text: str) -> str:
    """Drop the first and last comma separated element.

    Fewer than three elements give an empty string.
    """
    elements = text.split(",")
    if len(elements) < 3:
        return ""
    return ",".join(elements[1:-1])


def generate_description() -> str:
    """Return a text such as ``Max in 3.4 hour`` ("Min" with probability 0.3)."""
    number = random.random() * 9.9 + 0.1
    word = "Min" if random.random() < 0.3 else "Max"
    return f"{word} in {number:.1f} hour"


def random_number_string() -> str:
    """Return a string of ten random decimal digits."""
    return "".join(random.choices(string.digits, k=_NUMBER_STRING_LENGTH))


def list_to_string(stations: Iterable[str]) -> str:
    """Render stations as ``Stations[0] a, Stations[1] b``."""
    return ", ".join(f"Stations[{i}] {station}" for i, station in enumerate(stations))


def int_list_to_string(numbers: Iterable[int]) -> str:
    """Render numbers as ``Numbers[0] 1, Numbers[1] 2``."""
    return ", ".join(f"Numbers[{i}] {number}" for i, number in enumerate(numbers))


def string_to_list(text: str) -> list[str]:
    """Split on commas and strip whitespace around each element."""
    return [part.strip() for part in text.split(",")]


def random_clock_time() -> str:
    """Return a random time of day as ``HH:MM:SS``."""
    return f"{random.randrange(24):02d}:{random.randrange(60):02d}:{random.randrange(60):02d}"


def random_datetime(start_time: str | None = None) -> str:
    """Return a random ``YYYY-MM-DD HH:MM:SS`` timestamp.

    With a valid ``start_time`` the result lies 1 to 24 whole hours after it;
    otherwise it lies 1 to 30 whole days after the current time.
    """
    if start_time:
        try:
            start = datetime.strptime(start_time, _DATETIME_FORMAT)
        except ValueError:
            logger.warning("Invalid start time format, using current time instead.")
        else:
            hours = random.randint(1, 24)
            return (start + timedelta(hours=hours)).strftime(_DATETIME_FORMAT)
    days = random.randint(1, 30)
    return (datetime.now() + timedelta(days=days)).strftime(_DATETIME_FORMAT)


def comma_separated_to_bracketed(text: str) -> str:
    """Turn ``a, b,c`` into ``[a b c]``."""
    return string_slice_to_string(string_to_list(text.strip()))


def int_slice_to_string(numbers: Iterable[int]) -> str:
    """Render integers as ``[1 2 3]``."""
    return "[" + " ".join(str(number) for number in numbers) + "]"


def string_slice_to_string(strings: Iterable[str]) -> str:
    """Render strings as ``[a b c]``."""
    return "[" + " ".join(strings) + "]"


def random_select(options: Sequence[_T]) -> _T:
    """Return a random element of a non-empty sequence."""
    if not options:
        raise ValueError("cannot select from an empty sequence")
    return random.choice(options)