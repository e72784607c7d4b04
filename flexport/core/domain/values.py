# flexport/core/domain/values.py

"""Single export values and their typed variants"""

# Standard library imports
from datetime import date
from datetime import datetime
from decimal import Decimal
from decimal import InvalidOperation
from typing import ClassVar

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import ValidationError
from pydantic import field_validator

# Local imports
from flexport.core.domain.enums import ImageType
from flexport.core.errors import InvalidValueError

type RawValue = str | int | float | Decimal | date

# Values are immutable once built and never carry unknown fields
VALUE_MODEL_CONFIG = ConfigDict(frozen=True, extra="forbid", validate_default=True)


def _canonical_decimal(raw: object) -> str:
    """Convert a numeric input to its canonical decimal string"""
    if isinstance(raw, bool):
        raise ValueError("Value must be numeric")
    try:
        number = Decimal(repr(raw)) if isinstance(raw, float) else Decimal(str(raw).strip())
    except InvalidOperation:
        raise ValueError(f"Value '{raw}' is not numeric") from None
    if not number.is_finite():
        raise ValueError(f"Value '{raw}' is not a finite number")
    return format(number, "f")


def _canonical_integer(raw: object) -> str:
    """Convert an integral input to its canonical string"""
    if isinstance(raw, bool) or isinstance(raw, float):
        raise ValueError("Value must be an integer")
    return str(int(str(raw).strip()))


class Value(BaseModel):
    """A single scalar export value, optionally scoped to a usergroup

    An empty usergroup means the value applies to every customer that has no
    usergroup-specific value of its own.
    """

    model_config = VALUE_MODEL_CONFIG

    XML_TAG: ClassVar[str] = "value"

    value: str
    usergroup: str = ""

    def __init__(self, value: RawValue, usergroup: str | None = "", **data: object) -> None:
        try:
            super().__init__(value=value, usergroup=usergroup or "", **data)
        except ValidationError as e:
            reason = e.errors()[0]["msg"]
            raise InvalidValueError(f"Invalid {type(self).__name__} {value!r}: {reason}") from e

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, v: object) -> object:
        """Accept plain numbers for string values"""
        if isinstance(v, (int, float, Decimal)) and not isinstance(v, bool):
            return str(v)
        return v

    def get_csv_fragment(self) -> str:
        """Raw value as it appears in a CSV cell; escaping is the exporter's job"""
        return self.value

    def xml_attributes(self) -> dict[str, str]:
        """Extra attributes for this value's XML element"""
        return {}


class Ordernumber(Value):
    """Identifier such as an SKU, EAN or manufacturer number"""

    XML_TAG: ClassVar[str] = "ordernumber"


class Keyword(Value):
    XML_TAG: ClassVar[str] = "keyword"


class Name(Value):
    XML_TAG: ClassVar[str] = "name"


class Summary(Value):
    XML_TAG: ClassVar[str] = "summary"


class Description(Value):
    XML_TAG: ClassVar[str] = "description"


class Usergroup(Value):
    """Name of a usergroup the item is visible to"""

    XML_TAG: ClassVar[str] = "usergroup"


class Url(Value):
    XML_TAG: ClassVar[str] = "url"

    @field_validator("value")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """URLs must not be blank"""
        if not v.strip():
            raise ValueError("URL must not be empty")
        return v


class Price(Value):
    XML_TAG: ClassVar[str] = "price"

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, v: object) -> str:
        """Prices must be numeric"""
        return _canonical_decimal(v)


class Bonus(Value):
    """Ranking boost applied by the search service"""

    XML_TAG: ClassVar[str] = "bonus"

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, v: object) -> str:
        """Bonuses must be numeric"""
        return _canonical_decimal(v)


class SalesFrequency(Value):
    XML_TAG: ClassVar[str] = "salesFrequency"

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, v: object) -> str:
        """Sales frequencies are non-negative integers"""
        canonical = _canonical_integer(v)
        if int(canonical) < 0:
            raise ValueError("Sales frequency must not be negative")
        return canonical


class Sort(Value):
    XML_TAG: ClassVar[str] = "sort"

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, v: object) -> str:
        """Sort positions are integers"""
        return _canonical_integer(v)


class DateAdded(Value):
    XML_TAG: ClassVar[str] = "dateAdded"

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, v: object) -> str:
        """Store dates as ISO 8601 timestamps"""
        if isinstance(v, datetime):
            return v.isoformat(timespec="seconds")
        if isinstance(v, date):
            return datetime(v.year, v.month, v.day).isoformat(timespec="seconds")
        if isinstance(v, str):
            return datetime.fromisoformat(v.strip()).isoformat(timespec="seconds")
        raise ValueError("Date must be a date, datetime or ISO 8601 string")


class Image(Value):
    """Image URL with its role (default picture or thumbnail)"""

    XML_TAG: ClassVar[str] = "image"

    type: ImageType = ImageType.DEFAULT

    def __init__(
        self,
        value: RawValue,
        image_type: ImageType | str = ImageType.DEFAULT,
        usergroup: str | None = "",
    ) -> None:
        super().__init__(value, usergroup, type=image_type)

    @field_validator("value")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """Image URLs must not be blank"""
        if not v.strip():
            raise ValueError("Image URL must not be empty")
        return v

    def xml_attributes(self) -> dict[str, str]:
        return {"type": self.type.value}
