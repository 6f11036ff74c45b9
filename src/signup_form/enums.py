import enum


class RuleId(str, enum.Enum):
    has_digit = "has-digit"
    has_upper = "has-upper"
    has_lower = "has-lower"
    has_symbol = "has-symbol"
    has_latin_letter = "has-latin-letter"
    length_range = "length-range"


class NoticeState(str, enum.Enum):
    idle = "idle"
    shown = "shown"
