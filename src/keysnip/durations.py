"""Convert timedeltas to and from strings, using a string format based on Go's Duration format.

Used by the settings file, so delays can be written as ``"10ms"`` or ``"1.5s"``.
"""
import datetime
import decimal

DISPLAY_UNITS = {
    "hours": "h",
    "minutes": "m",
    "seconds": "s",
    "milliseconds": "ms",
    "microseconds": "us",
}

# "ms" must be tried before "m"
PARSE_UNITS = {
    "h": datetime.timedelta(hours=1),
    "ms": datetime.timedelta(milliseconds=1),
    "us": datetime.timedelta(microseconds=1),
    "m": datetime.timedelta(minutes=1),
    "s": datetime.timedelta(seconds=1),
}


def _number(val: float):
    return int(val) if val.is_integer() else val


def format_duration(val: datetime.timedelta) -> str:
    if val == datetime.timedelta():
        return "0"

    parts = []
    if val < datetime.timedelta():
        parts.append("-")
        val = -val

    # under a second, use a single (possibly fractional) unit
    if val < PARSE_UNITS["ms"]:
        parts.append(f"{val.microseconds}{DISPLAY_UNITS['microseconds']}")
    elif val < PARSE_UNITS["s"]:
        parts.append(f"{_number(val / PARSE_UNITS['ms'])}{DISPLAY_UNITS['milliseconds']}")
    else:
        hours, val = divmod(val, PARSE_UNITS["h"])
        if hours:
            parts.append(f"{hours}{DISPLAY_UNITS['hours']}")
        minutes, val = divmod(val, PARSE_UNITS["m"])
        if minutes:
            parts.append(f"{minutes}{DISPLAY_UNITS['minutes']}")
        if val:
            parts.append(f"{_number(val.total_seconds())}{DISPLAY_UNITS['seconds']}")

    return "".join(parts)


def parse_duration(val: str) -> datetime.timedelta:
    sign = 1
    if val.startswith("-"):
        sign = -1
        val = val[1:]
    elif val.startswith("+"):
        val = val[1:]
    if not val:
        raise ValueError("Empty duration string")
    if val == "0":
        return datetime.timedelta()

    accum = datetime.timedelta()
    while val:
        numberpart = ""
        while val and (val[0].isdigit() or val[0] == "."):
            numberpart += val[0]
            val = val[1:]
        if not numberpart:
            raise ValueError("Invalid duration string; expected number")
        if not numberpart[0].isdigit():
            raise ValueError("Invalid duration string; expected leading digit")
        try:
            number = decimal.Decimal(numberpart)
        except decimal.InvalidOperation as e:
            raise ValueError(f"Invalid duration string; bad number {numberpart!r}") from e

        for unitstr, unit in PARSE_UNITS.items():
            if val.startswith(unitstr):
                val = val[len(unitstr) :]
                break
        else:
            raise ValueError("Invalid duration string; expected unit")

        intpart = number // 1
        fracpart = number % 1
        if intpart:
            accum += sign * int(intpart) * unit
        if fracpart:
            num, denom = fracpart.as_integer_ratio()
            accum += sign * num * unit / denom

    return accum
