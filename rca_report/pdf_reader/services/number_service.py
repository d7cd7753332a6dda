"""Modul zum Normalisieren von Zahlen aus dem 315-Report (brasilianisches Format)."""
import math
import re
from dataclasses import dataclass
from typing import Optional, Union

_WHITESPACE_RE = re.compile(r"\s+")
_COMMA_DECIMAL_RE = re.compile(r",[0-9]{1,2}$")
_DOT_DECIMAL_RE = re.compile(r"\.[0-9]{1,2}$")
_NUMBER_RE = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")
_INT_PREFIX_RE = re.compile(r"^\s*([+-]?[0-9]+)")

CURRENCY_MARKER = "R$"

Number = Union[int, float]


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a lenient parse: either a value or a failure."""
    ok: bool
    value: Optional[Number] = None

    def or_default(self, default: Number) -> Number:
        return self.value if self.ok else default


FAILED = ParseResult(ok=False)


def parse_int(raw: Optional[str]) -> ParseResult:
    """Base-10 integer from the leading digits of `raw` (e.g. "12abc" -> 12)."""
    if raw is None:
        return FAILED
    match = _INT_PREFIX_RE.match(str(raw))
    if not match:
        return FAILED
    try:
        value = int(match.group(1), 10)
    except ValueError:
        # more digits than sys.get_int_max_str_digits() allows
        return FAILED
    return ParseResult(ok=True, value=value)


def parse_number(raw: Optional[str]) -> ParseResult:
    """Plain decimal literal to float; non-finite values count as failures."""
    if raw is None:
        return FAILED
    s = str(raw).strip()
    if s == "":
        return ParseResult(ok=True, value=0.0)
    if not _NUMBER_RE.match(s):
        return FAILED
    value = float(s)
    if not math.isfinite(value):
        return FAILED
    return ParseResult(ok=True, value=value)


def normalize(raw: Optional[str]) -> float:
    """
    Wandelt einen Betrag im lokalen Format in eine Zahl um.

    Ob Punkt oder Komma das Dezimaltrennzeichen ist, wird an der Anzahl der
    Ziffern dahinter erkannt (1-2 Ziffern am Ende = Dezimalstellen).

    Args:
        raw: Betrag als String (z.B. "R$ 1.234,56", "1,234", "12.345")

    Returns:
        float: Normalisierter Wert, 0 wenn nicht lesbar
    """
    if raw is None:
        return 0.0

    s = str(raw).strip().replace(CURRENCY_MARKER, "", 1)
    s = _WHITESPACE_RE.sub("", s)

    if "," in s:
        if _COMMA_DECIMAL_RE.search(s):
            # 1.234,56 -> Punkte sind Tausendertrenner
            s = s.replace(".", "").replace(",", ".", 1)
        else:
            # 1,234 -> Komma ist Tausendertrenner
            s = s.replace(",", "")
    elif "." in s:
        if not _DOT_DECIMAL_RE.search(s):
            # 12.345 -> Ganzzahl mit Gruppierung
            s = s.replace(".", "")

    return parse_number(s).or_default(0.0)
