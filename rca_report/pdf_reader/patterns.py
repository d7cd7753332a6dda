# Line grammar of the Winthor 315 report ("vendas por RCA").
import re
from dataclasses import dataclass, field
from typing import Dict, Pattern, Tuple

# Lines that belong to the page header/footer; skipped, parsing goes on.
SKIP_MARKERS = [
    re.compile(r"^315\b", re.IGNORECASE),
    re.compile(r"^Per[ií]odo\b", re.IGNORECASE),
    re.compile(r"^C[oó]digo\s+Rca\b", re.IGNORECASE),
    re.compile(r"^P[aá]gina\b", re.IGNORECASE),
]

# Lines that close the table; nothing after them is read.
STOP_MARKERS = [
    re.compile(r"^Total do Supervisor\b", re.IGNORECASE),
    re.compile(r"^Estat[ií]stica\b", re.IGNORECASE),
]

# Slot types a layout is built from
CODE = "code"
NAME = "name"
INT = "int"
AMOUNT = "amount"

SLOT_PATTERNS = {
    CODE: r"(\d{1,6})",
    NAME: r"([A-ZÀ-Ü0-9.\-\s]{3,80}?)",
    INT: r"(\d+)",
    AMOUNT: r"([\d.,]+)",
}


@dataclass(frozen=True)
class LineLayout:
    """Ordered slot list of one column layout plus the record field each slot feeds.

    Layouts are matched against the start of a normalized line; text after the
    last slot is ignored.
    """
    name: str
    slots: Tuple[str, ...]
    fields: Tuple[Tuple[str, int], ...]
    require_rca: bool = True
    regex: Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        body = r"\s+".join(SLOT_PATTERNS[slot] for slot in self.slots)
        # ASCII: \d and \s must not match non-latin digits/spaces
        object.__setattr__(self, "regex", re.compile("^" + body, re.ASCII))

    @property
    def field_map(self) -> Dict[str, int]:
        return dict(self.fields)


# Code first: rca, name, three counters, amount, two counters, two amounts
LAYOUT_A = LineLayout(
    name="A",
    slots=(CODE, NAME, INT, INT, INT, AMOUNT, INT, INT, AMOUNT, AMOUNT),
    fields=(("rca", 0), ("name", 1), ("cliPosit", 3), ("mix", 7), ("sales", 9)),
    require_rca=True,
)

# Name first: four counters, then the rca code and the sales amount.
# An rca of zero is still emitted for this layout (see DESIGN.md).
LAYOUT_B = LineLayout(
    name="B",
    slots=(NAME, INT, INT, INT, INT, CODE, AMOUNT),
    fields=(("name", 0), ("cliPosit", 2), ("mix", 3), ("rca", 5), ("sales", 6)),
    require_rca=False,
)

LAYOUTS = (LAYOUT_A, LAYOUT_B)
