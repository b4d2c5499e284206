"""Locale symbol tables for the calendar widget.

SYMBOL_TABLES is the process-wide catalog of tables, keyed
``DateTimeSymbols_<code>``. One of them is the *active* table, which every
calendar widget reads when it is created. ``resolve`` switches the active
table to one matching an installed message-catalog language. Nothing ever
switches it back, so the choice outlives the field that triggered it.

When several tables match an installed language, the last one in catalog
iteration order wins. The catalog is a plain dict, so that order is whatever
order the tables were registered in; callers should not rely on it.
"""

import dataclasses
import datetime
import re
from typing import Any, Optional

from textual import log

from blockdate.model import messages


TABLE_NAME_PATTERN = re.compile(r"^DateTimeSymbols_(.+)$")


@dataclasses.dataclass(frozen=True)
class SymbolTable:
    """Month and day names and layout rules for one locale."""

    code: str
    months: tuple[str, ...]
    short_months: tuple[str, ...]
    weekdays: tuple[str, ...]
    """Day names starting with Sunday."""
    short_weekdays: tuple[str, ...]
    first_day_of_week: int = 0
    """0 is Monday, 6 is Sunday."""
    rtl: bool = False

    def month_name(self, date: datetime.date) -> str:
        return self.months[date.month - 1]

    def weekday_name(self, date: datetime.date) -> str:
        # date.weekday() has Monday = 0, weekdays starts on Sunday.
        return self.weekdays[(date.weekday() + 1) % 7]

    def format_long(self, date: datetime.date) -> str:
        """Date spelled out, e.g. 'Sunday, 19 October 2026'."""
        return f"{self.weekday_name(date)}, {date.day} {self.month_name(date)} {date.year}"

    def ordered_short_weekdays(self) -> tuple[str, ...]:
        """Short day names starting with the locale's first day of week."""
        start = (self.first_day_of_week + 1) % 7
        return self.short_weekdays[start:] + self.short_weekdays[:start]


DateTimeSymbols_en = SymbolTable(
    code="en",
    months=(
        "January", "February", "March", "April", "May", "June", "July",
        "August", "September", "October", "November", "December",
    ),
    short_months=(
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ),
    weekdays=(
        "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday",
        "Saturday",
    ),
    short_weekdays=("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
    first_day_of_week=6,
)

DateTimeSymbols_de = SymbolTable(
    code="de",
    months=(
        "Januar", "Februar", "März", "April", "Mai", "Juni", "Juli",
        "August", "September", "Oktober", "November", "Dezember",
    ),
    short_months=(
        "Jan.", "Feb.", "März", "Apr.", "Mai", "Juni",
        "Juli", "Aug.", "Sept.", "Okt.", "Nov.", "Dez.",
    ),
    weekdays=(
        "Sonntag", "Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag",
        "Samstag",
    ),
    short_weekdays=("So.", "Mo.", "Di.", "Mi.", "Do.", "Fr.", "Sa."),
)

DateTimeSymbols_es = SymbolTable(
    code="es",
    months=(
        "enero", "febrero", "marzo", "abril", "mayo", "junio", "julio",
        "agosto", "septiembre", "octubre", "noviembre", "diciembre",
    ),
    short_months=(
        "ene.", "feb.", "mar.", "abr.", "may.", "jun.",
        "jul.", "ago.", "sept.", "oct.", "nov.", "dic.",
    ),
    weekdays=(
        "domingo", "lunes", "martes", "miércoles", "jueves", "viernes",
        "sábado",
    ),
    short_weekdays=("dom.", "lun.", "mar.", "mié.", "jue.", "vie.", "sáb."),
)

DateTimeSymbols_fr = SymbolTable(
    code="fr",
    months=(
        "janvier", "février", "mars", "avril", "mai", "juin", "juillet",
        "août", "septembre", "octobre", "novembre", "décembre",
    ),
    short_months=(
        "janv.", "févr.", "mars", "avr.", "mai", "juin",
        "juil.", "août", "sept.", "oct.", "nov.", "déc.",
    ),
    weekdays=(
        "dimanche", "lundi", "mardi", "mercredi", "jeudi", "vendredi",
        "samedi",
    ),
    short_weekdays=("dim.", "lun.", "mar.", "mer.", "jeu.", "ven.", "sam."),
)

DateTimeSymbols_he = SymbolTable(
    code="he",
    months=(
        "ינואר", "פברואר", "מרץ", "אפריל", "מאי", "יוני", "יולי",
        "אוגוסט", "ספטמבר", "אוקטובר", "נובמבר", "דצמבר",
    ),
    short_months=(
        "ינו׳", "פבר׳", "מרץ", "אפר׳", "מאי", "יוני",
        "יולי", "אוג׳", "ספט׳", "אוק׳", "נוב׳", "דצמ׳",
    ),
    weekdays=(
        "יום ראשון", "יום שני", "יום שלישי", "יום רביעי", "יום חמישי",
        "יום שישי", "יום שבת",
    ),
    short_weekdays=("א׳", "ב׳", "ג׳", "ד׳", "ה׳", "ו׳", "ש׳"),
    first_day_of_week=6,
    rtl=True,
)

DateTimeSymbols_pt_BR = SymbolTable(
    code="pt_BR",
    months=(
        "janeiro", "fevereiro", "março", "abril", "maio", "junho", "julho",
        "agosto", "setembro", "outubro", "novembro", "dezembro",
    ),
    short_months=(
        "jan.", "fev.", "mar.", "abr.", "mai.", "jun.",
        "jul.", "ago.", "set.", "out.", "nov.", "dez.",
    ),
    weekdays=(
        "domingo", "segunda-feira", "terça-feira", "quarta-feira",
        "quinta-feira", "sexta-feira", "sábado",
    ),
    short_weekdays=("dom.", "seg.", "ter.", "qua.", "qui.", "sex.", "sáb."),
    first_day_of_week=6,
)


SYMBOL_TABLES: dict[str, SymbolTable] = {
    "DateTimeSymbols_en": DateTimeSymbols_en,
    "DateTimeSymbols_de": DateTimeSymbols_de,
    "DateTimeSymbols_es": DateTimeSymbols_es,
    "DateTimeSymbols_fr": DateTimeSymbols_fr,
    "DateTimeSymbols_he": DateTimeSymbols_he,
    "DateTimeSymbols_pt_BR": DateTimeSymbols_pt_BR,
}

DEFAULT_TABLE = DateTimeSymbols_en

# Process-wide active table, read by every new calendar widget.
active: SymbolTable = DEFAULT_TABLE


def get_active() -> SymbolTable:
    """The symbol table new calendar widgets will use."""
    return active


def message_key(table_name: str) -> Optional[str]:
    """Message-catalog key for a symbol table name, e.g. 'pt.br'.

    Returns None if table_name does not follow the DateTimeSymbols_<code>
    naming convention.
    """
    match = TABLE_NAME_PATTERN.match(table_name)
    if match is None:
        return None
    return match.group(1).lower().replace("_", ".", 1)


def resolve(
    tables: Optional[dict[str, SymbolTable]] = None,
    catalog: Optional[dict[str, Any]] = None,
) -> None:
    """Activate the symbol table matching an installed message language.

    Every table is checked and the last match wins. If nothing matches the
    active table is left alone.
    """
    global active
    tables = SYMBOL_TABLES if tables is None else tables
    for name, table in tables.items():
        key = message_key(name)
        if key is None:
            continue
        if messages.get_object_by_name(key, catalog):
            if table is not active:
                log.info("switching date symbols", table=name)
            active = table


def reset() -> None:
    """Reactivate the default table. Only tests should need this."""
    global active
    active = DEFAULT_TABLE
