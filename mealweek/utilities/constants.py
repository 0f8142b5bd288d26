from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"
WEEK_LENGTH_DAYS: Final[int] = 7
# date.weekday() value the calendar week starts on (0 = Monday)
WEEK_STARTS_ON: Final[int] = 0
WEEKDAY_NAMES: Final[tuple] = (
    "Pazartesi", "Salı", "Çarşamba", "Perşembe", "Cuma", "Cumartesi", "Pazar",
)
MAX_EVENTS: Final[int] = 300
# Turkish alphabet order for name sorting; q, w and x follow their Latin neighbors
TURKISH_ALPHABET: Final[str] = "abcçdefgğhıijklmnoöpqrsştuüvwxyz"
