from typing import Final

APP_NAME: Final[str] = "Averse"
VERSION: Final[str] = "0.2.0"

# Stored recipe and plan files share one serialization format
FILE_EXTENSION: Final[str] = "yaml"

UNITS: Final[tuple[str, ...]] = (
    "can", "cup", "gallon", "gram", "item", "kg", "lb", "oz", "tsp", "tbsp",
)

WEEK: Final[tuple[str, ...]] = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)

DATE_PATTERN: Final[str] = r"^\d{4}-\d{2}-\d{2}$"
SUMMARY_SEPARATOR: Final[str] = " -- "
