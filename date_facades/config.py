"""Configuration handling for date-facades"""

from dataclasses import dataclass

from date_facades.constants import INVALID_DATE_TEXT


@dataclass
class Config:
    """Configuration shared by the formatter and manipulation façades."""

    # Locale passed to Arrow and Babel
    locale: str = "en_US"

    # ISO weekday a week starts on (1 = Monday ... 7 = Sunday)
    week_start: int = 7

    # Babel relative time: smallest fraction of a unit before it is used
    relative_threshold: float = 1.0

    # Text returned by formatters when the input is not a date
    invalid_date_text: str = INVALID_DATE_TEXT

    # Logging
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_locale()
        self._validate_week_start()
        self._validate_relative_threshold()
        self._validate_invalid_date_text()

    def _validate_locale(self):
        """Validate locale is not empty."""
        if not self.locale or not self.locale.strip():
            raise ValueError("locale cannot be empty")
        self.locale = self.locale.strip()

    def _validate_week_start(self):
        """Validate week_start is an ISO weekday."""
        if isinstance(self.week_start, bool) or self.week_start not in range(1, 8):
            raise ValueError(f"week_start must be between 1 and 7, got {self.week_start}")

    def _validate_relative_threshold(self):
        """Validate relative_threshold is positive."""
        if self.relative_threshold <= 0:
            raise ValueError(
                f"relative_threshold must be positive, got {self.relative_threshold}"
            )

    def _validate_invalid_date_text(self):
        """Validate invalid_date_text is a non-empty string."""
        if not isinstance(self.invalid_date_text, str) or not self.invalid_date_text:
            raise ValueError("invalid_date_text must be a non-empty string")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "locale": self.locale,
            "week_start": self.week_start,
            "relative_threshold": self.relative_threshold,
            "invalid_date_text": self.invalid_date_text,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        # Extract only known fields
        known_fields = {
            "locale",
            "week_start",
            "relative_threshold",
            "invalid_date_text",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
