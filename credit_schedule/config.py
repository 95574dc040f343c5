"""Configuration management for credit-schedule."""

from dataclasses import dataclass, field
from pathlib import Path

from credit_schedule.exceptions import ConfigurationError


@dataclass(frozen=True)
class BonusBracket:
    """Property-value bracket for the good payer bonus.

    Both bounds are exclusive: a property valued exactly at ``lower`` or
    ``upper`` does not fall in the bracket.
    """

    lower: float
    upper: float
    reduction: float

    def contains(self, property_value: float) -> bool:
        """Return True when the value lies strictly inside the bracket."""
        return self.lower < property_value < self.upper


DEFAULT_GOOD_PAYER_BRACKETS = (
    BonusBracket(65200, 93100, 25700),
    BonusBracket(93100, 139400, 214000),
    BonusBracket(139400, 232200, 19600),
    BonusBracket(232200, 343900, 10800),
)


@dataclass
class PolicyConfig:
    """Lending policy: loan-to-value band and bonus amounts."""

    min_loan_ratio: float = 0.075
    max_loan_ratio: float = 0.9
    green_bonus_amount: float = 5400.0
    good_payer_brackets: tuple[BonusBracket, ...] = DEFAULT_GOOD_PAYER_BRACKETS


@dataclass
class ScheduleConfig:
    """Schedule computation conventions."""

    day_count_base: int = 360  # Banking year
    days_per_month: int = 30
    physical_shipping_fee: float = 11.0  # Flat monthly commission


@dataclass
class OutputConfig:
    """Output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class CreditScheduleConfig:
    """Main configuration for credit-schedule."""

    policy: PolicyConfig = field(default_factory=PolicyConfig)
    schedule: ScheduleConfig = field(default_factory=ScheduleConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "CreditScheduleConfig":
        """Create config from environment variables."""
        import os

        brackets_str = os.getenv("GOOD_PAYER_BRACKETS")
        brackets = (
            parse_brackets(brackets_str) if brackets_str else DEFAULT_GOOD_PAYER_BRACKETS
        )

        policy = PolicyConfig(
            green_bonus_amount=float(os.getenv("GREEN_BONUS_AMOUNT", "5400")),
            good_payer_brackets=brackets,
        )

        schedule = ScheduleConfig(
            physical_shipping_fee=float(os.getenv("PHYSICAL_SHIPPING_FEE", "11.0")),
        )

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        return cls(
            policy=policy,
            schedule=schedule,
            output=output,
            seed=int(os.getenv("SEED")) if os.getenv("SEED") else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def parse_brackets(raw: str) -> tuple[BonusBracket, ...]:
    """Parse a JSON list of ``[lower, upper, reduction]`` triples.

    Parameters
    ----------
    raw : str
        JSON text, e.g. ``"[[65200, 93100, 25700]]"``.

    Returns
    -------
    tuple[BonusBracket, ...]
        Parsed brackets in declaration order.

    Raises
    ------
    ConfigurationError
        If the text is not valid JSON or a triple is malformed.
    """
    import json

    try:
        items = json.loads(raw)
        brackets = tuple(
            BonusBracket(float(lower), float(upper), float(reduction))
            for lower, upper, reduction in items
        )
    except (ValueError, TypeError) as e:
        raise ConfigurationError(f"Invalid GOOD_PAYER_BRACKETS value: {raw!r}") from e

    for bracket in brackets:
        if bracket.lower >= bracket.upper:
            raise ConfigurationError(
                f"Bracket lower bound {bracket.lower} must be below upper bound {bracket.upper}"
            )
    return brackets
