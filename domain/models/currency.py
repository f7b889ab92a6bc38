from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from types import MappingProxyType


FALLBACK_CURRENCIES: Mapping[str, str] = MappingProxyType({
	'USD': 'US Dollar',
	'EUR': 'Euro',
	'GBP': 'British Pound',
	'JPY': 'Japanese Yen',
	'CAD': 'Canadian Dollar',
	'AUD': 'Australian Dollar',
	'CHF': 'Swiss Franc',
	'CNY': 'Chinese Yuan',
	'INR': 'Indian Rupee',
	'BRL': 'Brazilian Real',
	'MXN': 'Mexican Peso',
	'SGD': 'Singapore Dollar',
	'HKD': 'Hong Kong Dollar',
	'NZD': 'New Zealand Dollar',
	'SEK': 'Swedish Krona',
	'KRW': 'South Korean Won',
	'RUB': 'Russian Ruble',
	'TRY': 'Turkish Lira',
	'ZAR': 'South African Rand',
	'NOK': 'Norwegian Krone',
})


@dataclass(frozen=True)
class CurrencyCatalog:
	"""Supported currency codes mapped to display names.

	Replaced wholesale, never mutated. ``degraded`` is set when the entries
	come from the embedded fallback table instead of the remote API.
	"""

	currencies: Mapping[str, str]
	degraded: bool = False

	def __post_init__(self):
		object.__setattr__(self, 'currencies', MappingProxyType(dict(self.currencies)))

	@classmethod
	def fallback(cls) -> 'CurrencyCatalog':
		return cls(currencies=FALLBACK_CURRENCIES, degraded=True)

	def __contains__(self, code: object) -> bool:
		return code in self.currencies

	def __len__(self) -> int:
		return len(self.currencies)

	def __iter__(self) -> Iterator[str]:
		return iter(self.currencies)

	def name_of(self, code: str) -> str | None:
		return self.currencies.get(code)

	def sorted_items(self) -> list[tuple[str, str]]:
		return sorted(self.currencies.items())


@dataclass(frozen=True)
class ConversionRequest:
	"""Raw form values; ``amount`` may still be the text the user typed."""

	amount: Decimal | float | int | str | None
	from_code: str | None
	to_code: str | None


@dataclass(frozen=True)
class ConversionResult:
	from_code: str
	to_code: str
	original_amount: Decimal
	converted_amount: Decimal
	rate: Decimal  # converted_amount / original_amount, unrounded


@dataclass(frozen=True)
class ValidationIssue:
	field: str
	message: str


class Trend(str, Enum):
	UP = 'up'
	DOWN = 'down'
	STABLE = 'stable'

	@property
	def description(self) -> str:
		return {'up': 'increasing', 'down': 'decreasing', 'stable': 'stable'}[self.value]


@dataclass(frozen=True)
class RateSample:
	day: date
	rate: Decimal


@dataclass(frozen=True)
class InsightSample:
	from_code: str
	to_code: str
	samples: tuple[RateSample, ...] = field(default_factory=tuple)

	@property
	def rates(self) -> list[Decimal]:
		return [s.rate for s in self.samples]

	@property
	def min_rate(self) -> Decimal:
		return min(self.rates)

	@property
	def max_rate(self) -> Decimal:
		return max(self.rates)

	@property
	def average_rate(self) -> Decimal:
		rates = self.rates
		return sum(rates, Decimal('0')) / len(rates)

	@property
	def latest_rate(self) -> Decimal:
		return self.samples[-1].rate

	@property
	def trend(self) -> Trend:
		if len(self.samples) < 2:
			return Trend.STABLE
		first, last = self.samples[0].rate, self.samples[-1].rate
		if last > first:
			return Trend.UP
		if last < first:
			return Trend.DOWN
		return Trend.STABLE
