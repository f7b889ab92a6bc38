import asyncio
import logging
from collections.abc import Callable
from datetime import date, timedelta

from application.services.validation import normalize_code
from domain.exceptions.currency import NoDataError, RequestTimeoutError, ValidationError
from domain.models.currency import InsightSample, RateSample, ValidationIssue
from infrastructure.providers.frankfurter import FrankfurterProvider

logger = logging.getLogger(__name__)


class InsightService:
	def __init__(
		self,
		provider: FrankfurterProvider,
		window_days: int = 7,
		timeout: float = 10.0,
		today: Callable[[], date] = date.today,
	):
		self.provider = provider
		self.window_days = window_days
		self.timeout = timeout
		self._today = today

	def window(self) -> tuple[date, date]:
		end = self._today()
		return end - timedelta(days=self.window_days), end

	async def summarize(self, from_code: str | None, to_code: str | None) -> InsightSample:
		from_code = normalize_code(from_code)
		to_code = normalize_code(to_code)

		if not from_code or not to_code:
			raise ValidationError([ValidationIssue('currencies', 'Please select both currencies to get insights.')])
		if from_code == to_code:
			raise ValidationError([ValidationIssue('currencies', 'Please select different currencies for insights.')])

		start, end = self.window()
		try:
			series = await asyncio.wait_for(
				self.provider.fetch_timeseries(start, end, from_code, to_code),
				timeout=self.timeout,
			)
		except asyncio.TimeoutError as e:
			raise RequestTimeoutError(f'History not received within {self.timeout}s') from e

		samples = tuple(
			RateSample(day=day, rate=rates[to_code])
			for day, rates in sorted(series.items())
			if rates.get(to_code)
		)
		if not samples:
			raise NoDataError(f'No rates for {from_code}/{to_code} between {start} and {end}')

		logger.info(f'Collected {len(samples)} samples for {from_code}/{to_code}')
		return InsightSample(from_code=from_code, to_code=to_code, samples=samples)
