import asyncio
import logging
from collections.abc import Awaitable, Callable

from tenacity import AsyncRetrying, RetryCallState, retry_if_exception_type, stop_after_attempt, wait_incrementing

from domain.exceptions.currency import ProviderError, RequestTimeoutError, UnknownConversionError
from domain.models.currency import CurrencyCatalog
from infrastructure.providers.frankfurter import FrankfurterProvider

logger = logging.getLogger(__name__)


class CatalogService:
	"""Loads the currency catalog once, retrying with linear backoff.

	Never raises: after ``max_attempts`` failures it hands back the embedded
	fallback table flagged as degraded.
	"""

	def __init__(
		self,
		provider: FrankfurterProvider,
		max_attempts: int = 3,
		backoff_seconds: float = 1.0,
		timeout: float = 10.0,
		sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
	):
		self.provider = provider
		self.max_attempts = max_attempts
		self.backoff_seconds = backoff_seconds
		self.timeout = timeout
		self._sleep = sleep

	async def _fetch_once(self) -> dict[str, str]:
		try:
			currencies = await asyncio.wait_for(self.provider.fetch_currencies(), timeout=self.timeout)
		except asyncio.TimeoutError as e:
			raise RequestTimeoutError(f'Currency list not received within {self.timeout}s') from e

		if not currencies:
			raise UnknownConversionError('Currency list is empty')
		return currencies

	def _log_failed_attempt(self, retry_state: RetryCallState) -> None:
		logger.error(
			f'Attempt {retry_state.attempt_number}/{self.max_attempts} to load currencies failed: '
			f'{retry_state.outcome.exception()}'
		)

	async def load_currencies(self) -> CurrencyCatalog:
		retrying = AsyncRetrying(
			stop=stop_after_attempt(self.max_attempts),
			wait=wait_incrementing(start=self.backoff_seconds, increment=self.backoff_seconds),
			retry=retry_if_exception_type(ProviderError),
			after=self._log_failed_attempt,
			sleep=self._sleep,
			reraise=True,
		)

		try:
			async for attempt in retrying:
				with attempt:
					currencies = await self._fetch_once()
		except ProviderError:
			logger.warning(
				f'All {self.max_attempts} attempts to load currencies failed, using fallback currency list'
			)
			return CurrencyCatalog.fallback()

		logger.info(f'Loaded {len(currencies)} currencies')
		return CurrencyCatalog(currencies=currencies)
