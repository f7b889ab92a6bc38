import logging
from datetime import date
from decimal import Decimal

import httpx
from pydantic import ValidationError as SchemaValidationError

from domain.exceptions.currency import (
	NetworkError,
	ProviderError,
	RateLimitedError,
	RequestTimeoutError,
	ServerError,
	UnknownConversionError,
)
from infrastructure.providers.schemas import CurrenciesPayload, LatestRatesPayload, TimeSeriesPayload

logger = logging.getLogger(__name__)


def classify_status(status_code: int, detail: str) -> ProviderError:
	if status_code == 429:
		return RateLimitedError(f'Frankfurter rate limit hit: {detail}', status_code=status_code)
	if status_code == 500:
		return ServerError(f'Frankfurter server error: {detail}', status_code=status_code)
	return NetworkError(f'Frankfurter HTTP error {status_code}: {detail}', status_code=status_code)


class FrankfurterProvider:
	BASE_URL = 'https://api.frankfurter.app'

	def __init__(
		self,
		base_url: str | None = None,
		client: httpx.AsyncClient | None = None,
		timeout: float = 10,
	):
		self.base_url = (base_url or self.BASE_URL).rstrip('/')
		self._client = client or httpx.AsyncClient(
			timeout=httpx.Timeout(timeout),
			headers={'accept': 'application/json'},
		)

	@property
	def name(self) -> str:
		return 'frankfurter'

	async def _request(self, endpoint: str, params: dict | None = None):
		url = f'{self.base_url}/{endpoint}'

		try:
			response = await self._client.get(url, params=params or {})
			response.raise_for_status()
		except httpx.HTTPStatusError as e:
			raise classify_status(e.response.status_code, e.response.text[:200]) from e
		except httpx.TimeoutException as e:
			raise RequestTimeoutError(f'Frankfurter request timed out: {e.__class__.__name__}') from e
		except httpx.RequestError as e:
			raise NetworkError(f'Frankfurter request failed: {e.__class__.__name__}') from e
		except Exception as e:
			raise UnknownConversionError(f'Frankfurter request error: {str(e)}') from e

		try:
			return response.json()
		except ValueError as e:
			raise UnknownConversionError(f'Frankfurter response parsing error: {str(e)}') from e

	async def fetch_currencies(self) -> dict[str, str]:
		data = await self._request('currencies')
		try:
			return CurrenciesPayload.model_validate(data).root
		except SchemaValidationError as e:
			raise UnknownConversionError(f'Unexpected currencies payload: {e.error_count()} errors') from e

	async def fetch_conversion(self, amount: Decimal, from_code: str, to_code: str) -> Decimal:
		"""Return ``amount`` of ``from_code`` expressed in ``to_code``."""
		data = await self._request('latest', {'amount': format(amount, 'f'), 'from': from_code, 'to': to_code})
		try:
			payload = LatestRatesPayload.model_validate(data)
		except SchemaValidationError as e:
			raise UnknownConversionError(f'Unexpected latest payload: {e.error_count()} errors') from e

		converted = payload.rates.get(to_code)
		if converted is None:
			raise UnknownConversionError(f'Missing rate for {to_code}')
		return converted

	async def fetch_timeseries(
		self, start: date, end: date, from_code: str, to_code: str
	) -> dict[date, dict[str, Decimal | None]]:
		endpoint = f'{start.isoformat()}..{end.isoformat()}'
		data = await self._request(endpoint, {'from': from_code, 'to': to_code})
		try:
			return TimeSeriesPayload.model_validate(data).rates
		except SchemaValidationError as e:
			raise UnknownConversionError(f'Unexpected time series payload: {e.error_count()} errors') from e

	async def close(self) -> None:
		await self._client.aclose()
