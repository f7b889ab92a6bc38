import asyncio
import logging

from application.services.validation import normalize_code, parse_amount, validate
from domain.exceptions.currency import ProviderError, RequestTimeoutError, UnknownConversionError, ValidationError
from domain.models.currency import ConversionRequest, ConversionResult
from infrastructure.providers.frankfurter import FrankfurterProvider

logger = logging.getLogger(__name__)


class ConversionService:
	def __init__(self, provider: FrankfurterProvider, timeout: float = 10.0):
		self.provider = provider
		self.timeout = timeout
		self._in_flight = False

	@property
	def is_converting(self) -> bool:
		return self._in_flight

	async def convert(self, request: ConversionRequest) -> ConversionResult | None:
		"""Convert one request, or return None if another conversion is still running.

		A second call made while one is in flight is dropped, not queued.
		Raises a ProviderError subclass classifying the failure; nothing is retried.
		"""
		if self._in_flight:
			logger.debug('Conversion already in flight, dropping request')
			return None

		issues = validate(request)
		if issues:
			raise ValidationError(issues)

		amount = parse_amount(request.amount)
		from_code = normalize_code(request.from_code)
		to_code = normalize_code(request.to_code)

		self._in_flight = True
		try:
			converted_amount = await asyncio.wait_for(
				self.provider.fetch_conversion(amount, from_code, to_code),
				timeout=self.timeout,
			)
		except asyncio.TimeoutError as e:
			logger.error(f'Conversion {from_code} -> {to_code} timed out after {self.timeout}s')
			raise RequestTimeoutError(f'Conversion not completed within {self.timeout}s') from e
		except ProviderError:
			raise
		except Exception as e:
			logger.error(f'Unexpected conversion failure {from_code} -> {to_code}: {e}')
			raise UnknownConversionError(f'Conversion failed: {str(e)}') from e
		finally:
			self._in_flight = False

		logger.info(f'Converted {amount} {from_code} -> {converted_amount} {to_code}')
		return ConversionResult(
			from_code=from_code,
			to_code=to_code,
			original_amount=amount,
			converted_amount=converted_amount,
			rate=converted_amount / amount,
		)
