import logging

from application.debounce import Debouncer
from application.ports import Presenter
from application.services import CatalogService, ConversionService, InsightService
from application.services.validation import is_submittable, validate
from config.logging import setup_logging
from config.settings import Settings, get_settings
from domain.exceptions.currency import (
	CurrencyException,
	ErrorKind,
	NoDataError,
	ProviderError,
	ValidationError,
)
from domain.models.currency import ConversionRequest, ConversionResult, CurrencyCatalog, InsightSample
from infrastructure.providers.frankfurter import FrankfurterProvider
from presentation.console import ConsolePresenter

logger = logging.getLogger(__name__)

FALLBACK_WARNING = 'Using fallback currency list. Some features may be limited.'
INSIGHT_FAILURE_MESSAGE = 'Unable to fetch currency insights at the moment.'

FORM_FIELDS = ('amount', 'from_code', 'to_code')


class ConversionController:
	"""Owns the catalog and the form values, and drives the presenter.

	The controller is the only place where errors become user-facing messages.
	Conversions are coalesced by the conversion service; insight requests are not.
	"""

	def __init__(
		self,
		presenter: Presenter,
		catalog_service: CatalogService,
		conversion_service: ConversionService,
		insight_service: InsightService,
		settings: Settings | None = None,
		provider: FrankfurterProvider | None = None,
	):
		settings = settings or get_settings()
		self.presenter = presenter
		self.catalog_service = catalog_service
		self.conversion_service = conversion_service
		self.insight_service = insight_service
		self._provider = provider
		self._defaults = (settings.DEFAULT_AMOUNT, settings.DEFAULT_FROM, settings.DEFAULT_TO)

		self.catalog: CurrencyCatalog | None = None
		self.ready = False
		self.amount: object = ''
		self.from_code = ''
		self.to_code = ''

		self._auto_convert = Debouncer(self._run_auto_convert, delay=settings.AUTO_CONVERT_DELAY_SECONDS)
		self._error_timer = Debouncer(self.clear_error, delay=settings.ERROR_DISPLAY_SECONDS)

	@classmethod
	def from_settings(cls, presenter: Presenter | None = None, settings: Settings | None = None) -> 'ConversionController':
		settings = settings or get_settings()
		setup_logging(settings.LOG_LEVEL, settings.LOG_JSON)
		provider = FrankfurterProvider(base_url=settings.API_BASE_URL, timeout=settings.REQUEST_TIMEOUT_SECONDS)
		return cls(
			presenter=presenter or ConsolePresenter(),
			catalog_service=CatalogService(
				provider,
				max_attempts=settings.CATALOG_MAX_ATTEMPTS,
				backoff_seconds=settings.CATALOG_BACKOFF_SECONDS,
				timeout=settings.REQUEST_TIMEOUT_SECONDS,
			),
			conversion_service=ConversionService(provider, timeout=settings.REQUEST_TIMEOUT_SECONDS),
			insight_service=InsightService(
				provider,
				window_days=settings.INSIGHT_WINDOW_DAYS,
				timeout=settings.REQUEST_TIMEOUT_SECONDS,
			),
			settings=settings,
			provider=provider,
		)

	@property
	def request(self) -> ConversionRequest:
		return ConversionRequest(amount=self.amount, from_code=self.from_code, to_code=self.to_code)

	@property
	def is_converting(self) -> bool:
		return self.conversion_service.is_converting

	async def start(self) -> CurrencyCatalog:
		self.catalog = await self.catalog_service.load_currencies()
		self.presenter.render_catalog(self.catalog.sorted_items())
		self.amount, self.from_code, self.to_code = self._defaults
		self.ready = True

		if self.catalog.degraded:
			self.show_error(FALLBACK_WARNING)
		return self.catalog

	def set_field(self, name: str, value) -> None:
		if name not in FORM_FIELDS:
			raise ValueError(f'Unknown form field: {name}')
		setattr(self, name, value)
		self.on_field_change()

	def on_field_change(self) -> None:
		self._auto_convert.trigger()

	async def _run_auto_convert(self) -> None:
		if not is_submittable(self.request, self.catalog):
			return
		await self.convert()

	async def submit(self) -> ConversionResult | None:
		self.clear_error()
		issues = validate(self.request, self.catalog)
		if issues:
			error = ValidationError(issues)
			logger.info(f'Rejected conversion form: {error}')
			self.presenter.render_validation(issues)
			self.show_error(error.user_message, error.kind)
			return None
		return await self.convert()

	async def convert(self) -> ConversionResult | None:
		if self.conversion_service.is_converting:
			logger.debug('Conversion already running, ignoring trigger')
			return None

		self.presenter.set_loading(True)
		self.clear_error()
		try:
			result = await self.conversion_service.convert(self.request)
		except CurrencyException as e:
			logger.error(f'Conversion error: {e}', extra={'error_kind': e.kind})
			self.show_error(e.user_message, e.kind)
			return None
		finally:
			self.presenter.set_loading(False)

		if result is not None:
			self.presenter.render_result(result)
		return result

	async def swap(self) -> ConversionResult | None:
		self.from_code, self.to_code = self.to_code, self.from_code
		if is_submittable(self.request, self.catalog):
			return await self.convert()
		return None

	async def request_insight(self) -> InsightSample | None:
		try:
			insight = await self.insight_service.summarize(self.from_code, self.to_code)
		except (ValidationError, NoDataError) as e:
			self.show_error(e.user_message, e.kind)
			return None
		except ProviderError as e:
			logger.error(f'Insight error: {e}', extra={'error_kind': e.kind})
			self.show_error(INSIGHT_FAILURE_MESSAGE, e.kind)
			return None

		self.presenter.render_insight(insight)
		return insight

	def show_error(self, message: str, kind: ErrorKind | None = None) -> None:
		self.presenter.render_error(message, kind)
		self._error_timer.trigger()

	def clear_error(self) -> None:
		self._error_timer.cancel()
		self.presenter.clear_error()

	async def wait_idle(self) -> None:
		await self._auto_convert.wait_idle()

	async def aclose(self) -> None:
		await self._auto_convert.aclose()
		await self._error_timer.aclose()
		if self._provider is not None:
			await self._provider.close()
