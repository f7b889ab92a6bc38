from enum import Enum


class ErrorKind(str, Enum):
	TIMEOUT = 'timeout'
	NETWORK = 'network'
	RATE_LIMITED = 'rate_limited'
	SERVER = 'server'
	UNKNOWN = 'unknown'
	VALIDATION = 'validation'
	NO_DATA = 'no_data'


USER_MESSAGES: dict[ErrorKind, str] = {
	ErrorKind.TIMEOUT: 'Request timed out. Please check your connection and try again.',
	ErrorKind.NETWORK: 'Network error: Please check your internet connection and try again.',
	ErrorKind.RATE_LIMITED: 'Too many requests. Please wait a moment and try again.',
	ErrorKind.SERVER: 'Server error. Please try again later.',
	ErrorKind.UNKNOWN: 'Failed to convert currency. Please check your connection and try again.',
	ErrorKind.VALIDATION: 'Please check the highlighted fields.',
	ErrorKind.NO_DATA: 'No historical data available for selected currencies.',
}


class CurrencyException(Exception):
	kind: ErrorKind = ErrorKind.UNKNOWN

	@property
	def user_message(self) -> str:
		return USER_MESSAGES[self.kind]


class ValidationError(CurrencyException):
	"""Raised with every violated rule attached, before any network call."""

	kind = ErrorKind.VALIDATION

	def __init__(self, issues: list):
		self.issues = list(issues)
		super().__init__('; '.join(issue.message for issue in self.issues))

	@property
	def user_message(self) -> str:
		if self.issues:
			return self.issues[0].message
		return USER_MESSAGES[self.kind]


class ProviderError(CurrencyException):
	def __init__(self, message: str, status_code: int | None = None):
		super().__init__(message)
		self.status_code = status_code


class RequestTimeoutError(ProviderError):
	kind = ErrorKind.TIMEOUT


class NetworkError(ProviderError):
	kind = ErrorKind.NETWORK


class RateLimitedError(ProviderError):
	kind = ErrorKind.RATE_LIMITED


class ServerError(ProviderError):
	kind = ErrorKind.SERVER


class UnknownConversionError(ProviderError):
	kind = ErrorKind.UNKNOWN


class NoDataError(CurrencyException):
	kind = ErrorKind.NO_DATA
