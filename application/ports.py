from abc import ABC, abstractmethod

from domain.exceptions.currency import ErrorKind
from domain.models.currency import ConversionResult, InsightSample, ValidationIssue


class Presenter(ABC):
	"""Rendering surface the controller drives. Implementations own all output."""

	@abstractmethod
	def render_catalog(self, currencies: list[tuple[str, str]]) -> None:
		"""Offer the sorted (code, name) pairs for selection"""
		...

	@abstractmethod
	def render_result(self, result: ConversionResult) -> None:
		...

	@abstractmethod
	def render_insight(self, insight: InsightSample) -> None:
		...

	@abstractmethod
	def render_validation(self, issues: list[ValidationIssue]) -> None:
		"""Mark every invalid field"""
		...

	@abstractmethod
	def render_error(self, message: str, kind: ErrorKind | None = None) -> None:
		...

	@abstractmethod
	def clear_error(self) -> None:
		...

	@abstractmethod
	def set_loading(self, is_loading: bool) -> None:
		...
