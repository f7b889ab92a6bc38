"""
Console presenter: renders conversion results, insights and errors as plain
text to stdout (or any file-like stream).
"""
import sys
from typing import TextIO

from application.formatting import format_insight, format_result
from application.ports import Presenter
from domain.exceptions.currency import ErrorKind
from domain.models.currency import ConversionResult, InsightSample, ValidationIssue


class ConsolePresenter(Presenter):
	def __init__(self, stream: TextIO = sys.stdout):
		self.stream = stream
		self.error_message: str | None = None
		self.is_loading = False
		self.invalid_fields: set[str] = set()

	def _write(self, text: str) -> None:
		self.stream.write(f'{text}\n')

	def render_catalog(self, currencies: list[tuple[str, str]]) -> None:
		self._write(f'{len(currencies)} currencies available')
		for code, name in currencies:
			self._write(f'  {code} - {name}')

	def render_result(self, result: ConversionResult) -> None:
		self.invalid_fields.clear()
		amount, details, rate = format_result(result)
		self._write(details)
		self._write(f'  {amount}')
		self._write(f'  {rate}')

	def render_insight(self, insight: InsightSample) -> None:
		self._write(format_insight(insight))

	def render_validation(self, issues: list[ValidationIssue]) -> None:
		self.invalid_fields = {issue.field for issue in issues}
		for issue in issues:
			self._write(f'  ! {issue.field}: {issue.message}')

	def render_error(self, message: str, kind: ErrorKind | None = None) -> None:
		self.error_message = message
		self._write(f'Error: {message}')

	def clear_error(self) -> None:
		self.error_message = None

	def set_loading(self, is_loading: bool) -> None:
		if is_loading and not self.is_loading:
			self._write('Converting...')
		self.is_loading = is_loading
