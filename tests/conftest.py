"""
Shared fixtures for the unit tests.
"""
from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from application.ports import Presenter
from config.settings import Settings
from infrastructure.providers.frankfurter import FrankfurterProvider

CURRENCIES = {
	'EUR': 'Euro',
	'GBP': 'British Pound',
	'JPY': 'Japanese Yen',
	'USD': 'United States Dollar',
}


@pytest.fixture
def mock_http_client():
	return AsyncMock(spec=httpx.AsyncClient)


@pytest.fixture
def make_response():
	"""Build a mocked httpx response returning ``payload`` from json()."""

	def _make(payload, status_code=200):
		response = Mock()
		response.status_code = status_code
		response.json.return_value = payload
		response.raise_for_status = Mock()
		return response

	return _make


@pytest.fixture
def mock_provider():
	provider = AsyncMock(spec=FrankfurterProvider)
	provider.fetch_currencies.return_value = dict(CURRENCIES)
	return provider


@pytest.fixture
def presenter():
	return Mock(spec=Presenter)


@pytest.fixture
def fast_settings():
	return Settings(
		AUTO_CONVERT_DELAY_SECONDS=0.05,
		ERROR_DISPLAY_SECONDS=0.2,
		REQUEST_TIMEOUT_SECONDS=0.2,
		CATALOG_BACKOFF_SECONDS=0,
	)
