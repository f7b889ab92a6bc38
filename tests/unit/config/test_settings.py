# nosec B101


import json
import logging

from config.logging import JSONFormatter, setup_logging
from config.settings import Settings
from domain.exceptions.currency import ErrorKind


def test_defaults_match_widget_behaviour(monkeypatch):
	monkeypatch.delenv('API_BASE_URL', raising=False)
	settings = Settings(_env_file=None)

	assert settings.API_BASE_URL == 'https://api.frankfurter.app'
	assert settings.REQUEST_TIMEOUT_SECONDS == 10
	assert settings.CATALOG_MAX_ATTEMPTS == 3
	assert settings.AUTO_CONVERT_DELAY_SECONDS == 0.5
	assert settings.ERROR_DISPLAY_SECONDS == 5
	assert settings.INSIGHT_WINDOW_DAYS == 7


def test_environment_overrides(monkeypatch):
	monkeypatch.setenv('API_BASE_URL', 'http://localhost:8080')
	monkeypatch.setenv('request_timeout_seconds', '2.5')

	settings = Settings(_env_file=None)

	assert settings.API_BASE_URL == 'http://localhost:8080'
	assert settings.REQUEST_TIMEOUT_SECONDS == 2.5


def test_json_formatter_emits_message_and_error_kind():
	record = logging.LogRecord('app', logging.ERROR, __file__, 1, 'conversion %s failed', ('USD',), None)
	record.error_kind = ErrorKind.TIMEOUT

	output = json.loads(JSONFormatter().format(record))

	assert output['message'] == 'conversion USD failed'
	assert output['level'] == 'ERROR'
	assert output['logger'] == 'app'
	assert output['error_kind'] == 'timeout'


def test_json_formatter_omits_error_kind_for_plain_records():
	record = logging.LogRecord('app', logging.INFO, __file__, 1, 'catalog loaded', (), None)

	output = json.loads(JSONFormatter().format(record))

	assert 'error_kind' not in output
	assert output['message'] == 'catalog loaded'


def test_setup_logging_quiets_httpx():
	root = logging.getLogger()
	previous = list(root.handlers), root.level
	try:
		setup_logging('DEBUG')
		assert root.level == logging.DEBUG
		assert logging.getLogger('httpx').level == logging.WARNING
	finally:
		root.handlers[:] = previous[0]
		root.setLevel(previous[1])
