# nosec B101


from datetime import date, timedelta
from decimal import Decimal

import pytest

from domain.exceptions.currency import (
	ErrorKind,
	NoDataError,
	RateLimitedError,
	RequestTimeoutError,
	ValidationError,
)
from domain.models.currency import (
	FALLBACK_CURRENCIES,
	CurrencyCatalog,
	InsightSample,
	RateSample,
	Trend,
	ValidationIssue,
)


def _insight(*rates: str) -> InsightSample:
	start = date(2025, 11, 5)
	samples = tuple(RateSample(day=start + timedelta(days=i), rate=Decimal(r)) for i, r in enumerate(rates))
	return InsightSample(from_code='USD', to_code='EUR', samples=samples)


@pytest.mark.parametrize(
	'rates, expected',
	[
		(('1.10', '1.12', '1.15'), Trend.UP),
		(('1.10',), Trend.STABLE),
		(('1.20', '1.10'), Trend.DOWN),
		(('1.10', '1.30', '1.10'), Trend.STABLE),
	],
)
def test_trend_compares_first_and_last(rates, expected):
	assert _insight(*rates).trend == expected


def test_insight_statistics():
	insight = _insight('1.20', '1.00', '1.10')

	assert insight.min_rate == Decimal('1.00')
	assert insight.max_rate == Decimal('1.20')
	assert insight.average_rate == Decimal('1.1')
	assert insight.latest_rate == Decimal('1.10')


def test_trend_description():
	assert Trend.UP.description == 'increasing'
	assert Trend.DOWN.description == 'decreasing'
	assert Trend.STABLE.description == 'stable'


def test_fallback_catalog_has_twenty_common_currencies():
	catalog = CurrencyCatalog.fallback()

	assert catalog.degraded is True
	assert len(catalog) == 20
	assert catalog.name_of('USD') == 'US Dollar'
	assert 'NOK' in catalog
	assert set(catalog) == set(FALLBACK_CURRENCIES)


def test_catalog_is_read_only_and_sorted():
	source = {'USD': 'US Dollar', 'AUD': 'Australian Dollar', 'EUR': 'Euro'}
	catalog = CurrencyCatalog(source)
	source['GBP'] = 'British Pound'

	assert 'GBP' not in catalog
	assert [code for code, _ in catalog.sorted_items()] == ['AUD', 'EUR', 'USD']
	with pytest.raises(TypeError):
		catalog.currencies['JPY'] = 'Japanese Yen'


def test_error_kinds_select_user_messages():
	assert RequestTimeoutError('x').kind == ErrorKind.TIMEOUT
	assert 'timed out' in RequestTimeoutError('x').user_message
	assert 'Too many requests' in RateLimitedError('x').user_message
	assert NoDataError('x').user_message == 'No historical data available for selected currencies.'


def test_validation_error_keeps_all_issues():
	error = ValidationError([
		ValidationIssue('amount', 'Please enter an amount greater than zero.'),
		ValidationIssue('currencies', 'Please select different currencies for conversion.'),
	])

	assert len(error.issues) == 2
	assert error.user_message == 'Please enter an amount greater than zero.'
	assert 'different currencies' in str(error)
