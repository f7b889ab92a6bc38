from decimal import ROUND_HALF_UP, Decimal, localcontext

from domain.models.currency import ConversionResult, InsightSample, Trend

_TREND_SYMBOL = {
	Trend.UP: '↑',
	Trend.DOWN: '↓',
	Trend.STABLE: '→',
}


def format_number(value, max_decimals: int = 2) -> str:
	"""Thousands separators, at least 2 and at most ``max_decimals`` fraction digits."""
	max_decimals = max(max_decimals, 2)
	number = value if isinstance(value, Decimal) else Decimal(str(value))
	with localcontext() as ctx:
		# quantize needs every integer digit plus the fraction digits
		ctx.prec = max(ctx.prec, number.adjusted() + max_decimals + 2)
		quantized = number.quantize(Decimal(1).scaleb(-max_decimals), rounding=ROUND_HALF_UP)
		whole, _, fraction = f'{quantized:,.{max_decimals}f}'.partition('.')
	fraction = fraction.rstrip('0').ljust(2, '0')
	return f'{whole}.{fraction}'


def format_currency(amount, code: str) -> str:
	return f'{format_number(amount, 2)} {code}'


def format_result(result: ConversionResult) -> tuple[str, str, str]:
	"""Headline amount, details line and the per-unit rate line."""
	return (
		format_currency(result.converted_amount, result.to_code),
		f'{format_currency(result.original_amount, result.from_code)} equals',
		f'1 {result.from_code} = {format_number(result.rate, 6)} {result.to_code}',
	)


def format_insight(insight: InsightSample) -> str:
	trend = insight.trend
	return '\n'.join([
		f'{_TREND_SYMBOL[trend]} 7-day insight for {insight.from_code}/{insight.to_code}:',
		f'Current: {format_number(insight.latest_rate, 6)}',
		f'Trend: {trend.description}',
		f'Range: {format_number(insight.min_rate, 6)} - {format_number(insight.max_rate, 6)}',
		f'Average: {format_number(insight.average_rate, 6)}',
	])
