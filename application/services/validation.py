from decimal import Decimal, InvalidOperation

from domain.models.currency import ConversionRequest, CurrencyCatalog, ValidationIssue


def normalize_code(code: str | None) -> str:
	return (code or '').strip().upper()


def parse_amount(value) -> Decimal | None:
	"""Turn a form amount into a finite Decimal, or None when it is not a number."""
	if value is None or isinstance(value, bool):
		return None
	if isinstance(value, Decimal):
		amount = value
	elif isinstance(value, (int, float)):
		amount = Decimal(str(value))
	elif isinstance(value, str):
		text = value.strip()
		if not text:
			return None
		try:
			amount = Decimal(text)
		except InvalidOperation:
			return None
	else:
		return None

	if not amount.is_finite():
		return None
	return amount


def validate(request: ConversionRequest, catalog: CurrencyCatalog | None = None) -> list[ValidationIssue]:
	"""Check every rule and return all violations; an empty list means valid."""
	issues = []
	from_code = normalize_code(request.from_code)
	to_code = normalize_code(request.to_code)

	if not from_code:
		issues.append(ValidationIssue('from_code', 'Please select a currency to convert from.'))
	elif catalog is not None and from_code not in catalog:
		issues.append(ValidationIssue('from_code', f'Currency {from_code} is not supported.'))

	if not to_code:
		issues.append(ValidationIssue('to_code', 'Please select a currency to convert to.'))
	elif catalog is not None and to_code not in catalog:
		issues.append(ValidationIssue('to_code', f'Currency {to_code} is not supported.'))

	amount = parse_amount(request.amount)
	if amount is None or amount <= 0:
		issues.append(ValidationIssue('amount', 'Please enter an amount greater than zero.'))

	if from_code and to_code and from_code == to_code:
		issues.append(ValidationIssue('currencies', 'Please select different currencies for conversion.'))

	return issues


def is_submittable(request: ConversionRequest, catalog: CurrencyCatalog | None = None) -> bool:
	return not validate(request, catalog)
