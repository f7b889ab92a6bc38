from datetime import date
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, RootModel


def _exact_decimal(value):
	# JSON floats go through str() so 0.85 stays Decimal('0.85')
	if isinstance(value, float):
		return Decimal(str(value))
	return value


Rate = Annotated[Decimal, BeforeValidator(_exact_decimal)]
OptionalRate = Annotated[Decimal | None, BeforeValidator(_exact_decimal)]


class CurrenciesPayload(RootModel[dict[str, str]]):
	pass


class LatestRatesPayload(BaseModel):
	amount: Rate | None = None
	base: str | None = None
	rates: dict[str, Rate]


class TimeSeriesPayload(BaseModel):
	amount: Rate | None = None
	base: str | None = None
	start_date: date | None = None
	end_date: date | None = None
	rates: dict[date, dict[str, OptionalRate]]
