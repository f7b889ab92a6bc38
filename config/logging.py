import json
import logging
import sys
from datetime import datetime


class JSONFormatter(logging.Formatter):
	"""One JSON object per line; classified errors carry their ``error_kind``."""

	def format(self, record: logging.LogRecord) -> str:
		entry = {
			'time': datetime.fromtimestamp(record.created).isoformat(timespec='milliseconds'),
			'level': record.levelname,
			'logger': record.name,
			'message': record.getMessage(),
		}

		kind = getattr(record, 'error_kind', None)
		if kind is not None:
			entry['error_kind'] = getattr(kind, 'value', kind)

		if record.exc_info and record.exc_info[1] is not None:
			entry['error'] = f'{record.exc_info[0].__name__}: {record.exc_info[1]}'

		return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = 'INFO', json_output: bool = False) -> None:
	root_logger = logging.getLogger()
	root_logger.handlers.clear()
	root_logger.setLevel(getattr(logging, level.upper()))

	logging.getLogger('httpx').setLevel(logging.WARNING)

	handler = logging.StreamHandler(sys.stdout)
	if json_output:
		handler.setFormatter(JSONFormatter())
	else:
		handler.setFormatter(logging.Formatter('%(asctime)s | %(levelname)-8s | %(name)s | %(message)s', datefmt='%H:%M:%S'))
	root_logger.addHandler(handler)
