import asyncio
import inspect
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class Debouncer:
	"""Trailing-edge debounce: run ``callback`` once, ``delay`` seconds after the last trigger.

	Every ``trigger()`` cancels the pending timer and starts a new one. Async
	callbacks are run as tasks that are tracked until they finish.
	"""

	def __init__(self, callback: Callable[[], object], delay: float):
		self._callback = callback
		self.delay = delay
		self._handle: asyncio.TimerHandle | None = None
		self._tasks: set[asyncio.Task] = set()

	@property
	def pending(self) -> bool:
		return self._handle is not None

	def trigger(self) -> None:
		self.cancel()
		loop = asyncio.get_running_loop()
		self._handle = loop.call_later(self.delay, self._fire)

	def cancel(self) -> None:
		if self._handle is not None:
			self._handle.cancel()
			self._handle = None

	def _fire(self) -> None:
		self._handle = None
		result = self._callback()
		if inspect.isawaitable(result):
			task = asyncio.ensure_future(result)
			self._tasks.add(task)
			task.add_done_callback(self._task_done)

	def _task_done(self, task: asyncio.Task) -> None:
		self._tasks.discard(task)
		if not task.cancelled() and task.exception() is not None:
			logger.error(f'Debounced callback failed: {task.exception()}')

	async def wait_idle(self) -> None:
		"""Wait for callbacks already fired; does not wait on the pending timer."""
		if self._tasks:
			await asyncio.gather(*self._tasks, return_exceptions=True)

	async def aclose(self) -> None:
		self.cancel()
		for task in list(self._tasks):
			task.cancel()
		await self.wait_idle()
