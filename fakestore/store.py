"""Observable catalog state driven by asynchronous loads."""

import asyncio
import logging
from typing import Callable

from .errors import CatalogError
from .model import decode_product, decode_products
from .protocol import CatalogSource
from .state import Error, FetchState, Loaded, Loading

logger = logging.getLogger(__name__)

Observer = Callable[[FetchState], None]

DEFAULT_ERROR_MESSAGE = "An error occurred"


class CatalogStore:
    """Holds the result of the most recent catalog load.

    Only one load is tracked at a time. Starting a new load cancels the
    one in flight, so the state always reflects the latest request.
    """

    def __init__(self, source: CatalogSource):
        self.source = source
        self._state: FetchState = Loading()
        self._observers: list[Observer] = []
        self._task: asyncio.Task | None = None
        self._generation = 0

    @property
    def state(self) -> FetchState:
        return self._state

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register ``observer`` for state changes and return an unsubscribe function."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def load(self, path: str, *, many: bool = True) -> asyncio.Task:
        """Start loading ``path`` and return the task doing the work.

        ``many`` selects whether the body is decoded as a list of products
        or a single product. Must be called from a running event loop.
        An empty path raises ValueError before any state change.
        """
        if not path.strip().strip("/"):
            raise ValueError("path must not be empty")

        self.cancel()
        self._generation += 1
        self._set_state(Loading())
        self._task = asyncio.get_running_loop().create_task(
            self._run(path, many, self._generation)
        )
        return self._task

    def load_products(self) -> asyncio.Task:
        return self.load("products", many=True)

    def load_product(self, product_id: int) -> asyncio.Task:
        return self.load(f"products/{product_id}", many=False)

    def cancel(self) -> None:
        """Cancel the in-flight load, if any."""
        if self._task is not None and not self._task.done():
            logger.debug("Cancelling superseded load")
            self._task.cancel()
        self._task = None

    async def aclose(self) -> None:
        """Cancel any in-flight load and wait for it to finish.

        A load that already died with an unexpected exception is logged
        rather than re-raised.
        """
        task = self._task
        self.cancel()
        if task is None:
            return

        try:
            await task
        except asyncio.CancelledError:
            pass
        except Exception as e:
            logger.error(f"Load failed before close: {e}", exc_info=True)

    async def _run(self, path: str, many: bool, generation: int) -> None:
        try:
            body = await self.source.fetch(path)
            value = decode_products(body) if many else decode_product(body)
        except CatalogError as e:
            logger.warning(f"Failed to load {path}: {e}")
            self._publish(generation, Error(message=str(e) or DEFAULT_ERROR_MESSAGE))
            return

        self._publish(generation, Loaded(value=value))

    def _publish(self, generation: int, state: FetchState) -> None:
        if generation != self._generation:
            logger.debug(f"Dropping result of superseded load {generation}")
            return
        self._set_state(state)

    def _set_state(self, state: FetchState) -> None:
        logger.debug(f"State -> {state.kind}")
        self._state = state
        for observer in list(self._observers):
            try:
                observer(state)
            except Exception as e:
                logger.error(f"Error in state observer: {e}", exc_info=True)
