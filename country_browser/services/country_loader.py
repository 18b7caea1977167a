import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

import httpx
from pydantic import TypeAdapter

from country_browser.core.config import Settings
from country_browser.core.errors import (
    GENERIC_ERROR_MESSAGE,
    HttpStatusFailure,
    LoadFailure,
    NetworkFailure,
    ParseFailure,
)
from country_browser.schemas.country import Country

logger = logging.getLogger(__name__)

_COUNTRY_LIST = TypeAdapter(List[Country])


@dataclass(frozen=True)
class Loading:
    status = "loading"


@dataclass(frozen=True)
class Failed:
    reason: str
    status = "error"


@dataclass(frozen=True)
class Ready:
    records: Tuple[Country, ...]
    status = "ready"


LoadState = Union[Loading, Failed, Ready]


def _error_text(exc: BaseException) -> Optional[str]:
    text = str(exc).strip()
    return text or None


async def fetch_countries(
    url: str,
    fields: Sequence[str],
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[Country]:
    """GET the full country list, asking only for ``fields``.

    Raises a ``LoadFailure`` subclass for transport errors, non-2xx
    responses and bodies that are not a JSON array. Individual
    records are never rejected; see ``Country``.
    """
    params = {"fields": ",".join(fields)}
    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        try:
            r = await client.get(url, params=params)
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise HttpStatusFailure(e.response.status_code) from e
        except httpx.RequestError as e:
            raise NetworkFailure(_error_text(e)) from e

        try:
            data = r.json()
        except ValueError as e:
            raise ParseFailure(f"Invalid JSON response: {e}") from e

    if not isinstance(data, list):
        raise ParseFailure(
            f"Invalid country data: expected a JSON array, got {type(data).__name__}"
        )
    return _COUNTRY_LIST.validate_python(data)


class CountryLoader:
    """Runs the one country fetch and holds the resulting load state.

    The state starts as ``Loading`` and moves to ``Failed`` or ``Ready``
    exactly once. ``dispose()`` bumps a generation counter so a fetch that
    finishes after teardown is dropped instead of applied.
    """

    def __init__(
        self,
        url: str,
        fields: Sequence[str],
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.fields = list(fields)
        self.timeout = timeout
        self._transport = transport
        self._state: LoadState = Loading()
        self._generation = 0
        self._task: Optional[asyncio.Task] = None

    @classmethod
    def from_settings(
        cls, cfg: Settings, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "CountryLoader":
        return cls(
            url=cfg.COUNTRIES_API_URL,
            fields=cfg.COUNTRY_FIELDS,
            timeout=cfg.FETCH_TIMEOUT_SECONDS,
            transport=transport,
        )

    @property
    def state(self) -> LoadState:
        return self._state

    def start(self) -> asyncio.Task:
        if self._task is not None:
            raise RuntimeError("Country fetch has already been started")
        self._state = Loading()
        self._task = asyncio.get_running_loop().create_task(
            self._run(self._generation)
        )
        return self._task

    async def settled(self) -> LoadState:
        """Wait for the pending fetch (if any) and return the current state."""
        if self._task is not None and not self._task.done():
            await asyncio.wait({self._task})
        return self._state

    def dispose(self):
        self._generation += 1

    async def aclose(self):
        """Dispose and cancel a fetch that is still in flight."""
        self.dispose()
        task = self._task
        if task is not None and not task.done():
            task.cancel()
            await asyncio.wait({task})

    async def _run(self, generation: int):
        logger.info("Fetching countries from %s", self.url)
        try:
            records = await fetch_countries(
                self.url, self.fields, timeout=self.timeout, transport=self._transport
            )
        except LoadFailure as e:
            logger.error("Country fetch failed (%s): %s", type(e).__name__, e.message)
            self._apply(generation, Failed(reason=e.message))
            return
        except Exception as e:
            logger.exception("Unexpected error while fetching countries")
            self._apply(
                generation, Failed(reason=_error_text(e) or GENERIC_ERROR_MESSAGE)
            )
            return

        logger.info("Loaded %d countries", len(records))
        self._apply(generation, Ready(records=tuple(records)))

    def _apply(self, generation: int, state: LoadState):
        if generation != self._generation:
            logger.warning(
                "Discarding %s country fetch result: browser was torn down",
                state.status,
            )
            return
        self._state = state
