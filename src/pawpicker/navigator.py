"""Remote file picker navigation state machine.

Created: 2026-10-19

The navigator owns one :class:`NavigationState` and moves it through
``Idle → Loading → (Ready | Failed)`` on every ``browse``. UI layers
subscribe to state changes and render; they never mutate state directly.

Overlapping requests are reconciled with last-requested-wins: each request
captures a sequence number and its result is dropped if a newer request
started in the meantime, or if the picker already completed or was
dismissed. Nothing here raises into the embedding application; the only
outward signals are ``on_complete`` and ``on_dismiss``, and at most one of
them ever fires.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any, Protocol

from pawpicker.breadcrumbs import derive_breadcrumbs
from pawpicker.errors import (
    ApplicationError,
    ConnectivityError,
    HttpError,
    ReadError,
)
from pawpicker.models import (
    Breadcrumb,
    Entry,
    FileContent,
    Listing,
    NavigationState,
    SelectionMode,
)

logger = logging.getLogger(__name__)

BROWSE_CONNECT_ERROR = "Failed to connect to server"
READ_CONNECT_ERROR = "Failed to read file"

Listener = Callable[[NavigationState], Any]


class FilesTransport(Protocol):
    """What the navigator needs from a transport (see FilesClient)."""

    async def browse(self, path: str, mode: str = "all") -> Listing: ...

    async def read_file(self, path: str) -> FileContent: ...


class Navigator:
    """Navigate a remote filesystem and pick a directory or a file.

    Args:
        client: Transport performing the remote calls.
        mode: Fixed selection mode for this picker.
        on_complete: Called once with ``(dir_path)`` in Directory mode or
            ``(file_path, content)`` in File mode. May be async.
        on_dismiss: Called with no arguments on explicit cancel. May be async.
        initial_path: Path browsed by :meth:`initialize`.
    """

    def __init__(
        self,
        client: FilesTransport,
        mode: SelectionMode,
        on_complete: Callable[..., Any],
        on_dismiss: Callable[[], Any] | None = None,
        initial_path: str = "~",
    ):
        self.client = client
        self.mode = SelectionMode(mode)
        self.initial_path = initial_path
        self.state = NavigationState()
        self._on_complete = on_complete
        self._on_dismiss = on_dismiss
        self._listeners: list[Listener] = []
        self._seq = 0
        self._initialized = False
        self._finished = False

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    @property
    def alive(self) -> bool:
        """False once completion or dismissal has fired."""
        return not self._finished

    @property
    def breadcrumbs(self) -> list[Breadcrumb]:
        return derive_breadcrumbs(self.state.resolved_path)

    @property
    def can_go_up(self) -> bool:
        return self.state.parent_path is not None

    @property
    def can_confirm(self) -> bool:
        return self.mode is SelectionMode.DIRECTORY and bool(self.state.resolved_path)

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener* for state changes. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                result = listener(self.state)
                if asyncio.iscoroutine(result):
                    await result
            except Exception:
                logger.warning("State listener %r failed", listener, exc_info=True)

    async def _invoke(self, callback: Callable[..., Any], *args: Any) -> None:
        try:
            result = callback(*args)
            if asyncio.iscoroutine(result):
                await result
        except Exception:
            logger.exception("Picker callback %r failed", callback)

    # ------------------------------------------------------------------
    # Request bookkeeping
    # ------------------------------------------------------------------

    def _begin(self) -> int:
        self._seq += 1
        self.state.loading = True
        self.state.error = None
        return self._seq

    def _is_current(self, seq: int) -> bool:
        return not self._finished and seq == self._seq

    async def _fail(self, seq: int, message: str) -> None:
        if not self._is_current(seq):
            logger.debug("Discarding stale failure #%d: %s", seq, message)
            return
        self.state.loading = False
        self.state.error = message
        self.state.entries = ()
        await self._notify()

    async def _complete(self, *args: Any) -> None:
        if self._finished:
            return
        self._finished = True
        logger.debug("Picker completed with %r", args[0])
        await self._invoke(self._on_complete, *args)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    async def initialize(self) -> None:
        """Fetch the initial listing. Call once after construction."""
        if self._initialized:
            logger.warning("Navigator.initialize() called more than once; ignoring")
            return
        self._initialized = True
        await self.browse(self.initial_path)

    async def browse(self, path: str) -> None:
        """Load the listing for *path*, superseding any request in flight."""
        if self._finished:
            return

        seq = self._begin()
        logger.debug("Browse #%d → %s", seq, path)
        await self._notify()

        try:
            # Always list everything; selection mode only changes click handling.
            listing = await self.client.browse(path, mode="all")
        except ConnectivityError:
            message = BROWSE_CONNECT_ERROR
        except HttpError as e:
            message = f"Failed to browse: {e.status}"
        except ApplicationError as e:
            message = e.message
        except Exception:
            logger.exception("Unexpected error browsing %s", path)
            message = BROWSE_CONNECT_ERROR
        else:
            if not self._is_current(seq):
                logger.debug("Discarding stale listing #%d for %s", seq, path)
                return
            self.state.entries = tuple(listing.entries)
            self.state.resolved_path = listing.current
            self.state.parent_path = listing.parent
            self.state.requested_path = path
            self.state.loading = False
            self.state.error = None
            await self._notify()
            return

        logger.info("Browse %s failed: %s", path, message)
        await self._fail(seq, message)

    async def select_entry(self, entry: Entry) -> None:
        """Activate *entry*: enter a directory, or read a file in File mode."""
        if self._finished:
            return

        if entry.is_dir:
            await self.browse(entry.path)
            return

        if self.mode is not SelectionMode.FILE:
            logger.debug("Ignoring file %s in directory mode", entry.path)
            return

        seq = self._begin()
        await self._notify()

        try:
            result = await self.client.read_file(entry.path)
        except ReadError as e:
            message = f"Failed to read file: {e.detail}"
        except ConnectivityError:
            message = READ_CONNECT_ERROR
        except Exception:
            logger.exception("Unexpected error reading %s", entry.path)
            message = READ_CONNECT_ERROR
        else:
            if not self._is_current(seq):
                logger.debug("Discarding stale file read #%d for %s", seq, entry.path)
                return
            self.state.loading = False
            await self._notify()
            await self._complete(entry.path, result.content)
            return

        logger.info("Read %s failed: %s", entry.path, message)
        await self._fail(seq, message)

    async def confirm(self) -> None:
        """Choose the current resolved directory (Directory mode only)."""
        if not self.alive or not self.can_confirm:
            return
        await self._complete(self.state.resolved_path)

    async def go_up(self) -> None:
        parent = self.state.parent_path
        if parent is None:
            return
        await self.browse(parent)

    async def go_root(self) -> None:
        await self.browse("/")

    async def go_to_crumb(self, index: int) -> None:
        """Browse to breadcrumb *index* (raises IndexError when out of range)."""
        crumb = self.breadcrumbs[index]
        await self.browse(crumb.path)

    async def dismiss(self) -> None:
        """Cancel the picker. Late responses are ignored afterwards."""
        if self._finished:
            return
        self._finished = True
        logger.debug("Picker dismissed")
        if self._on_dismiss is not None:
            await self._invoke(self._on_dismiss)
