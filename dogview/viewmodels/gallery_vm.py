"""Gallery view model: UI state, load orchestration, and render instructions.

Call context:
    ``dogview/web_ui/main.py`` creates one ``GalleryVM`` per browser client and
    binds widget events to the ``cmd_*`` coroutines. The page applies the
    emitted :mod:`dogview.viewmodels.render` batches to its widgets.

Responsibilities:
    - Own the current :class:`~dogview.domain.entities.UIState` snapshot.
    - Persist state to the preference store on every change.
    - Run one load at a time; a new load supersedes the previous one and the
      superseded load never touches the UI.
"""

from __future__ import annotations

import json
import logging
from typing import Awaitable, Callable, List, Literal, Optional, Sequence

from dogview.domain.entities import MIN_QUERY_LENGTH, UIState
from dogview.domain.errors import EmptyResultError, LoadCancelledError, QueryValidationError
from dogview.domain.ports import PreferenceStorePort
from dogview.usecases.error_mapping import map_api_error
from dogview.usecases.load_breeds import LoadBreeds
from dogview.usecases.load_images import LoadImages
from dogview.usecases.request_token import LoadSupervisor, RequestToken
from dogview.viewmodels.card_format import breed_cards, image_cards, loaded_label
from dogview.viewmodels.render import (
    CardView,
    ClearCards,
    HideError,
    RenderInstruction,
    RenderSink,
    SetControlsEnabled,
    SetStatus,
    ShowCards,
    ShowError,
    ShowSkeleton,
    SyncControls,
)

PREFERENCES_KEY = "dogview.ui.state.v1"
QUERY_TOO_SHORT_MESSAGE = f"Please enter at least {MIN_QUERY_LENGTH} characters to search."

STATUS_IDLE = "Idle"
STATUS_LOADING = "Loading…"
STATUS_DONE = "Done"
STATUS_ERROR = "Error"

Phase = Literal["idle", "loading", "rendered", "empty", "error"]

log = logging.getLogger(__name__)


class GalleryVM:
    """State machine behind the dog gallery page."""

    def __init__(
        self,
        *,
        load_images: LoadImages,
        load_breeds: LoadBreeds,
        store: PreferenceStorePort,
        sink: RenderSink,
        state: Optional[UIState] = None,
    ) -> None:
        self.uc_load_images = load_images
        self.uc_load_breeds = load_breeds
        self.store = store
        self.sink = sink
        self.state = state or UIState()
        self.phase: Phase = "idle"
        self.cards: List[CardView] = []
        self._loads = LoadSupervisor()

    # ------------------------------------------------------------------
    # Triggers
    # ------------------------------------------------------------------
    async def initial_load(self) -> None:
        """Restore persisted state, sync the controls, and run the first load."""
        self.state = self.restore_state()
        self._emit(SyncControls(query=self.state.query, limit=self.state.limit, view=self.state.view))
        await self.load_view()

    async def cmd_reload(self) -> None:
        self._commit(self.state)
        await self.load_view()

    async def cmd_submit_search(self, raw_query: str) -> None:
        try:
            query = self.validate_query(raw_query)
        except QueryValidationError as exc:
            self._emit(ShowError(exc.message), SetStatus(STATUS_IDLE))
            return
        self._commit(self.state.with_query(query))
        await self.load_view()

    async def cmd_clear_search(self) -> None:
        self._commit(self.state.with_query(""))
        self._emit(SyncControls(query="", limit=self.state.limit, view=self.state.view))
        await self.load_view()

    async def cmd_set_limit(self, limit: int) -> None:
        self._commit(self.state.with_limit(int(limit)))
        await self.load_view()

    async def cmd_set_view(self, view: str) -> None:
        self._commit(self.state.with_view(view))
        await self.load_view()

    # ------------------------------------------------------------------
    # Loads
    # ------------------------------------------------------------------
    async def load_view(self) -> None:
        if self.state.view == "breeds":
            await self.load_breeds()
        else:
            await self.load_images()

    async def load_images(self) -> None:
        async def run(state: UIState, token: RequestToken) -> List[CardView]:
            return image_cards(await self.uc_load_images(state, token))

        await self._run_load(run)

    async def load_breeds(self) -> None:
        async def run(state: UIState, token: RequestToken) -> List[CardView]:
            return breed_cards(await self.uc_load_breeds(state, token))

        await self._run_load(run)

    def cancel_pending(self) -> None:
        """Cancel the in-flight load, e.g. when the client disconnects."""
        self._loads.cancel()

    async def _run_load(
        self, run: Callable[[UIState, RequestToken], Awaitable[List[CardView]]]
    ) -> None:
        state = self.state
        token = self._loads.begin()
        self.phase = "loading"
        log.debug("load #%d started: %s", token.serial, state)
        self._emit(
            HideError(),
            SetControlsEnabled(False),
            ShowSkeleton(state.limit),
            SetStatus(STATUS_LOADING, loading=True),
        )
        try:
            cards = await run(state, token)
        except LoadCancelledError:
            log.debug("load #%d superseded", token.serial)
            return
        except EmptyResultError as exc:
            if not self._loads.is_current(token):
                return
            self.phase = "empty"
            self.cards = []
            self._emit(ClearCards(), ShowError(exc.message), SetStatus(STATUS_DONE))
        except Exception as exc:
            if not self._loads.is_current(token):
                return
            mapped = map_api_error(exc, default_code="LOAD_FAILED")
            log.warning("load #%d failed [%s]: %s", token.serial, mapped.code, exc)
            self.phase = "error"
            self.cards = []
            self._emit(ClearCards(), ShowError(mapped.message), SetStatus(STATUS_ERROR))
        else:
            if not self._loads.is_current(token):
                return
            self.phase = "rendered"
            self.cards = cards
            self._emit(ShowCards(tuple(cards)), SetStatus(loaded_label(len(cards))))
        self._emit(SetControlsEnabled(True))

    # ------------------------------------------------------------------
    # State persistence
    # ------------------------------------------------------------------
    def restore_state(self) -> UIState:
        """Read the preference blob; missing or malformed data yields defaults."""
        try:
            raw = self.store.get_blob(PREFERENCES_KEY)
        except (OSError, ValueError) as exc:
            log.warning("Could not read saved preferences: %s", exc)
            return UIState()
        if not raw:
            return UIState()
        try:
            payload = json.loads(raw)
        except ValueError:
            log.info("Ignoring malformed saved preferences")
            return UIState()
        return UIState.from_payload(payload)

    def persist_state(self) -> None:
        text = json.dumps(self.state.to_payload(), ensure_ascii=False)
        try:
            self.store.set_blob(PREFERENCES_KEY, text)
        except OSError as exc:
            log.warning("Could not save preferences: %s", exc)

    @staticmethod
    def validate_query(raw_query: str) -> str:
        """Trim ``raw_query``; reject non-empty queries that are too short."""
        query = str(raw_query or "").strip()
        if 0 < len(query) < MIN_QUERY_LENGTH:
            raise QueryValidationError(QUERY_TOO_SHORT_MESSAGE, query=query)
        return query

    def _commit(self, state: UIState) -> None:
        self.state = state
        self.persist_state()

    def _emit(self, *instructions: RenderInstruction) -> None:
        batch: Sequence[RenderInstruction] = tuple(instructions)
        self.sink(batch)


__all__ = [
    "GalleryVM",
    "PREFERENCES_KEY",
    "QUERY_TOO_SHORT_MESSAGE",
    "STATUS_DONE",
    "STATUS_ERROR",
    "STATUS_IDLE",
    "STATUS_LOADING",
]
