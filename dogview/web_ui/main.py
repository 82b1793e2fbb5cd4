"""NiceGUI entrypoint for the dogview web UI."""

from __future__ import annotations

import argparse
import logging
from typing import Any, Awaitable, Dict, Optional, Sequence

from nicegui import Client, app, ui

from dogview.domain.entities import LIMIT_OPTIONS
from dogview.utils.logging import configure_root, level_name
from dogview.viewmodels.gallery_vm import PREFERENCES_KEY
from dogview.viewmodels.render import (
    CardView,
    ClearCards,
    HideError,
    RenderInstruction,
    SetControlsEnabled,
    SetStatus,
    ShowCards,
    ShowError,
    ShowSkeleton,
    SyncControls,
)
from dogview.web_ui.browser_store import BrowserPreferenceStore
from dogview.web_ui.runtime import WebRuntime

LOGGER = logging.getLogger(__name__)


def _install_theme() -> None:
    """Install global CSS tokens for the gallery page."""
    ui.add_head_html(
        """
<style>
:root {
  --dog-bg: #f7f3ee;
  --dog-card: #ffffff;
  --dog-border: #e3d9cc;
  --dog-accent: #a0522d;
  --dog-muted: #6b5b4b;
}
body { background: var(--dog-bg); }
.dog-page { max-width: 1200px; margin: 0 auto; padding: 16px; }
.dog-grid {
  display: grid;
  grid-template-columns: repeat(auto-fill, minmax(240px, 1fr));
  gap: 16px;
  width: 100%;
}
.dog-card { background: var(--dog-card); border: 1px solid var(--dog-border); border-radius: 12px; }
.dog-card img { aspect-ratio: 4 / 3; object-fit: cover; }
.dog-meta { color: var(--dog-muted); font-size: 13px; }
.dog-status.is-loading { color: var(--dog-accent); }
</style>
        """
    )


def _alt_prop(text: str) -> str:
    """Return an ``alt="..."`` prop string; the value never contains a double quote."""
    cleaned = " ".join(str(text or "").replace('"', "'").split())
    return f'alt="{cleaned}"'


class GalleryPanel:
    """Widget references for one client plus the render-instruction sink."""

    def __init__(self) -> None:
        self.syncing = False
        self.grid: Any = None
        self.error: Any = None
        self.status: Any = None
        self.query: Any = None
        self.limit: Any = None
        self.tabs: Any = None
        self.controls: list = []

    def __call__(self, batch: Sequence[RenderInstruction]) -> None:
        for instruction in batch:
            self.apply(instruction)

    def apply(self, instruction: RenderInstruction) -> None:
        if isinstance(instruction, ShowCards):
            self._show_cards(instruction.cards)
        elif isinstance(instruction, ClearCards):
            self.grid.clear()
        elif isinstance(instruction, ShowSkeleton):
            self.grid.clear()
            with self.grid:
                for _ in range(instruction.count):
                    ui.skeleton(height="260px").classes("dog-card")
        elif isinstance(instruction, ShowError):
            self.error.set_text(instruction.message)
            self.error.set_visibility(True)
        elif isinstance(instruction, HideError):
            self.error.set_visibility(False)
        elif isinstance(instruction, SetStatus):
            self.status.set_text(instruction.text)
            if instruction.loading:
                self.status.classes(add="is-loading")
            else:
                self.status.classes(remove="is-loading")
        elif isinstance(instruction, SetControlsEnabled):
            for control in self.controls:
                control.set_enabled(instruction.enabled)
        elif isinstance(instruction, SyncControls):
            self.syncing = True
            try:
                self.query.set_value(instruction.query)
                self.limit.set_value(instruction.limit)
                self.tabs.set_value(instruction.view)
            finally:
                self.syncing = False

    def _show_cards(self, cards: Sequence[CardView]) -> None:
        self.grid.clear()
        with self.grid:
            for card in cards:
                with ui.card().classes("dog-card q-pa-none"):
                    if card.image_url:
                        ui.image(card.image_url).props(_alt_prop(card.alt)).classes("w-full")
                    with ui.column().classes("q-pa-sm q-gutter-xs"):
                        ui.label(card.title).classes("text-subtitle1")
                        if card.meta:
                            ui.label(card.meta).classes("dog-meta")
                        if card.more_url:
                            ui.link("More info", card.more_url, new_tab=True)


def _build_ui(runtime: WebRuntime) -> None:
    """Register the NiceGUI pages for the runtime."""

    @ui.page("/")
    async def index(client: Client) -> None:
        panel = GalleryPanel()
        store = BrowserPreferenceStore(ui.run_javascript)
        vm = runtime.new_gallery_vm(store=store, sink=panel)

        async def on_submit() -> None:
            await vm.cmd_submit_search(str(panel.query.value or ""))

        # Change events fire synchronously inside SyncControls, so the guard
        # must run before a coroutine is created.
        def on_view_change(e: Any) -> Optional[Awaitable[None]]:
            if panel.syncing:
                return None
            return vm.cmd_set_view(str(e.value))

        def on_limit_change(e: Any) -> Optional[Awaitable[None]]:
            if panel.syncing or e.value is None:
                return None
            return vm.cmd_set_limit(int(e.value))

        with ui.column().classes("dog-page w-full q-gutter-md"):
            with ui.row().classes("w-full items-center justify-between"):
                ui.label("Dog Gallery").classes("text-h4")
                panel.status = ui.label("Idle").classes("dog-status text-caption")
            with ui.tabs(value="images", on_change=on_view_change) as panel.tabs:
                ui.tab("images", label="Images")
                ui.tab("breeds", label="Breeds")
            with ui.row().classes("w-full items-center q-gutter-sm"):
                panel.query = (
                    ui.input(placeholder="Search breed (e.g. pug)")
                    .props("dense outlined")
                    .classes("w-64")
                    .on("keydown.enter", on_submit)
                )
                search_btn = ui.button("Search", on_click=on_submit, color="primary")
                clear_btn = ui.button("Clear", on_click=vm.cmd_clear_search)
                panel.limit = ui.select(
                    list(LIMIT_OPTIONS), value=vm.state.limit, label="Results", on_change=on_limit_change
                ).props("dense outlined").classes("w-28")
                reload_btn = ui.button("Reload", on_click=vm.cmd_reload, icon="refresh")
            panel.controls = [panel.query, search_btn, clear_btn, panel.limit, reload_btn]
            panel.error = ui.label("").classes("text-negative")
            panel.error.set_visibility(False)
            panel.grid = ui.element("div").classes("dog-grid")

        await client.connected()
        client.on_disconnect(vm.cancel_pending)
        await store.hydrate(PREFERENCES_KEY)
        await vm.initial_load()


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the dogview NiceGUI web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--api-base", default=None, help="TheDogAPI base URL")
    parser.add_argument("--api-key", default=None, help="TheDogAPI key (x-api-key header)")
    parser.add_argument("--settings-dir", default=None, help="Directory holding user_settings.json")
    parser.add_argument("--offline", action="store_true", help="Serve built-in sample data")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args(argv)


def _overrides_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    return {
        "api_base_url": args.api_base,
        "api_key": args.api_key,
        "debug_logging": True if args.debug else None,
    }


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args(argv)
    level = configure_root()
    runtime = WebRuntime(
        settings_dir=args.settings_dir,
        overrides=_overrides_from_args(args),
        offline=args.offline,
    )
    if args.smoke_test:
        payload = runtime.settings_payload()
        print("web-smoke-ok", payload["api_base_url"])
        return
    LOGGER.info("Serving dogview on http://%s:%d (log level %s)", args.host, args.port, level_name(level))
    _install_theme()
    _build_ui(runtime)
    app.on_shutdown(runtime.close)
    ui.run(
        host=args.host,
        port=args.port,
        title="Dog Gallery",
        reload=args.reload,
        show=False,
    )


if __name__ == "__main__":
    main()
