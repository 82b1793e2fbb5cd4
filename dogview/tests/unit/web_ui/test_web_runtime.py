from __future__ import annotations

import asyncio
import json
from typing import Any, List

from dogview.adapters.dog_api_mock import DogApiMock
from dogview.adapters.dog_api_rest import DogApiRestAdapter
from dogview.adapters.storage_local import StorageLocal
from dogview.web_ui.browser_store import BrowserPreferenceStore
from dogview.web_ui.runtime import WebRuntime


class _JsResult:
    def __init__(self, value: Any) -> None:
        self.value = value

    def __await__(self):
        if False:
            yield
        return self.value


class _JsRunner:
    """Stand-in for ``ui.run_javascript`` returning a fixed value."""

    def __init__(self, value: Any = "") -> None:
        self.value = value
        self.scripts: List[str] = []

    def __call__(self, script: str) -> _JsResult:
        self.scripts.append(script)
        return _JsResult(self.value)


def test_browser_store_hydrates_then_serves_cache() -> None:
    saved = json.dumps({"limit": 20, "view": "breeds", "query": "pug"})
    runner = _JsRunner(saved)
    store = BrowserPreferenceStore(runner)

    assert store.get_blob("dogview.ui.state.v1") is None
    assert asyncio.run(store.hydrate("dogview.ui.state.v1")) == saved

    assert store.get_blob("dogview.ui.state.v1") == saved
    assert runner.scripts == ['return localStorage.getItem("dogview.ui.state.v1") || \'\';']


def test_browser_store_empty_item_is_missing() -> None:
    store = BrowserPreferenceStore(_JsRunner(""))

    assert asyncio.run(store.hydrate("k")) is None
    assert store.get_blob("k") is None


def test_browser_store_write_updates_cache_and_local_storage() -> None:
    runner = _JsRunner(None)
    store = BrowserPreferenceStore(runner)

    store.set_blob("k", '{"query": "pug"}')

    assert store.get_blob("k") == '{"query": "pug"}'
    assert runner.scripts == ['localStorage.setItem("k", "{\\"query\\": \\"pug\\"}");']


def test_runtime_offline_uses_mock_api(tmp_path) -> None:
    runtime = WebRuntime(settings_dir=str(tmp_path), offline=True, environ={})

    assert isinstance(runtime.dog_api, DogApiMock)


def test_runtime_settings_precedence_file_env_overrides(tmp_path) -> None:
    StorageLocal(root_dir=str(tmp_path)).save_user_settings(
        {"api_base_url": "https://file.example/v1", "api_key": "file-key", "request_timeout_s": 3}
    )
    environ = {"DOGVIEW_API_BASE": "https://env.example/v1", "DOGVIEW_REQUEST_TIMEOUT_S": "6"}

    runtime = WebRuntime(
        settings_dir=str(tmp_path),
        overrides={"api_base_url": None, "api_key": "cli-key"},
        environ=environ,
    )

    assert isinstance(runtime.dog_api, DogApiRestAdapter)
    assert runtime.dog_api.base_url == "https://env.example/v1"
    assert runtime.dog_api.session.api_key == "cli-key"
    assert runtime.dog_api.cfg.request_timeout_s == 6.0
    assert runtime.settings_payload()["api_key"] == "***"


def test_runtime_ignores_broken_settings_file(tmp_path) -> None:
    (tmp_path / StorageLocal.SETTINGS_FILE).write_text('{"unknown": 1}', encoding="utf-8")

    runtime = WebRuntime(settings_dir=str(tmp_path), environ={})

    assert runtime.settings_payload()["api_base_url"] == "https://api.thedogapi.com/v1"
    assert runtime.settings_payload()["api_key"] == ""


def test_runtime_builds_one_view_model_per_client(tmp_path) -> None:
    runtime = WebRuntime(settings_dir=str(tmp_path), offline=True, environ={})
    store = BrowserPreferenceStore(_JsRunner(""))
    batches: list = []

    first = runtime.new_gallery_vm(store=store, sink=batches.append)
    second = runtime.new_gallery_vm(store=store, sink=batches.append)
    asyncio.run(first.load_view())

    assert first is not second
    assert len(first.cards) == 12
    assert second.cards == []


def test_runtime_close_releases_http_session(tmp_path) -> None:
    runtime = WebRuntime(settings_dir=str(tmp_path), environ={})
    closed = []
    runtime.dog_api.session.session.close = lambda: closed.append(True)  # type: ignore[union-attr]

    runtime.close()

    assert closed == [True]


class _FailingJsRunner(_JsRunner):
    def __call__(self, script: str) -> _JsResult:
        self.scripts.append(script)
        raise TimeoutError("JavaScript did not respond within 1.0 s")


def test_failed_hydrate_still_runs_initial_load_with_defaults(tmp_path) -> None:
    runtime = WebRuntime(settings_dir=str(tmp_path), offline=True, environ={})
    store = BrowserPreferenceStore(_FailingJsRunner())
    batches: list = []
    vm = runtime.new_gallery_vm(store=store, sink=batches.append)

    async def page_start() -> None:
        assert await store.hydrate("dogview.ui.state.v1") is None
        await vm.initial_load()

    asyncio.run(page_start())

    assert store.get_blob("dogview.ui.state.v1") is None
    assert (vm.state.limit, vm.state.view, vm.state.query) == (12, "images", "")
    assert len(vm.cards) == 12
