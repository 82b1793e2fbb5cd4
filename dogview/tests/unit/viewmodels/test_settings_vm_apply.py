from __future__ import annotations

import pytest

from dogview.domain.ports import DEFAULT_API_BASE
from dogview.viewmodels.settings_vm import SettingsConfig, SettingsVM, default_settings_payload


def test_apply_dict_coerces_values() -> None:
    vm = SettingsVM(config=SettingsConfig())

    vm.apply_dict(
        {
            "api_base_url": " https://dogs.example/v1/ ",
            "api_key": "  abc ",
            "request_timeout_s": "2.5",
            "debug_logging": "yes",
        }
    )

    assert vm.to_dict() == {
        "api_base_url": "https://dogs.example/v1",
        "api_key": "abc",
        "request_timeout_s": 2.5,
        "debug_logging": True,
    }


def test_apply_dict_rejects_unknown_keys() -> None:
    vm = SettingsVM(config=SettingsConfig())

    with pytest.raises(ValueError, match="Unsupported settings keys: poll_interval_ms"):
        vm.apply_dict({"poll_interval_ms": 500})


@pytest.mark.parametrize(
    "payload",
    [
        {"api_base_url": "ftp://dogs.example"},
        {"request_timeout_s": 0},
        {"request_timeout_s": "soon"},
        {"request_timeout_s": True},
    ],
)
def test_apply_dict_rejects_invalid_values(payload) -> None:
    vm = SettingsVM(config=SettingsConfig())

    with pytest.raises(ValueError):
        vm.apply_dict(payload)


def test_empty_base_url_resets_to_default() -> None:
    vm = SettingsVM(config=SettingsConfig(api_base_url="https://other.example"))

    vm.api_base_url = "  "

    assert vm.api_base_url == DEFAULT_API_BASE


def test_apply_env_overrides_only_present_variables() -> None:
    vm = SettingsVM(config=SettingsConfig(api_key="from-file"))

    vm.apply_env({"DOGVIEW_API_BASE": "http://localhost:9000/v1/", "DOGVIEW_REQUEST_TIMEOUT_S": "4", "DOGVIEW_API_KEY": ""})

    assert vm.api_base_url == "http://localhost:9000/v1"
    assert vm.request_timeout_s == 4.0
    assert vm.api_key == "from-file"


def test_default_settings_payload_shape(monkeypatch) -> None:
    monkeypatch.delenv("DOGVIEW_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DOGVIEW_DEBUG", raising=False)
    monkeypatch.delenv("DOGVIEW_DEBUG_LOGGING", raising=False)

    assert default_settings_payload() == {
        "api_base_url": DEFAULT_API_BASE,
        "api_key": "",
        "request_timeout_s": 10,
        "debug_logging": False,
    }
