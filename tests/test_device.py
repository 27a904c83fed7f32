"""Tests for solardevice.device: the Device facade over a stubbed host."""

from __future__ import annotations

import dataclasses
from typing import Any, Optional
from unittest.mock import MagicMock, patch

import pytest

from solardevice.device import Device, DeviceProfile, has_leanback_category
from solardevice.host import StaticHost
from solardevice.platforms import LEANBACK_LAUNCHER, Platform

LEANBACK_ARGS = {"androidIntent": {"categories": [LEANBACK_LAUNCHER]}}


def _device(launch_arguments: Optional[dict[str, Any]] = None, **info: Any) -> Device:
    return Device(StaticHost(info), launch_arguments=launch_arguments)


# ---------------------------------------------------------------------------
# Raw lookups
# ---------------------------------------------------------------------------


class TestRawLookups:
    def test_get_platform_returns_host_value(self) -> None:
        assert _device(platform="tvos").get_platform() == "tvos"

    def test_get_platform_unknown_tag_passes_through(self) -> None:
        assert _device(platform="somethingNew").get_platform() == "somethingNew"

    def test_missing_value_is_none(self) -> None:
        device = _device()
        assert device.get_platform() is None
        assert device.get_environment() is None
        assert device.get_model() is None

    def test_each_getter_reads_its_key(self) -> None:
        device = _device(
            environment="simulator",
            architectureInfo="x86_64",
            model="iPhone",
            targetAppStore="apple",
            androidApiLevel="30",
            GL_RENDERER="Apple M1",
        )
        assert device.get_environment() == "simulator"
        assert device.get_architecture() == "x86_64"
        assert device.get_model() == "iPhone"
        assert device.get_target_store() == "apple"
        assert device.get_api_level() == "30"
        assert device.get_gpu_renderer() == "Apple M1"

    def test_params_kept_verbatim(self) -> None:
        params = {"debug": True}
        device = Device(StaticHost({}), params=params)
        assert device.params is params

    def test_params_default_to_empty_dict(self) -> None:
        assert Device(StaticHost({})).params == {}

    def test_default_host_is_process_wide(self) -> None:
        host = StaticHost({"platform": "ios"})
        with patch("solardevice.device.get_host", return_value=host):
            assert Device().host is host


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------


class TestEnvironment:
    def test_real_device(self) -> None:
        device = _device(environment="device")
        assert device.is_real() is True
        assert device.is_simulator() is False

    def test_simulator(self) -> None:
        device = _device(environment="simulator")
        assert device.is_real() is False
        assert device.is_simulator() is True

    def test_web_by_platform(self) -> None:
        assert _device(platform="html5").is_web() is True

    def test_web_by_environment(self) -> None:
        assert _device(platform="win32", environment="browser").is_web() is True

    def test_not_web(self) -> None:
        assert _device(platform="ios", environment="device").is_web() is False


# ---------------------------------------------------------------------------
# Platforms
# ---------------------------------------------------------------------------


class TestPlatforms:
    def test_is_ios(self) -> None:
        assert _device(platform="ios").is_ios() is True
        assert _device(platform="android").is_ios() is False
        assert _device(platform="IOS").is_ios() is False

    @pytest.mark.parametrize("tag", ["android", "ANDROID", "Android"])
    def test_is_android_case_insensitive(self, tag: str) -> None:
        assert _device(platform=tag).is_android() is True

    def test_is_android_missing_platform(self) -> None:
        assert _device().is_android() is False

    def test_desktop_platform_checks(self) -> None:
        assert _device(platform="macos").is_osx() is True
        assert _device(platform="win32").is_windows() is True
        assert _device(platform="linux").is_linux() is True
        assert _device(platform="ios").is_osx() is False

    def test_switch_is_console(self) -> None:
        device = _device(platform="nx64")
        assert device.is_nintendo_switch() is True
        assert device.is_console() is True
        assert _device(platform="android").is_console() is False

    @pytest.mark.parametrize("tag", ["macos", "win32", "linux"])
    def test_is_desktop_by_platform(self, tag: str) -> None:
        assert _device(platform=tag).is_desktop() is True

    def test_is_desktop_by_model(self) -> None:
        assert _device(platform="html5", model="Desktop").is_desktop() is True

    @pytest.mark.parametrize("tag", ["ios", "android"])
    def test_mobile_is_not_desktop(self, tag: str) -> None:
        device = _device(platform=tag, model="Phone")
        assert device.is_desktop() is False
        assert device.is_mobile() is True

    def test_tvos_is_not_mobile(self) -> None:
        assert _device(platform="tvos").is_mobile() is False


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class TestModels:
    def test_is_ipad(self) -> None:
        assert _device(model="iPad").is_ipad() is True
        assert _device(model="iPhone").is_ipad() is False

    @pytest.mark.parametrize("model", ["Kindle Fire", "WFJWI", "KFTT", "KF"])
    def test_is_kindle(self, model: str) -> None:
        assert _device(model=model).is_kindle() is True

    @pytest.mark.parametrize("model", ["Pixel 7", "kfTT", "AKF", ""])
    def test_is_not_kindle(self, model: str) -> None:
        assert _device(model=model).is_kindle() is False

    def test_kindle_missing_model(self) -> None:
        assert _device().is_kindle() is False


# ---------------------------------------------------------------------------
# TV
# ---------------------------------------------------------------------------


class TestTV:
    def test_apple_tv(self) -> None:
        device = _device(platform="tvos")
        assert device.is_apple_tv() is True
        assert device.is_tv() is True

    def test_amazon_tv(self) -> None:
        device = _device(platform="android", model="AFTB")
        assert device.is_amazon_tv() is True
        assert device.is_tv() is True

    def test_android_tv_on_real_device(self) -> None:
        device = _device(LEANBACK_ARGS, platform="android", environment="device")
        assert device.is_android_tv() is True
        assert device.is_tv() is True

    def test_android_tv_requires_real_device(self) -> None:
        device = _device(LEANBACK_ARGS, platform="android", environment="simulator")
        assert device.is_android_tv() is False

    def test_android_tv_without_launch_arguments(self) -> None:
        device = _device(platform="android", environment="device")
        assert device.is_android_tv() is False
        assert device.is_tv() is False

    def test_android_tv_other_categories(self) -> None:
        args = {"androidIntent": {"categories": ["android.intent.category.LAUNCHER"]}}
        device = _device(args, environment="device")
        assert device.is_android_tv() is False

    def test_android_tv_flag_fixed_at_construction(self) -> None:
        args = {"androidIntent": {"categories": [LEANBACK_LAUNCHER]}}
        device = _device(args, environment="device")
        args["androidIntent"]["categories"].clear()
        assert device.is_android_tv() is True


class TestHasLeanbackCategory:
    def test_none(self) -> None:
        assert has_leanback_category(None) is False

    def test_missing_intent(self) -> None:
        assert has_leanback_category({"url": "game://"}) is False

    def test_intent_not_a_mapping(self) -> None:
        assert has_leanback_category({"androidIntent": "oops"}) is False

    def test_missing_categories(self) -> None:
        assert has_leanback_category({"androidIntent": {}}) is False

    def test_categories_not_a_list(self) -> None:
        assert has_leanback_category({"androidIntent": {"categories": 5}}) is False

    def test_leanback_among_others(self) -> None:
        args = {
            "androidIntent": {
                "categories": ["android.intent.category.LAUNCHER", LEANBACK_LAUNCHER]
            }
        }
        assert has_leanback_category(args) is True


# ---------------------------------------------------------------------------
# Architecture
# ---------------------------------------------------------------------------


class TestArchitecture:
    @pytest.mark.parametrize("arch", ["i386", "x86_64", "ppc", "ppc64"])
    def test_osx_architectures(self, arch: str) -> None:
        device = _device(architectureInfo=arch)
        assert device.architecture_is_osx() is True
        assert device.architecture_is_windows() is False

    @pytest.mark.parametrize("arch", ["x86", "x64", "IA64", "ARM"])
    def test_windows_architectures(self, arch: str) -> None:
        device = _device(architectureInfo=arch)
        assert device.architecture_is_windows() is True
        assert device.architecture_is_osx() is False

    def test_unknown_architecture(self) -> None:
        device = _device(architectureInfo="arm64")
        assert device.architecture_is_osx() is False
        assert device.architecture_is_windows() is False


# ---------------------------------------------------------------------------
# GPU captures
# ---------------------------------------------------------------------------


class TestGPUCaptures:
    def test_listed_renderer(self) -> None:
        device = _device(GL_RENDERER="Radeon RX560")
        assert device.will_gpu_have_issues_with_captures() is True

    def test_unlisted_renderer_has_no_answer(self) -> None:
        device = _device(GL_RENDERER="Apple M2")
        assert device.will_gpu_have_issues_with_captures() is None

    def test_missing_renderer_has_no_answer(self) -> None:
        assert _device().will_gpu_have_issues_with_captures() is None

    def test_extra_denylist_entries(self) -> None:
        device = Device(
            StaticHost({"GL_RENDERER": "Mali-G52"}), capture_denylist=["Mali-G52"]
        )
        assert device.will_gpu_have_issues_with_captures() is True


# ---------------------------------------------------------------------------
# Steam
# ---------------------------------------------------------------------------


class TestIsSteam:
    @pytest.mark.parametrize("tag", ["ios", "android", "tvos", "html5", "nx64"])
    def test_non_desktop_skips_filesystem(self, tag: str) -> None:
        host = MagicMock()
        host.get_info.side_effect = lambda key: tag if key == "platform" else None
        device = Device(host)
        with patch("builtins.open") as mock_open_fn:
            assert device.is_steam() is False
        mock_open_fn.assert_not_called()
        host.resource_directory.assert_not_called()

    def test_missing_platform_is_false(self) -> None:
        assert _device().is_steam() is False

    def test_windows_library_present(self, tmp_path) -> None:
        resources = tmp_path / "Resources"
        resources.mkdir()
        (tmp_path / "steam_api.dll").write_bytes(b"")
        host = StaticHost(
            {"platform": "win32"}, resource_dir=str(resources), path_separator="/"
        )
        assert Device(host).is_steam() is True

    def test_windows_library_absent(self, tmp_path) -> None:
        resources = tmp_path / "Resources"
        resources.mkdir()
        host = StaticHost(
            {"platform": "win32"}, resource_dir=str(resources), path_separator="/"
        )
        assert Device(host).is_steam() is False

    def test_osx_library_in_plugins(self, tmp_path) -> None:
        corona = tmp_path / "Contents" / "Resources" / "Corona"
        corona.mkdir(parents=True)
        plugins = tmp_path / "Contents" / "Plugins"
        plugins.mkdir()
        (plugins / "libsteam_api.dylib").write_bytes(b"")
        host = StaticHost(
            {"platform": "macos"}, resource_dir=str(corona), path_separator="/"
        )
        assert Device(host).is_steam() is True

    def test_linux_library_present(self, tmp_path) -> None:
        resources = tmp_path / "Resources"
        resources.mkdir()
        (tmp_path / "libsteam_api.so").write_bytes(b"")
        host = StaticHost(
            {"platform": "linux"}, resource_dir=str(resources), path_separator="/"
        )
        assert Device(host).is_steam() is True

    def test_enum_platform_value_counts_as_desktop(self, tmp_path) -> None:
        resources = tmp_path / "Resources"
        resources.mkdir()
        (tmp_path / "steam_api.dll").write_bytes(b"")
        host = StaticHost(
            {"platform": Platform.WINDOWS},
            resource_dir=str(resources),
            path_separator="/",
        )
        assert Device(host).is_steam() is True

    def test_empty_separator_uses_os_sep(self, tmp_path) -> None:
        resources = tmp_path / "Resources"
        resources.mkdir()
        (tmp_path / "libsteam_api.so").write_bytes(b"")
        host = StaticHost(
            {"platform": "linux"}, resource_dir=str(resources), path_separator=""
        )
        assert Device(host).is_steam() is True

    def test_desktop_without_resource_directory(self) -> None:
        host = StaticHost({"platform": "win32"})
        with patch("builtins.open") as mock_open_fn:
            assert Device(host).is_steam() is False
        mock_open_fn.assert_not_called()


# ---------------------------------------------------------------------------
# profile
# ---------------------------------------------------------------------------


class TestProfile:
    def test_profile_collects_values(self) -> None:
        device = _device(
            platform="android",
            environment="device",
            model="KFMUWI",
            targetAppStore="amazon",
            GL_RENDERER="Mali-G52",
        )
        profile = device.profile()
        assert isinstance(profile, DeviceProfile)
        assert profile.platform == "android"
        assert profile.target_store == "amazon"
        assert profile.is_real is True
        assert profile.is_mobile is True
        assert profile.is_kindle is True
        assert profile.is_desktop is False
        assert profile.is_steam is False
        assert profile.gpu_capture_issues is None

    def test_profile_covers_every_predicate(self) -> None:
        device = _device(
            LEANBACK_ARGS,
            platform="android",
            environment="device",
            architectureInfo="x64",
        )
        profile = device.profile()
        assert profile.is_android is True
        assert profile.is_android_tv is True
        assert profile.is_tv is True
        assert profile.is_apple_tv is False
        assert profile.is_amazon_tv is False
        assert profile.is_ios is False
        assert profile.is_osx is False
        assert profile.is_windows is False
        assert profile.is_linux is False
        assert profile.is_nintendo_switch is False
        assert profile.is_ipad is False
        assert profile.architecture_is_windows is True
        assert profile.architecture_is_osx is False

    def test_profile_fields_match_device_predicates(self) -> None:
        names = {f.name for f in dataclasses.fields(DeviceProfile)}
        predicates = {
            name
            for name in dir(Device)
            if name.startswith(("is_", "architecture_is_"))
        }
        assert predicates <= names

    def test_profile_is_frozen(self) -> None:
        profile = _device(platform="ios").profile()
        with pytest.raises(AttributeError):
            profile.platform = "android"  # type: ignore[misc]
