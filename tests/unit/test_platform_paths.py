from pathlib import Path

from emoji_cache_scanner.utils.platform_paths import resolve_app_data_roots

HOME = Path("/home/tester")


def test_windows_uses_environment() -> None:
    env = {"APPDATA": "/env/roaming", "LOCALAPPDATA": "/env/local"}

    roots = resolve_app_data_roots(env=env, system="Windows", home=HOME)

    assert roots.roaming == Path("/env/roaming")
    assert roots.local == Path("/env/local")


def test_windows_falls_back_to_home() -> None:
    roots = resolve_app_data_roots(env={}, system="Windows", home=HOME)

    assert roots.roaming == HOME / "AppData" / "Roaming"
    assert roots.local == HOME / "AppData" / "Local"
    assert roots.documents == HOME / "Documents"
    assert roots.downloads == HOME / "Downloads"


def test_macos_uses_library_folders() -> None:
    roots = resolve_app_data_roots(env={"APPDATA": "/ignored"}, system="Darwin", home=HOME)

    assert roots.roaming == HOME / "Library" / "Application Support"
    assert roots.local == HOME / "Library" / "Caches"


def test_linux_follows_xdg() -> None:
    with_env = resolve_app_data_roots(
        env={"XDG_CONFIG_HOME": "/xdg/config", "XDG_CACHE_HOME": "/xdg/cache"},
        system="Linux",
        home=HOME,
    )
    fallback = resolve_app_data_roots(env={}, system="Linux", home=HOME)

    assert with_env.roaming == Path("/xdg/config")
    assert with_env.local == Path("/xdg/cache")
    assert fallback.roaming == HOME / ".config"
    assert fallback.local == HOME / ".cache"
