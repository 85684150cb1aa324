"""Tests for ContextVar-based scan configuration.

Validates thread isolation, context manager behavior, and that rules and
cursors pick up their defaults from the active config.
"""

from threading import Thread

import pytest

from slicewise import (
    BlockCommentRule,
    Cursor,
    PragmaMacroRule,
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_comments,
    scan_config_context,
    set_scan_config,
)


class TestScanConfigDataclass:
    """Test ScanConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ScanConfig()
        assert config.auto_trim is True
        assert config.inline_comment_marker == "//"
        assert config.block_comment_open == "/*"
        assert config.block_comment_close == "*/"
        assert config.pragma_keyword == "#pragma"
        assert config.pragma_macro_keyword == "_Pragma"

    def test_immutability(self) -> None:
        config = ScanConfig()
        with pytest.raises(AttributeError):
            config.auto_trim = False  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ScanConfig.from_dict({"auto_trim": False, "pragma_keyword": "#PRAGMA", "other": 1})
        assert config.auto_trim is False
        assert config.pragma_keyword == "#PRAGMA"
        assert config.block_comment_open == "/*"

    def test_from_empty_dict(self) -> None:
        assert ScanConfig.from_dict({}) == ScanConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def setup_method(self) -> None:
        reset_scan_config()

    def teardown_method(self) -> None:
        reset_scan_config()

    def test_get_returns_default(self) -> None:
        assert get_scan_config() == ScanConfig()

    def test_set_and_reset(self) -> None:
        custom = ScanConfig(auto_trim=False)
        set_scan_config(custom)
        assert get_scan_config() is custom
        reset_scan_config()
        assert get_scan_config().auto_trim is True

    def test_context_manager_restores(self) -> None:
        with scan_config_context(ScanConfig(inline_comment_marker="#")):
            assert get_scan_config().inline_comment_marker == "#"
        assert get_scan_config().inline_comment_marker == "//"

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with scan_config_context(ScanConfig(auto_trim=False)):
                raise RuntimeError("boom")
        assert get_scan_config().auto_trim is True

    def test_nested_contexts(self) -> None:
        with scan_config_context(ScanConfig(pragma_keyword="#a")):
            with scan_config_context(ScanConfig(pragma_keyword="#b")):
                assert get_scan_config().pragma_keyword == "#b"
            assert get_scan_config().pragma_keyword == "#a"


class TestConfigDrivesDefaults:
    def test_scanner_uses_configured_markers(self) -> None:
        config = ScanConfig(
            inline_comment_marker="--",
            block_comment_open="{-",
            block_comment_close="-}",
        )
        with scan_config_context(config):
            units = scan_comments("x = 1 -- note\n{- block -}")
        assert [u.text for u in units] == [" note", "block"]

    def test_rules_capture_config_at_construction(self) -> None:
        with scan_config_context(ScanConfig(block_comment_open="(*", block_comment_close="*)")):
            rule = BlockCommentRule()
        assert rule.apply("(* pascal *)", iter(())).text == "pascal"
        assert rule.apply("/* c */", iter(())) is None

    def test_macro_keyword(self) -> None:
        with scan_config_context(ScanConfig(pragma_macro_keyword="__pragma")):
            rule = PragmaMacroRule()
        assert rule.apply("__pragma(warning(disable: 4996))", iter(())).text == "warning(disable: 4996)"

    def test_cursor_auto_trim(self) -> None:
        with scan_config_context(ScanConfig(auto_trim=False)):
            assert Cursor("x").auto_trim is False
        assert Cursor("x").auto_trim is True


class TestThreadIsolation:
    def test_threads_see_own_config(self) -> None:
        results: dict[str, str] = {}

        def worker(name: str, marker: str) -> None:
            set_scan_config(ScanConfig(inline_comment_marker=marker))
            results[name] = scan_comments(f"code {marker} {name}")[0].text

        threads = [
            Thread(target=worker, args=("hash", "#")),
            Thread(target=worker, args=("dash", "--")),
            Thread(target=worker, args=("semi", ";")),
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {"hash": " hash", "dash": " dash", "semi": " semi"}
        assert get_scan_config().inline_comment_marker == "//"
