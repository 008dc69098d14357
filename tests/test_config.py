"""Tests for ContextVar-based highlight configuration.

Validates defaults, validation errors, thread isolation and context
manager behavior.
"""

from threading import Thread

import pytest

from rainbowtags import (
    RAINBOW_COLORS,
    Channel,
    ConfigError,
    ContentKind,
    HighlightConfig,
    RainbowTagsError,
    config_context,
    get_config,
    reset_config,
    scan,
    set_config,
)


class TestHighlightConfigDataclass:
    """Test HighlightConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = HighlightConfig()
        assert config.palette == RAINBOW_COLORS
        assert config.palette_size == 6
        assert config.delimiter_opacity == pytest.approx(0.70)
        assert config.debounce_seconds == pytest.approx(0.1)
        assert config.raw_text_elements == frozenset({"script", "style"})
        assert "img" in config.void_elements
        assert len(config.void_elements) == 14

    def test_immutability(self) -> None:
        config = HighlightConfig()
        with pytest.raises(AttributeError):
            config.palette = ("#000",)  # type: ignore[misc]

    def test_intensity_per_channel(self) -> None:
        config = HighlightConfig(delimiter_opacity=0.5)
        assert config.intensity_for(Channel.NAME) == 1.0
        assert config.intensity_for(Channel.DELIMITER) == 0.5


class TestValidation:
    @pytest.mark.parametrize(
        "kwargs,field",
        [
            ({"palette": ()}, "palette"),
            ({"delimiter_opacity": 1.5}, "delimiter_opacity"),
            ({"delimiter_opacity": -0.1}, "delimiter_opacity"),
            ({"debounce_seconds": -1}, "debounce_seconds"),
        ],
    )
    def test_invalid_values(self, kwargs: dict, field: str) -> None:
        with pytest.raises(ConfigError) as exc_info:
            HighlightConfig(**kwargs)
        assert exc_info.value.field == field
        assert field in str(exc_info.value)

    def test_config_error_is_package_error(self) -> None:
        assert issubclass(ConfigError, RainbowTagsError)


class TestFromDict:
    def test_unknown_keys_ignored(self) -> None:
        config = HighlightConfig.from_dict({"debounce_seconds": 0.5, "unknown": True})
        assert config.debounce_seconds == 0.5

    def test_sequences_normalized(self) -> None:
        config = HighlightConfig.from_dict(
            {"palette": ["#111", "#222"], "raw_text_elements": ["Script", "TEXTAREA"]}
        )
        assert config.palette == ("#111", "#222")
        assert config.raw_text_elements == frozenset({"script", "textarea"})

    def test_empty_dict_is_default(self) -> None:
        assert HighlightConfig.from_dict({}) == HighlightConfig()


class TestContextVarFunctions:
    def teardown_method(self) -> None:
        reset_config()

    def test_default_config(self) -> None:
        assert get_config() == HighlightConfig()

    def test_set_and_get(self) -> None:
        custom = HighlightConfig(palette=("#000", "#fff"))
        set_config(custom)
        assert get_config() is custom

    def test_reset(self) -> None:
        set_config(HighlightConfig(palette=("#000",)))
        reset_config()
        assert get_config().palette_size == 6

    def test_scan_uses_active_config(self) -> None:
        text = "<a></a><b></b><c></c>"
        set_config(HighlightConfig(palette=("#000", "#fff")))
        colors = {s.color_index for s in scan(text, ContentKind.MARKUP)}
        assert colors == {0, 1}


class TestConfigContext:
    def test_restores_previous(self) -> None:
        before = get_config()
        with config_context(HighlightConfig(palette=("#000",))) as config:
            assert get_config() is config
        assert get_config() is before

    def test_restores_on_exception(self) -> None:
        before = get_config()
        with pytest.raises(ValueError):
            with config_context(HighlightConfig(palette=("#000",))):
                raise ValueError("boom")
        assert get_config() is before


class TestThreadIsolation:
    """Test thread-local configuration isolation."""

    def test_thread_isolation(self) -> None:
        """Each thread sees the config it set; the main thread is unaffected."""
        results: dict[int, int] = {}

        def worker(thread_id: int, size: int) -> None:
            set_config(HighlightConfig(palette=tuple("#000" for _ in range(size))))
            results[thread_id] = get_config().palette_size

        threads = [Thread(target=worker, args=(i, i + 1)) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {0: 1, 1: 2, 2: 3, 3: 4}
        assert get_config().palette_size == 6
