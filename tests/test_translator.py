"""Tests for the translation pipeline."""
import json

import pytest

from translation_bridge.config import BridgeConfig
from translation_bridge.registry import FrameworkRegistry
from translation_bridge.translator.translator import Translator

BUTTON_HTML = '<a class="btn btn-primary" href="/x">Go</a>'
HEADING_JSON = json.dumps([{
    "id": "w1",
    "elType": "widget",
    "widgetType": "heading",
    "settings": {"title": "Hello", "header_size": "h2"},
    "elements": [],
}])
DEEP_JSON = "[" * 5000 + "]" * 5000


class BrokenConverter:
    def convert(self, components):
        raise ValueError("cannot render")


class RunawayConverter:
    def convert(self, components):
        raise RecursionError("maximum recursion depth exceeded")


class BrokenMappingEngine:
    def map(self, component, source_framework, target_framework):
        raise RuntimeError("boom")


@pytest.fixture
def registry():
    return FrameworkRegistry()


@pytest.fixture
def translator(registry):
    return Translator(registry=registry, config=BridgeConfig())


@pytest.fixture
def parse_calls(registry, monkeypatch):
    """Record every call to the bootstrap parser."""
    parser = registry.parsers.create("bootstrap")
    original = parser.parse
    calls = []

    def spy(content):
        calls.append(content)
        return original(content)

    monkeypatch.setattr(parser, "parse", spy)
    return calls


class TestTranslate:
    """Test Translator.translate."""

    def test_bootstrap_button_to_elementor(self, translator):
        """Test the reference button example end to end."""
        output = translator.translate(BUTTON_HTML, "bootstrap", "elementor")

        widget = json.loads(output)[0]["elements"][0]["elements"][0]
        assert widget["widgetType"] == "button"
        assert widget["settings"]["text"] == "Go"
        assert widget["settings"]["link"]["url"] == "/x"

        stats = translator.get_stats()
        assert translator.last_success is True
        assert stats["total_components"] == 1
        assert stats["successful"] == 1
        assert stats["failed"] == 0
        assert stats["avg_confidence"] >= 0.85
        assert translator.get_warnings() == []
        assert translator.get_errors() == []

    def test_wpbakery_button_to_bootstrap(self, translator):
        """Test a WPBakery button keeps its decoded link."""
        output = translator.translate(
            '[vc_btn title="Buy" link="url:https%3A%2F%2Fshop.example.com|title:Buy"]', "wpbakery", "bootstrap"
        )

        assert output.startswith('<a class="btn btn-primary" href="https://shop.example.com"')
        assert output.endswith(">Buy</a>")

    def test_aliases_are_accepted(self, translator):
        """Test framework names are resolved before lookup."""
        assert translator.translate(BUTTON_HTML, "Bootstrap", " ELEMENTOR ") is not None

    def test_same_framework(self, translator):
        """Test identical source and target are rejected."""
        assert translator.translate(BUTTON_HTML, "bootstrap", "bootstrap") is None

        errors = translator.get_errors()
        assert translator.last_success is False
        assert errors[0]["message"] == "Source and target frameworks cannot be the same"

    def test_unsupported_framework(self, translator):
        """Test unknown frameworks fail with a logged error."""
        assert translator.translate(BUTTON_HTML, "wix", "elementor") is None

        error = translator.get_errors()[0]
        assert error["message"] == "Unsupported framework: wix"
        assert error["context"] == {"role": "source"}
        assert "timestamp" in error

    def test_parse_failure(self, translator):
        """Test malformed input fails the call."""
        assert translator.translate("just text", "bootstrap", "elementor") is None

        error = translator.get_errors()[0]
        assert error["context"] == {"stage": "parse", "framework": "bootstrap"}
        assert error["message"].startswith("[bootstrap]")

    def test_empty_parse(self, translator):
        """Test well-formed content with no components."""
        assert translator.translate("[]", "elementor", "divi") is None

        warnings = translator.get_warnings()
        assert translator.last_success is False
        assert translator.get_errors() == []
        assert [warning["kind"] for warning in warnings] == ["empty_parse"]
        assert translator.get_stats()["warnings"] == 1

    def test_low_confidence_warnings(self, translator):
        """Test fallback mappings raise confidence and QA warnings."""
        output = translator.translate("<aside>Odd</aside>", "bootstrap", "elementor")

        assert output is not None
        warnings = translator.get_warnings()
        assert [warning["kind"] for warning in warnings] == ["low_confidence", "qa"]
        assert warnings[0]["context"]["confidence"] == 0.3
        assert warnings[0]["context"]["target_type"] == "text"
        assert warnings[1]["message"] == "Low average confidence: 0.30 - manual review suggested"

    def test_mapping_failure_drops_component(self, registry):
        """Test a mapping exception skips the component without aborting."""
        translator = Translator(registry=registry, mapping_engine=BrokenMappingEngine(), config=BridgeConfig())

        output = translator.translate(BUTTON_HTML, "bootstrap", "elementor")

        assert output == "[]"
        assert translator.get_stats()["failed"] == 1
        assert translator.get_errors()[0]["message"] == "Mapping failed for 'btn': component skipped"
        assert "Component count mismatch: 1 parsed, 0 translated" in [
            warning["message"] for warning in translator.get_warnings()
        ]

    def test_conversion_failure(self, registry, translator):
        """Test converter errors fail the call."""
        registry.converters.register("elementor", BrokenConverter())

        assert translator.translate(BUTTON_HTML, "bootstrap", "elementor") is None

        error = translator.get_errors()[0]
        assert error["context"] == {"stage": "convert", "framework": "elementor"}
        assert "cannot render" in error["message"]

    def test_deeply_nested_markup(self, translator):
        """Test markup nested past the recursion limit fails as a parse error."""
        assert translator.translate("<div>" * 3000 + "x", "bootstrap", "elementor") is None

        error = translator.get_errors()[0]
        assert error["context"] == {"stage": "parse", "framework": "bootstrap"}
        assert "nested too deeply" in error["message"]

    def test_converter_recursion(self, registry, translator):
        """Test a converter running out of stack fails the call."""
        registry.converters.register("elementor", RunawayConverter())

        assert translator.translate(BUTTON_HTML, "bootstrap", "elementor") is None

        error = translator.get_errors()[0]
        assert error["context"] == {"stage": "convert", "framework": "elementor"}
        assert translator.last_success is False

    def test_logs_reset_per_call(self, translator):
        """Test errors from one call do not leak into the next."""
        translator.translate(BUTTON_HTML, "wix", "elementor")
        translator.translate(BUTTON_HTML, "bootstrap", "elementor")

        assert translator.get_errors() == []
        assert translator.last_success is True

    def test_performance_mode_option(self, translator):
        """Test known modes are applied and unknown ones ignored."""
        translator.translate(BUTTON_HTML, "bootstrap", "elementor", {"performance_mode": "speed"})
        assert translator.get_stats()["performance_mode"] == "speed"

        translator.translate(BUTTON_HTML, "bootstrap", "elementor", {"performance_mode": "turbo"})
        assert translator.get_stats()["performance_mode"] == "speed"


class TestCache:
    """Test result caching."""

    def test_second_call_is_served_from_cache(self, translator, parse_calls):
        """Test repeated input is parsed once and returns the same output."""
        first = translator.translate(BUTTON_HTML, "bootstrap", "elementor")
        second = translator.translate(BUTTON_HTML, "bootstrap", "elementor")

        assert first == second
        assert len(parse_calls) == 1
        assert translator.get_stats()["cache_hit"] is True
        assert translator.last_success is True

    def test_cache_disabled(self, translator, parse_calls):
        """Test the cache can be turned off per call."""
        translator.translate(BUTTON_HTML, "bootstrap", "elementor", {"enable_cache": False})
        translator.translate(BUTTON_HTML, "bootstrap", "elementor")

        assert len(parse_calls) == 2
        assert translator.get_stats()["cache_hit"] is False

    def test_clear_cache(self, translator, parse_calls):
        """Test clearing forces a fresh translation."""
        translator.translate(BUTTON_HTML, "bootstrap", "elementor")
        translator.clear_cache()
        translator.translate(BUTTON_HTML, "bootstrap", "elementor")

        assert len(parse_calls) == 2

    def test_failures_are_not_cached(self, translator):
        """Test only successful output is stored."""
        translator.translate("just text", "bootstrap", "elementor")

        assert len(translator.cache) == 0


class TestBatchTranslate:
    """Test Translator.batch_translate."""

    def test_one_bad_item(self, translator):
        """Test a malformed item fails alone and keeps its own logs."""
        results = translator.batch_translate(
            [BUTTON_HTML, "just text", "<p>Hello</p>"], "bootstrap", "divi"
        )

        assert [results[key]["success"] for key in (0, 1, 2)] == [True, False, True]
        assert results[1]["output"] is None
        assert results[1]["errors"]
        assert results[0]["errors"] == []
        assert results[2]["stats"]["successful"] == 1
        assert "[et_pb_text]Hello[/et_pb_text]" in results[2]["output"]

    def test_deeply_nested_item(self, translator):
        """Test one item nested past the recursion limit fails alone."""
        results = translator.batch_translate({"bad": DEEP_JSON, "good": HEADING_JSON}, "elementor", "bootstrap")

        assert results["bad"]["success"] is False
        assert results["bad"]["output"] is None
        assert results["bad"]["errors"][0]["context"] == {"stage": "parse", "framework": "elementor"}
        assert results["good"]["success"] is True
        assert "Hello</h2>" in results["good"]["output"]

    def test_progress_callback(self, translator):
        """Test progress is reported before each item, counting from 1."""
        calls = []
        translator.batch_translate(
            {"home": "<p>a</p>", "about": "<p>b</p>"},
            "bootstrap",
            "gutenberg",
            {"progress_callback": lambda current, total, key: calls.append((current, total, key))},
        )

        assert calls == [(1, 2, "home"), (2, 2, "about")]

    def test_empty_batch(self, translator):
        """Test nothing to do gives an empty result."""
        assert translator.batch_translate({}, "bootstrap", "divi") == {}


class TestCapabilities:
    """Test capability queries."""

    def test_can_translate(self, translator):
        """Test supported pairs."""
        assert translator.can_translate("bootstrap", "elementor") is True
        assert translator.can_translate("bootstrap", "bootstrap") is False
        assert translator.can_translate("wix", "elementor") is False

    def test_supported_frameworks(self, translator):
        """Test all built-in frameworks are listed."""
        frameworks = translator.get_supported_frameworks()

        assert len(frameworks) == 10
        assert {"bootstrap", "elementor", "divi", "claude", "beaver-builder"} <= set(frameworks)
