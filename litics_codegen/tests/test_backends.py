import ast
from pathlib import Path

import pytest

from litics_codegen.pipeline.analyzer import EventDefinition, ParamDefinition
from litics_codegen.pipeline.backends import KotlinBackend, PythonBackend
from litics_codegen.pipeline.config import CodeGeneratorConfig, TargetPlatform
from litics_codegen.pipeline.errors import DuplicateMethodNameError, MalformedDefinitionError

ORDER_PLACED = EventDefinition(
    method_name="trackOrderPlaced",
    event_name="order_placed",
    parameters=(
        ParamDefinition("orderId", is_required=True),
        ParamDefinition("promoCode"),
    ),
    supported_platforms=("ios", "android"),
)


def make_config(**kwargs):
    config = CodeGeneratorConfig(namespace="com.example.analytics", add_generation_comment=False)
    for k, v in kwargs.items():
        setattr(config, k, v)
    return config


def render(backend_class, definitions, **kwargs):
    files = backend_class(make_config(**kwargs)).render(definitions)
    api, impl = files.values()
    return api, impl


class TestKotlinBackend:
    """Test cases for Kotlin binding emission"""

    def test_order_placed_api(self):
        api, _ = render(KotlinBackend, [ORDER_PLACED])
        assert "package com.example.analytics\n" in api
        assert "public abstract class GeneratedEventsAnalytics {" in api
        assert "  public abstract fun trackOrderPlaced(orderId: String, promoCode: String? = null)\n" in api

    def test_order_placed_impl(self):
        _, impl = render(KotlinBackend, [ORDER_PLACED])
        expected = """  public override fun trackOrderPlaced(orderId: String, promoCode: String?) {
    val params = mutableListOf<TrackingEvent.Parameter>()
    params += TrackingEvent.Parameter("orderId", orderId)
    if (promoCode != null) {
      params += TrackingEvent.Parameter("promoCode", promoCode)
    }
    val supportedPlatforms = arrayOf("ios", "android")
    val trackingEvent = TrackingEvent("order_placed", params.toTypedArray())
    eventTrackers.filter { it.supportsEventTracking(supportedPlatforms) }.forEach { it.trackEvent(trackingEvent) }
  }
"""
        assert expected in impl
        assert "import com.deliveryhero.litics.EventTracker\n" in impl
        assert ") : GeneratedEventsAnalytics() {" in impl

    def test_output_paths(self):
        files = KotlinBackend(make_config()).render([ORDER_PLACED])
        assert list(files) == [
            Path("com/example/analytics/GeneratedEventsAnalytics.kt"),
            Path("com/example/analytics/GeneratedEventsAnalyticsImpl.kt"),
        ]

    def test_js_export(self):
        api, impl = render(KotlinBackend, [ORDER_PLACED], target_platform=TargetPlatform.JS)
        for code in (api, impl):
            assert "import kotlin.js.JsExport\n" in code
            assert "@JsExport\npublic " in code

    def test_no_js_export_on_jvm(self):
        api, impl = render(KotlinBackend, [ORDER_PLACED])
        assert "JsExport" not in api
        assert "JsExport" not in impl

    def test_defaults_are_emitted_as_written(self):
        definition = EventDefinition(
            method_name="trackA",
            event_name="a",
            parameters=(
                ParamDefinition("screen", default_value="Screens.HOME"),
                ParamDefinition("origin", default_value='"home"'),
            ),
            supported_platforms=("web",),
        )
        api, impl = render(KotlinBackend, [definition])
        assert 'fun trackA(screen: String? = Screens.HOME, origin: String? = "home")\n' in api
        assert "override fun trackA(screen: String?, origin: String?) {" in impl

    def test_quoted_defaults_are_escaped(self):
        definition = EventDefinition(
            method_name="trackA",
            event_name="a",
            parameters=(ParamDefinition("greeting", default_value='say "hi" to $name'),),
            supported_platforms=("web",),
        )
        api, _ = render(KotlinBackend, [definition], quote_default_values=True)
        assert 'greeting: String? = "say \\"hi\\" to \\$name")' in api

    def test_runtime_names_are_not_shadowed(self):
        definition = EventDefinition(
            method_name="trackA",
            event_name="a",
            parameters=(
                ParamDefinition("TrackingEvent", is_required=True),
                ParamDefinition("EventTracker", is_required=True),
                ParamDefinition("arrayOf"),
            ),
            supported_platforms=("web",),
        )
        api, impl = render(KotlinBackend, [definition])
        assert "fun trackA(TrackingEvent_: String, EventTracker_: String, arrayOf_: String? = null)" in api
        assert 'params += TrackingEvent.Parameter("TrackingEvent", TrackingEvent_)' in impl
        assert 'params += TrackingEvent.Parameter("arrayOf", arrayOf_)' in impl

    def test_keywords_and_local_names(self):
        definition = EventDefinition(
            method_name="trackA",
            event_name="a",
            parameters=(ParamDefinition("in", is_required=True), ParamDefinition("params", is_required=True)),
            supported_platforms=("web",),
        )
        api, impl = render(KotlinBackend, [definition])
        assert "fun trackA(`in`: String, params_: String)" in api
        assert 'TrackingEvent.Parameter("in", `in`)' in impl
        assert 'TrackingEvent.Parameter("params", params_)' in impl

    def test_kdoc(self):
        definition = EventDefinition(
            method_name="trackA",
            event_name="a",
            description="Something happened */ here",
            parameters=(ParamDefinition("id", description="The\n  identifier"),),
            supported_platforms=("web",),
        )
        api, _ = render(KotlinBackend, [definition])
        assert "   * Something happened *&#47; here\n   *\n   * @param id The identifier\n   */\n" in api


class TestPythonBackend:
    """Test cases for Python binding emission"""

    def test_order_placed(self):
        api, impl = render(PythonBackend, [ORDER_PLACED], namespace="example_bindings")
        assert "    def trackOrderPlaced(self, *, orderId: str, promoCode: str | None = None) -> None:\n        ...\n" in api
        assert "        if promoCode is not None:\n" in impl
        assert '        params.append(TrackingEvent.Parameter("orderId", orderId))\n' in impl
        assert '        supported_platforms = ("ios", "android")\n' in impl
        assert "from example_bindings.generated_events_analytics import GeneratedEventsAnalytics\n" in impl

    def test_output_paths(self):
        files = PythonBackend(make_config(namespace="app.tracking")).render([ORDER_PLACED])
        assert list(files) == [
            Path("app/tracking/generated_events_analytics.py"),
            Path("app/tracking/generated_events_analytics_impl.py"),
        ]

    def test_single_platform_is_a_tuple(self):
        definition = EventDefinition(method_name="trackA", event_name="a", supported_platforms=("web",))
        _, impl = render(PythonBackend, [definition])
        assert 'supported_platforms = ("web",)' in impl
        assert "def trackA(self) -> None:" in impl

    def test_keywords_and_local_names(self):
        definition = EventDefinition(
            method_name="trackA",
            event_name="a",
            parameters=(ParamDefinition("class", is_required=True), ParamDefinition("self")),
            supported_platforms=("web",),
        )
        api, impl = render(PythonBackend, [definition])
        assert "def trackA(self, *, class_: str, self_: str | None = None) -> None:" in api
        assert 'TrackingEvent.Parameter("class", class_)' in impl
        assert 'TrackingEvent.Parameter("self", self_)' in impl

    def test_runtime_names_are_not_shadowed(self):
        definition = EventDefinition(
            method_name="trackA",
            event_name="a",
            parameters=(
                ParamDefinition("tuple", is_required=True),
                ParamDefinition("TrackingEvent", is_required=True),
                ParamDefinition("EventTracker"),
                ParamDefinition("GeneratedEventsAnalytics"),
            ),
            supported_platforms=("web",),
        )
        api, impl = render(PythonBackend, [definition])
        assert (
            "def trackA(self, *, tuple_: str, TrackingEvent_: str, EventTracker_: str | None = None, "
            "GeneratedEventsAnalytics_: str | None = None) -> None:"
        ) in api
        assert 'params.append(TrackingEvent.Parameter("tuple", tuple_))' in impl
        assert 'params.append(TrackingEvent.Parameter("TrackingEvent", TrackingEvent_))' in impl

    def test_escaped_method_names_must_not_clash(self):
        definitions = [
            EventDefinition(method_name="class", event_name="one", supported_platforms=("web",), source_path=Path("a.yaml")),
            EventDefinition(method_name="class_", event_name="two", supported_platforms=("web",), source_path=Path("b.yaml")),
        ]
        with pytest.raises(DuplicateMethodNameError, match="once escaped as 'class_'") as exc_info:
            PythonBackend(make_config()).render(definitions)
        assert exc_info.value.key == "class_"
        assert exc_info.value.path == "b.yaml"
        assert "a.yaml" in exc_info.value.message

    def test_keyword_method_name_does_not_clash_in_kotlin(self):
        definitions = [
            EventDefinition(method_name="class", event_name="one", supported_platforms=("web",)),
            EventDefinition(method_name="class_", event_name="two", supported_platforms=("web",)),
        ]
        api, _ = render(KotlinBackend, definitions)
        assert "public abstract fun `class`()" in api
        assert "public abstract fun class_()" in api

    def test_escaped_names_must_not_clash(self):
        definition = EventDefinition(
            method_name="trackA",
            event_name="a",
            parameters=(ParamDefinition("params"), ParamDefinition("params_")),
            supported_platforms=("web",),
        )
        with pytest.raises(MalformedDefinitionError, match="clashes"):
            PythonBackend(make_config()).render([definition])

    def test_docstrings(self):
        definition = EventDefinition(
            method_name="trackA",
            event_name="a",
            parameters=(ParamDefinition("id", description='A quoted "value"'),),
            supported_platforms=("web",),
        )
        api, _ = render(PythonBackend, [definition])
        assert '        """Track the a event.\n\n        Args:\n            id: A quoted "value\\"\n        """\n' in api
        ast.parse(api)


def _methods(tree: ast.Module, class_name: str) -> list[tuple[str, list[str]]]:
    (cls,) = [node for node in tree.body if isinstance(node, ast.ClassDef) and node.name == class_name]
    return [
        (node.name, [arg.arg for arg in node.args.kwonlyargs])
        for node in cls.body
        if isinstance(node, ast.FunctionDef) and node.name != "__init__"
    ]


def test_api_and_impl_are_correlated(per_event_dir, multi_event_file):
    from litics_codegen.pipeline import PipelineGenerator

    for source in (per_event_dir, multi_event_file):
        generator = PipelineGenerator(make_config(namespace="bindings"), "python")
        api, impl = generator.generate(source).values()

        abstract_methods = _methods(ast.parse(api), "GeneratedEventsAnalytics")
        overrides = _methods(ast.parse(impl), "GeneratedEventsAnalyticsImpl")

        assert abstract_methods
        assert abstract_methods == overrides


def test_required_means_non_nullable(multi_event_file):
    from litics_codegen.pipeline import PipelineGenerator

    generator = PipelineGenerator(make_config(), "kotlin")
    definitions = generator.load_definitions(multi_event_file)
    backend = generator.backend
    for definition in definitions:
        for param in definition.parameters:
            binding = backend.bind_param(param)
            assert binding.is_nullable is not param.is_required
            assert binding.type == ("String" if param.is_required else "String?")
