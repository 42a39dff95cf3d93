"""Tests for the SelectorBuilder facade."""

import logging
import threading

import pytest

from selectorkit import (
    BuilderOptions,
    CompositeSelector,
    DuplicateError,
    InvalidCombinatorError,
    OrderError,
    SelectorBuilder,
    SimpleSelector,
    css_selector_builder,
)


@pytest.fixture
def builder():
    return SelectorBuilder()


class TestBuilderExamples:
    """Tests for the documented examples."""

    def test_id_and_classes(self, builder):
        """Test id followed by repeated classes."""
        result = builder.id("main").class_("container").class_("editable").stringify()
        assert result == "#main.container.editable"

    def test_element_attr_pseudo_class(self, builder):
        """Test attribute values are inserted verbatim."""
        result = builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        assert result == 'a[href$=".png"]:focus'

    def test_nested_combine(self, builder):
        """Test the three-level nested combine example."""
        result = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        ).stringify()
        assert result == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_default_instance(self):
        """Test the shared module-level builder."""
        assert css_selector_builder.pseudo_element("after").stringify() == "::after"


class TestBuilderEntryPoints:
    """Tests that every entry point starts a fresh chain."""

    @pytest.mark.parametrize(
        "method,value,expected",
        [
            ("element", "div", "div"),
            ("id", "main", "#main"),
            ("class_", "item", ".item"),
            ("attr", "disabled", "[disabled]"),
            ("pseudo_class", "hover", ":hover"),
            ("pseudo_element", "before", "::before"),
        ],
    )
    def test_entry_point(self, builder, method, value, expected):
        """Test each entry point returns a one-fragment selector."""
        selector = getattr(builder, method)(value)
        assert isinstance(selector, SimpleSelector)
        assert selector.stringify() == expected

    def test_stringify_helper(self, builder):
        """Test builder.stringify renders any selector."""
        assert builder.stringify(builder.element("p")) == "p"


class TestBuilderCombine:
    """Tests for combine()."""

    @pytest.mark.parametrize("combinator", [" ", "+", "~", ">"])
    def test_matches_parts(self, builder, combinator):
        """Test combine renders as left, combinator, right."""
        a = builder.element("div").class_("a")
        b = builder.element("span").attr("title")
        result = builder.combine(a, combinator, b).stringify()
        assert result == a.stringify() + " " + combinator + " " + b.stringify()

    def test_nested_left(self, builder):
        """Test combining a composite again on the left."""
        a, b, c = builder.element("a"), builder.element("b"), builder.element("c")
        result = builder.combine(builder.combine(a, "+", b), "~", c).stringify()
        assert result == "a + b ~ c"

    def test_reuse_operands(self, builder):
        """Test operands may be reused in several combinations."""
        a = builder.id("a")
        first = builder.combine(a, ">", builder.id("b"))
        second = builder.combine(a, "+", builder.id("c"))
        assert first.stringify() == "#a > #b"
        assert second.stringify() == "#a + #c"
        assert isinstance(first, CompositeSelector)

    @pytest.mark.parametrize("combinator", ["", "|", ">>", ",", None])
    def test_invalid_combinator(self, builder, combinator):
        """Test unknown combinators are rejected."""
        with pytest.raises(InvalidCombinatorError) as exc_info:
            builder.combine(builder.element("a"), combinator, builder.element("b"))
        assert exc_info.value.combinator == combinator
        assert exc_info.value.allowed == (" ", "+", "~", ">")

    def test_non_selector_operand(self, builder):
        """Test non-selector operands raise TypeError."""
        with pytest.raises(TypeError):
            builder.combine("div", "+", builder.element("p"))


class TestLenientBuilder:
    """Tests for pass-through combinators."""

    def test_passes_unknown_combinator(self, caplog):
        """Test unknown combinators pass through with a warning."""
        builder = SelectorBuilder(BuilderOptions(strict_combinators=False))
        with caplog.at_level(logging.WARNING, logger="selectorkit"):
            result = builder.combine(builder.element("a"), "||", builder.element("b"))
        assert result.stringify() == "a || b"
        assert "||" in caplog.text

    def test_blank_combinator_still_rejected(self):
        """Test blank tokens are rejected even when lenient."""
        builder = SelectorBuilder(BuilderOptions(strict_combinators=False))
        with pytest.raises(InvalidCombinatorError):
            builder.combine(builder.element("a"), "", builder.element("b"))

    def test_custom_combinators(self):
        """Test a custom recognized set."""
        builder = SelectorBuilder(BuilderOptions(combinators=[">", "||"]))
        assert builder.combinators == (">", "||")
        assert builder.combine(builder.id("a"), "||", builder.id("b")).stringify() == "#a || #b"
        with pytest.raises(InvalidCombinatorError):
            builder.combine(builder.id("a"), "+", builder.id("b"))


class TestBuilderIsolation:
    """Tests that chains never leak into each other."""

    def test_after_error_fresh_chain(self, builder):
        """Test a chain after an error matches a brand-new builder."""
        with pytest.raises(DuplicateError):
            builder.element("div").id("a").id("b")
        with pytest.raises(OrderError):
            builder.attr("x").class_("y")
        result = builder.element("p").class_("c").stringify()
        assert result == SelectorBuilder().element("p").class_("c").stringify() == "p.c"

    def test_after_stringify_fresh_chain(self, builder):
        """Test a chain after stringify is independent."""
        builder.combine(builder.id("a"), "+", builder.id("b")).stringify()
        assert builder.element("span").stringify() == "span"

    def test_interleaved_chains(self, builder):
        """Test interleaved chains do not corrupt each other."""
        first = builder.element("div")
        second = builder.element("span")
        first = first.id("one")
        second = second.id("two")
        assert first.stringify() == "div#one"
        assert second.stringify() == "span#two"

    def test_threads(self, builder):
        """Test concurrent use of one builder."""
        results = {}

        def build(n):
            selector = builder.element("li")
            for i in range(50):
                selector = selector.class_(f"c{n}-{i}")
            results[n] = selector.stringify()

        threads = [threading.Thread(target=build, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        for n in range(8):
            expected = "li" + "".join(f".c{n}-{i}" for i in range(50))
            assert results[n] == expected


class TestBuilderFromConfig:
    """Tests for SelectorBuilder.from_config()."""

    def test_overrides(self):
        """Test overrides reach the builder options."""
        builder = SelectorBuilder.from_config(
            overrides={"builder": {"strict_combinators": False}},
            load_env=False,
        )
        assert builder.options.strict_combinators is False

    def test_env(self, monkeypatch):
        """Test environment variables reach the builder options."""
        monkeypatch.setenv("SELECTORKIT_BUILDER_COMBINATORS", ">,+")
        builder = SelectorBuilder.from_config()
        assert builder.combinators == (">", "+")

    def test_profile(self):
        """Test a profile reaches the builder options."""
        builder = SelectorBuilder.from_config(profile="lenient", load_env=False)
        assert builder.options.strict_combinators is False
        assert str(builder.combine(builder.element("a"), "||", builder.element("b"))) == "a || b"

    def test_env_beats_profile(self, monkeypatch):
        """Test an environment variable wins over the profile."""
        monkeypatch.setenv("SELECTORKIT_BUILDER_STRICT_COMBINATORS", "true")
        builder = SelectorBuilder.from_config(profile="lenient")
        with pytest.raises(InvalidCombinatorError):
            builder.combine(builder.element("a"), "||", builder.element("b"))

    def test_repr(self):
        """Test repr shows the options."""
        assert "strict_combinators=True" in repr(SelectorBuilder())
