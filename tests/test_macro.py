import pytest

from utilbox.macro import MacroError, MacroEvaluator, expand_parameters, expand_value, new_macro_evaluator


class ProviderError(Exception):
    pass


def _render(value):
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class FakeProvider:
    def __init__(self, template, fail=False):
        self.template = template
        self.fail = fail

    def get(self, context, *arguments):
        if self.fail:
            raise ProviderError("Test error")
        if not arguments:
            return self.template
        parts = self.template.split("%v")
        out = parts[0]
        for part, argument in zip(parts[1:], arguments):
            out += _render(argument) + part
        return out


@pytest.fixture
def evaluator():
    registry = {
        "abc": FakeProvider("Called with %v %v!"),
        "xyz": FakeProvider("XXXX"),
        "klm": FakeProvider("Called with %v %v!", fail=True),
    }
    return MacroEvaluator(prefix="<ds:", postfix=">", value_provider_registry=registry)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("<ds:abc[]>", "Called with %v %v!"),
        ("< <ds:abc[]>> <ds:xyz[]>", "< Called with %v %v!> XXXX"),
        ("<ds:abc>", "Called with %v %v!"),
        ("<ds:abc [1, true]>", "Called with 1 true!"),
        ("<ds:abc [1, true]> <ds:abc [2, false]>", "Called with 1 true! Called with 2 false!"),
        ('<ds:abc [1, "<ds:abc [10,11]>"]>', "Called with 1 Called with 10 11!!"),
    ],
)
def test_expand(evaluator, text, expected):
    assert evaluator.expand(None, text) == expected


def test_nested_provider_error(evaluator):
    with pytest.raises(MacroError):
        evaluator.expand(None, '<ds:abc [1, "<ds:klm>"]>')


def test_provider_error(evaluator):
    with pytest.raises(ProviderError):
        evaluator.expand(None, "<ds:klm>")


@pytest.mark.parametrize("text", ["<ds:agg>", '<ds:pos ["events"]>'])
def test_unknown_macro(evaluator, text):
    with pytest.raises(MacroError):
        evaluator.expand(None, text)


def test_no_macro_returns_input(evaluator):
    assert evaluator.expand(None, "plain") == "plain"
    assert evaluator.has_macro("plain") is False


def test_expand_parameters(evaluator):
    failing = {"k1": "!<ds:klm>!"}
    with pytest.raises(ProviderError):
        expand_parameters(evaluator, failing)
    params = {"k1": "!<ds:abc>!"}
    expand_parameters(evaluator, params)
    assert params["k1"] == "!Called with %v %v!!"


def test_expand_value(evaluator):
    assert expand_value(evaluator, "!<ds:abc>!") == "!Called with %v %v!!"
    assert expand_value(evaluator, "!!") == "!!"
    with pytest.raises(ProviderError):
        expand_value(evaluator, "<ds:klm>")


def test_new_macro_evaluator():
    ev = new_macro_evaluator("${", "}", {"x": lambda context, *args: 5})
    assert ev.expand(None, "${x}") == 5
    assert ev.expand(None, "a${x}b") == "a5b"