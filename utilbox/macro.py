"""Expansion of prefix[args]postfix macros using registered value providers."""

from __future__ import annotations

import json
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any

from .predicates import _as_string

__all__ = [
    "MacroError",
    "MacroEvaluator",
    "new_macro_evaluator",
    "expand_parameters",
    "expand_value",
]

_DECODER = json.JSONDecoder()


class MacroError(ValueError):
    """Raised when a macro cannot be expanded."""


def _provide(provider: Any, context: Any, arguments: list[Any]) -> Any:
    getter = getattr(provider, "get", None)
    if callable(getter):
        return getter(context, *arguments)
    return provider(context, *arguments)


@dataclass
class MacroEvaluator:
    """Expands macros of the form prefix name [json arguments] postfix.

    The registry maps macro names to providers: objects with
    get(context, *arguments) or plain callables of the same shape.
    """

    prefix: str
    postfix: str
    value_provider_registry: Mapping[str, Any]

    def has_macro(self, candidate: str) -> bool:
        """Return True if candidate holds a prefix followed by a postfix."""
        position = candidate.find(self.prefix)
        if position == -1:
            return False
        return candidate.find(self.postfix, position) != -1

    def _extract(self, text: str) -> tuple[str, str, str] | None:
        start = text.find(self.prefix)
        if start == -1:
            return None
        in_quotes = False
        depth = 0
        expect_arguments = False
        arguments_start = arguments_end = 0
        macro: list[str] = []
        name: list[str] = []
        begin = start + len(self.prefix)
        for index, char in enumerate(text[begin:], begin):
            previous = text[index - 1] if index > 0 else ""
            if char in " \b\n[":
                expect_arguments = True
            if char == '"' and previous != "\\":
                in_quotes = not in_quotes
            if not in_quotes and char == "[" and previous != "\\":
                if depth == 0:
                    arguments_start = index
                depth += 1
            if not in_quotes and char == "]" and previous != "\\":
                arguments_end = index
                depth -= 1
            macro.append(char)
            if depth == 0:
                if char == self.postfix:
                    break
                if not expect_arguments:
                    name.append(char)
        arguments = ""
        if 0 < arguments_start < arguments_end:
            arguments = text[arguments_start : arguments_end + 1]
        return self.prefix + "".join(macro), "".join(name), arguments

    def _decode_arguments(self, context: Any, raw: str) -> list[Any]:
        if not raw:
            return []
        raw = raw.replace('\\"', '"')
        try:
            text = raw.lstrip()
            arguments, _ = _DECODER.raw_decode(text) if text else ([], 0)
        except ValueError as err:
            raise MacroError(f"failed to process macro arguments: {raw} due to:\n\t{err}") from err
        if not isinstance(arguments, list):
            raise MacroError(f"failed to process macro arguments: {raw} due to:\n\tnot an array")
        expanded = []
        for argument in arguments:
            if isinstance(argument, str) and self.has_macro(argument):
                try:
                    argument = self.expand(context, argument)
                except Exception as err:
                    raise MacroError(
                        f"failed to expand argument: {argument} due to:\n\t{err}"
                    ) from err
            expanded.append(argument)
        return expanded

    def expand(self, context: Any, input_text: str) -> Any:
        """Expand the macros in input_text.

        A macro that spans the whole input yields the provider's value as is;
        otherwise its text form is substituted and expansion continues.
        """
        found = self._extract(input_text)
        if found is None:
            return input_text
        macro, name, raw_arguments = found
        if name not in self.value_provider_registry:
            raise MacroError(f"failed to lookup macro: '{name}' while processing: {input_text}")
        try:
            arguments = self._decode_arguments(context, raw_arguments)
        except MacroError as err:
            raise MacroError(f"failed expand macro: {macro} due to {err}") from err
        value = _provide(self.value_provider_registry[name], context, arguments)
        if len(macro) == len(input_text):
            return value
        result = input_text.replace(macro, _as_string(value), 1)
        if self.has_macro(result):
            return self.expand(context, result)
        return result


def new_macro_evaluator(prefix: str, postfix: str, registry: Mapping[str, Any]) -> MacroEvaluator:
    """Create a macro evaluator."""
    return MacroEvaluator(prefix, postfix, registry)


def expand_parameters(evaluator: MacroEvaluator, parameters: MutableMapping[str, str]) -> None:
    """Expand macros in each value of parameters in place, as text."""
    for key, value in list(parameters.items()):
        if evaluator.has_macro(value):
            parameters[key] = _as_string(evaluator.expand(None, _as_string(value)))


def expand_value(evaluator: MacroEvaluator, value: str) -> str:
    """Return value with its macros expanded, as text."""
    if evaluator.has_macro(value):
        return _as_string(evaluator.expand(None, value))
    return value