# utilbox

Small helpers for everyday Python code. They use only the standard library.

## What is inside

- `utilbox.jsonutil`
  - Checks text with `is_structured_json` (an object or an array),
    `is_complete_json` (any single JSON value) and
    `is_new_line_delimited_json`.
  - Decodes strings, bytes or readable objects with `json_to_interface`,
    `json_to_map` and `json_to_slice`. `json_to_interface` turns
    newline-delimited input into a list of documents.
  - Encodes maps, lists, tuples and dataclasses with `as_json_text` (compact,
    ending in a newline, keys sorted) and `as_indent_json_text`
    (tab-indented).
  - `AnyJSON` is a string holding raw JSON. Its `value()` method decodes it.
- `utilbox.predicates`
  - Constructors: `new_within_predicate`, `new_between_predicate`,
    `new_in_predicate`, `new_comparable_predicate`, `new_nil_predicate` and
    `new_like_predicate`.
  - Every predicate has `apply(value)` and can also be called directly.
- `utilbox.iterator`
  - `new_slice_iterator` returns a `SliceIterator` with `has_next()`.
  - `next_as(kind)` converts the next item to `str`, `int` or `datetime`. With
    `object` it returns the item unchanged.
  - The iterator also works with a plain `for` loop.
- `utilbox.contracts`
  - The mime-type constants, including `FILE_EXTENSION_MIME_TYPE`.
  - The `LogMessage` and `LogMessages` dataclasses.
  - The `Ranger` protocol.
- `utilbox.fs`: `file_exists`, `is_directory`, `create_dir_if_not_exist` (it
  also creates missing parents) and `remove_file_if_exist` (it removes files
  or empty directories).
- `utilbox.stack`: `caller_info`, `caller_directory` and `discover_caller`
  report the file, function and line of frames in the call stack.
- `utilbox.macro`
  - `MacroEvaluator` expands macros of the form `<prefix>name [json args]<postfix>`.
  - Macros are resolved through a registry: a mapping from names to providers.
    A provider is either an object with `get(context, *arguments)` or a
    callable of the same shape.
  - The shortcuts are `new_macro_evaluator`, `expand_value` and
    `expand_parameters`.
  - Failures raise `MacroError`.
- `utilbox.sampler`: `Sampler(pct, seed=None)` accepts about `pct` percent of
  calls to `accept()`. `accept_with_threshold(threshold)` uses its own
  percentage for that call.
- `utilbox.secret`
  - `SecretKey`, `Secret` and `new_secrets` classify secret references.
  - `read_user_and_password(timeout)` prompts for a username and a password
    typed twice. It raises `TimeoutError` if no answer comes in time.
- `utilbox.kms`
  - Request and response dataclasses for an encryption service.
  - The abstract `KmsService` base class. Its `decode` method decrypts, then
    decodes the result.
- `utilbox.replay`
  - `ReplayCommands` records shell conversations.
  - `store()` writes them as `NNN_000.stdin` and `NNN_MMM.stdout` files, and
    `load()` reads them back.
- `utilbox.replay_session`
  - `SessionConfig` holds session settings.
  - `ReplayService` and `ReplayMultiCommandSession` answer commands from
    recorded conversations.

## What it does not do

Sessions here come only from recordings. `utilbox` opens no live remote shell
connections and has no tunnels that carry traffic. `reconnect()` raises
`ReplayUnsupportedError`.

`KmsService` is an interface only. The package ships no encryption backend.

## Installation

```
pip install utilbox
```

## Examples

```python
from utilbox.jsonutil import json_to_interface, is_new_line_delimited_json
from utilbox.predicates import new_between_predicate, new_like_predicate

assert json_to_interface('{"a": 1}') == {"a": 1}
assert is_new_line_delimited_json('{"a":1}\n{"b":2}\n')

assert new_between_predicate(10, 20).apply(15)
assert new_like_predicate("abc%efg").apply("abcXefg")
```

Expanding macros:

```python
from utilbox.macro import new_macro_evaluator, expand_value

registry = {"name": lambda context, *arguments: "world"}
evaluator = new_macro_evaluator("<ds:", ">", registry)
assert expand_value(evaluator, "Hello <ds:name>!") == "Hello world!"
```

Playing back a recorded session:

```python
from utilbox.replay import new_replay_commands
from utilbox.replay_session import new_replay_service

commands = new_replay_commands("recordings/ls")
commands.load()
service = new_replay_service("prompt$", "linux", commands)
session = service.open_multi_command_session()
print(session.run("ls /etc/hosts"))
```

If a command was never recorded, `run` returns `"Command not found"`. If its
recordings are used up, it returns an empty string.

## Running the tests

```
pip install utilbox[test]
pytest
```