"""Shared test fixtures for stackmask."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from stackmask.settings import Settings, reset_settings

SOURCE = """\
import { foo } from "./foo.js"

let x = foo(bar)
export default x
"""

COMPILED = """\
"use strict";
const _foo = require("./foo.js");
const x = _foo.foo(bar);
module.exports = x;
"""

COMPILED_LINE = 'const x = _foo.foo(bar);'
SOURCE_LINE = "let x = foo(bar)"

# Header left bare by the runtime: the location is only in the first frame.
RUNTIME_STACK = (
    "TypeError: _foo.foo is not a function\n"
    "    at Object.<anonymous> (/app/main.js:3:11)\n"
    "    at Module._compile (node:internal/modules/cjs/loader:1256:14)"
)

# Header decorated by the runtime, indicator under "foo" of the compiled line.
DECORATED_STACK = (
    "/app/main.js:3\n"
    f"{COMPILED_LINE}\n"
    + " " * 15 + "^\n"
    "\n"
    "TypeError: foo is not a function\n"
    "    at Object.<anonymous> (/app/main.js:3:16)\n"
    "    at Module._compile (node:internal/modules/cjs/loader:1256:14)"
)

PARSE_SOURCE = "line one\nline two\nconst a = = 1\nline four\nline five"

PARSE_STACK = (
    "SyntaxError: Unexpected token (3:10) while processing file: /x/y.js\n"
    "    at Parser.raise (/deps/parser.js:10:5)"
)


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults only, ignoring any local ``.env``."""
    return Settings(_env_file=None)
