"""Random token and bcrypt hash generators."""

import secrets
import string
from typing import Any

import bcrypt

from ittools.widgets.registry import (
    WidgetInputError,
    manifest,
    optional_choice,
    optional_int,
    require_str,
)

TOKEN_SYMBOLS = "!@#$%^&*()_+[]{}|;:,.<>?~"

# Upper bound on the cost a caller may request.
BCRYPT_MAX_ROUNDS = 12


def _flag(params: dict[str, Any], key: str, default: bool) -> bool:
    value = params.get(key, default)
    if not isinstance(value, bool):
        raise WidgetInputError(f"'{key}' must be a boolean")
    return value


@manifest.register(
    "Token Generator",
    category="Crypto",
    description="Generate a random string from the chosen character sets.",
    route_path="/token-generator",
    is_premium=True,
    icon="key",
)
def token_generator(params: dict[str, Any]) -> dict[str, Any]:
    length = optional_int(params, "length", 64, 1, 128)
    alphabet = "".join(
        chars
        for key, default, chars in (
            ("uppercase", True, string.ascii_uppercase),
            ("lowercase", True, string.ascii_lowercase),
            ("numbers", True, string.digits),
            ("symbols", False, TOKEN_SYMBOLS),
        )
        if _flag(params, key, default)
    )
    if not alphabet:
        raise WidgetInputError("Select at least one character set")
    return {"token": "".join(secrets.choice(alphabet) for _ in range(length))}


@manifest.register(
    "Bcrypt",
    category="Crypto",
    description="Hash a password with bcrypt or check a password against a hash.",
    route_path="/bcrypt",
    is_premium=True,
    icon="lock",
)
def bcrypt_widget(params: dict[str, Any]) -> dict[str, Any]:
    mode = optional_choice(params, "mode", "hash", ("hash", "compare"))
    password = require_str(params, "password").encode("utf-8")[:72]
    if mode == "hash":
        rounds = optional_int(params, "rounds", 10, 4, BCRYPT_MAX_ROUNDS)
        return {"hash": bcrypt.hashpw(password, bcrypt.gensalt(rounds=rounds)).decode("utf-8")}
    hashed = require_str(params, "hash")
    try:
        matches = bcrypt.checkpw(password, hashed.encode("utf-8"))
    except ValueError as e:
        raise WidgetInputError("'hash' is not a valid bcrypt hash") from e
    return {"match": matches}
