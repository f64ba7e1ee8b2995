"""Persistence of studio parameter sets as key=value properties text.

Storage format (the single-line subset of java.util.Properties):
- optional comment lines starting with '#' or '!'
- one ``key=value`` (or ``key:value``) pair per line; backslash line
  continuations are not supported
- ``\\`` escapes and ``\\uXXXX`` sequences in keys and values
- keys: system, n, L, weight, time, showGrid

The slider weight ``w`` is stored, never the derived (w1, w2) pair. Missing
or unparsable fields fall back to their defaults; a record is never
rejected as a whole.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime
from pathlib import Path
from typing import Callable

from pydantic import BaseModel, Field

from quantum_bloom.types.system import QuantumSystemKind, SystemParameters

logger = logging.getLogger(__name__)

HEADER = "Quantum Bloom Studio State"

DEFAULTS: dict[str, str] = {
    "system": QuantumSystemKind.PARTICLE_IN_BOX.value,
    "n": "1",
    "L": "10",
    "weight": "0.5",
    "time": "0",
    "showGrid": "false",
}

_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_SPECIAL = "\\=:#!"


class StudioState(BaseModel):
    """A saved parameter set: the engine snapshot plus display flags."""

    model_config = {"frozen": True}

    params: SystemParameters = Field(default_factory=SystemParameters)
    show_grid: bool = False


def _escape(value: str) -> str:
    out = []
    for i, ch in enumerate(value):
        if ch in _SPECIAL or (ch == " " and i == 0):
            out.append("\\" + ch)
        elif ch in "\t\n\r\f":
            out.append("\\" + {v: k for k, v in _ESCAPES.items()}[ch])
        elif ord(ch) > 0x7E:
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(ch)
    return "".join(out)


def _unescape(text: str) -> str:
    out = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "\\" and i + 1 < len(text):
            nxt = text[i + 1]
            if nxt == "u" and i + 6 <= len(text):
                try:
                    out.append(chr(int(text[i + 2:i + 6], 16)))
                    i += 6
                    continue
                except ValueError:
                    pass
            out.append(_ESCAPES.get(nxt, nxt))
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def _split_pair(line: str) -> tuple[str, str]:
    """Split a properties line at its first unescaped separator."""
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == "\\":
            i += 2
            continue
        if ch in "=: \t\f":
            break
        i += 1
    key = line[:i]
    rest = line[i:].lstrip(" \t\f")
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(" \t\f")
    return _unescape(key), _unescape(rest)


def parse_properties(text: str) -> dict[str, str]:
    """Parse properties text into a dict. Later keys override earlier ones."""
    props: dict[str, str] = {}
    for raw in text.splitlines():
        line = raw.lstrip(" \t\f")
        if not line or line[0] in "#!":
            continue
        key, value = _split_pair(line)
        props[key] = value
    return props


def _field(props: dict[str, str], key: str, parse: Callable[[str], object]) -> object:
    raw = props.get(key)
    if raw is None:
        return parse(DEFAULTS[key])
    try:
        return parse(raw.strip())
    except ValueError:
        logger.warning("Unparsable %s=%r in saved state, using default %s", key, raw, DEFAULTS[key])
        return parse(DEFAULTS[key])


def _parse_number(raw: str) -> float:
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"non-finite value {raw!r}")
    return value


def _parse_kind(raw: str) -> QuantumSystemKind:
    return QuantumSystemKind(raw)


def _parse_bool(raw: str) -> bool:
    return raw.lower() == "true"


def dumps_state(state: StudioState) -> str:
    """Serialize a state to properties text."""
    params = state.params
    pairs = [
        ("system", params.kind.value),
        ("n", str(params.quantum_number)),
        ("L", repr(params.scale)),
        ("weight", repr(params.weight)),
        ("time", repr(params.time)),
        ("showGrid", "true" if state.show_grid else "false"),
    ]
    lines = [f"#{HEADER}", "#" + datetime.now().strftime("%a %b %d %H:%M:%S %Y")]
    lines += [f"{key}={_escape(value)}" for key, value in pairs]
    return "\n".join(lines) + "\n"


def loads_state(text: str) -> StudioState:
    """Parse properties text into a state, recovering field by field."""
    props = parse_properties(text)
    params = SystemParameters.from_controls(
        kind=_field(props, "system", _parse_kind),
        quantum_number=_field(props, "n", _parse_number),
        scale=_field(props, "L", _parse_number),
        weight=_field(props, "weight", _parse_number),
        time=_field(props, "time", _parse_number),
    )
    return StudioState(params=params, show_grid=_field(props, "showGrid", _parse_bool))


def save_state(state: StudioState, path: str | Path) -> Path:
    """Write a state to ``path`` and return the path."""
    path = Path(path)
    with open(path, "w", encoding="latin-1") as f:
        f.write(dumps_state(state))
    logger.info("Saved state to %s", path.name)
    return path


def load_state(path: str | Path) -> StudioState:
    """Read a state from ``path``. Filesystem errors propagate."""
    path = Path(path)
    with open(path, encoding="latin-1") as f:
        state = loads_state(f.read())
    logger.info("Loaded state from %s", path.name)
    return state
