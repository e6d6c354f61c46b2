"""Keyboard input parsing for the text box.

Turns raw terminal input into key identifiers such as ``"left"``,
``"ctrl+left"`` or ``"enter"``.  Understands legacy xterm/SS3 escape
sequences, the kitty keyboard protocol (CSI-u and modified CSI forms),
raw control bytes and ESC-prefixed alt keys.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

KeyId = str


class Key:
    """Named key constants and modifier combinators."""

    escape = "escape"
    enter = "enter"
    tab = "tab"
    space = "space"
    backspace = "backspace"
    delete = "delete"
    insert = "insert"
    home = "home"
    end = "end"
    page_up = "pageUp"
    page_down = "pageDown"
    up = "up"
    down = "down"
    left = "left"
    right = "right"

    @staticmethod
    def ctrl(key: str) -> str:
        return f"ctrl+{key}"

    @staticmethod
    def shift(key: str) -> str:
        return f"shift+{key}"

    @staticmethod
    def alt(key: str) -> str:
        return f"alt+{key}"


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MODIFIERS: dict[str, int] = {
    "shift": 1,
    "alt": 2,
    "ctrl": 4,
}

# Caps lock / num lock bits reported by kitty.
LOCK_MASK = 64 + 128

CODEPOINTS: dict[int, str] = {
    27: "escape",
    9: "tab",
    13: "enter",
    32: "space",
    127: "backspace",
    57414: "enter",  # keypad enter
}

LEGACY_KEY_SEQUENCES: dict[str, str] = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1bOH": "home",
    "\x1bOF": "end",
    "\x1b[1~": "home",
    "\x1b[4~": "end",
    "\x1b[7~": "home",
    "\x1b[8~": "end",
    "\x1b[2~": "insert",
    "\x1b[3~": "delete",
    "\x1b[5~": "pageUp",
    "\x1b[6~": "pageDown",
    "\x1b[Z": "shift+tab",
}

# rxvt reports modified arrows with lowercase finals / SS3 prefixes.
RXVT_SEQUENCES: dict[str, str] = {
    "\x1bOa": "ctrl+up",
    "\x1bOb": "ctrl+down",
    "\x1bOc": "ctrl+right",
    "\x1bOd": "ctrl+left",
    "\x1b[a": "shift+up",
    "\x1b[b": "shift+down",
    "\x1b[c": "shift+right",
    "\x1b[d": "shift+left",
}

_CSI_LETTER_KEYS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
}

_CSI_TILDE_KEYS: dict[int, str] = {
    1: "home",
    2: "insert",
    3: "delete",
    4: "end",
    5: "pageUp",
    6: "pageDown",
    7: "home",
    8: "end",
}

# ---------------------------------------------------------------------------
# Modified sequence parsing
# ---------------------------------------------------------------------------


@dataclass
class ParsedSequence:
    key: str
    modifier: int  # raw protocol value, 1 = no modifier
    event_type: int  # 1 = press, 2 = repeat, 3 = release


# CSI u: \x1b[<codepoint>(:<shifted>(:<base>))?(;<modifier>(:<event>))?u
_CSI_U_RE = re.compile(
    r"^\x1b\[(\d+)(?::(\d*)(?::(\d+))?)?(?:;(\d+)(?::(\d+))?)?u$"
)
# \x1b[1;<modifier>(:<event>)?<letter>
_CSI_LETTER_RE = re.compile(r"^\x1b\[1;(\d+)(?::(\d+))?([ABCDHF])$")
# \x1b[<number>;<modifier>(:<event>)?~
_CSI_TILDE_RE = re.compile(r"^\x1b\[(\d+);(\d+)(?::(\d+))?~$")
# xterm modifyOtherKeys: \x1b[27;<modifier>;<keycode>~
_MODIFY_OTHER_KEYS_RE = re.compile(r"^\x1b\[27;(\d+);(\d+)~$")


def _key_for_codepoint(codepoint: int) -> str | None:
    name = CODEPOINTS.get(codepoint)
    if name is not None:
        return name
    if codepoint < 32:
        return None
    try:
        ch = chr(codepoint)
    except (ValueError, OverflowError):
        return None
    return ch.lower() if ch.isprintable() else None


def parse_modified_sequence(data: str) -> ParsedSequence | None:
    """Parse kitty / modifyOtherKeys sequences carrying an explicit modifier."""
    m = _MODIFY_OTHER_KEYS_RE.match(data)
    if m:
        key = _key_for_codepoint(int(m.group(2)))
        if key is None:
            return None
        return ParsedSequence(key=key, modifier=int(m.group(1)), event_type=1)

    m = _CSI_U_RE.match(data)
    if m:
        key = _key_for_codepoint(int(m.group(1)))
        if key is None:
            return None
        return ParsedSequence(
            key=key,
            modifier=int(m.group(4)) if m.group(4) else 1,
            event_type=int(m.group(5)) if m.group(5) else 1,
        )

    m = _CSI_LETTER_RE.match(data)
    if m:
        return ParsedSequence(
            key=_CSI_LETTER_KEYS[m.group(3)],
            modifier=int(m.group(1)),
            event_type=int(m.group(2)) if m.group(2) else 1,
        )

    m = _CSI_TILDE_RE.match(data)
    if m:
        key = _CSI_TILDE_KEYS.get(int(m.group(1)))
        if key is None:
            return None
        return ParsedSequence(
            key=key,
            modifier=int(m.group(2)),
            event_type=int(m.group(3)) if m.group(3) else 1,
        )

    return None


def _modifier_prefix(modifier: int) -> str:
    mod = (modifier - 1) & ~LOCK_MASK
    prefix = ""
    if mod & MODIFIERS["ctrl"]:
        prefix += "ctrl+"
    if mod & MODIFIERS["shift"]:
        prefix += "shift+"
    if mod & MODIFIERS["alt"]:
        prefix += "alt+"
    return prefix


def is_key_release(data: str) -> bool:
    """Return ``True`` if *data* is a kitty key-release event."""
    parsed = parse_modified_sequence(data)
    return parsed is not None and parsed.event_type == 3


# ---------------------------------------------------------------------------
# parse_key / matches_key
# ---------------------------------------------------------------------------


def parse_key(data: str) -> KeyId | None:  # noqa: C901
    """Parse raw terminal input and return its key identifier, or ``None``.

    Modifiers are reported in ``ctrl+shift+alt+`` order, e.g.
    ``"ctrl+left"`` or ``"alt+b"``.
    """
    if not data:
        return None

    parsed = parse_modified_sequence(data)
    if parsed is not None:
        return _modifier_prefix(parsed.modifier) + parsed.key

    if data in LEGACY_KEY_SEQUENCES:
        return LEGACY_KEY_SEQUENCES[data]
    if data in RXVT_SEQUENCES:
        return RXVT_SEQUENCES[data]

    # Single bytes
    if data == "\x1b":
        return "escape"
    if data in ("\r", "\n"):
        return "enter"
    if data == "\t":
        return "tab"
    if data == " ":
        return "space"
    if data in ("\x7f", "\x08"):
        return "backspace"
    if data == "\x00":
        return "ctrl+space"
    if len(data) == 1 and 1 <= ord(data) <= 26:
        return "ctrl+" + chr(ord(data) + ord("a") - 1)

    # Alt + key (ESC prefix)
    if len(data) == 2 and data[0] == "\x1b":
        ch = data[1]
        if ch in ("\r", "\n"):
            return "alt+enter"
        if ch in ("\x7f", "\x08"):
            return "alt+backspace"
        if ch == " ":
            return "alt+space"
        if 1 <= ord(ch) <= 26:
            return "ctrl+alt+" + chr(ord(ch) + ord("a") - 1)
        if ch.isupper():
            return "shift+alt+" + ch.lower()
        if ch.isprintable():
            return "alt+" + ch
    # ESC-prefixed escape sequences (alt + arrow on some terminals)
    if data.startswith("\x1b\x1b") and data[1:] in LEGACY_KEY_SEQUENCES:
        return "alt+" + LEGACY_KEY_SEQUENCES[data[1:]]

    if len(data) == 1 and data.isprintable():
        return data

    return None


def normalize_key_id(key_id: KeyId) -> KeyId:
    """Return *key_id* with its modifiers in canonical ``ctrl+shift+alt+`` order."""
    parts = key_id.split("+")
    key = parts[-1]
    mods = {p.lower() for p in parts[:-1]}
    prefix = "".join(f"{name}+" for name in ("ctrl", "shift", "alt") if name in mods)
    if key.lower() == "return":
        key = "enter"
    elif key.lower() == "esc":
        key = "escape"
    return prefix + key


def matches_key(data: str, key_id: KeyId) -> bool:
    """Return ``True`` if raw input *data* corresponds to *key_id*."""
    parsed = parse_key(data)
    if parsed is None:
        return False
    return parsed == normalize_key_id(key_id)


def decode_printable(data: str) -> str | None:
    """Decode a kitty CSI-u sequence for a plain or shifted printable key.

    Returns ``None`` for anything carrying ctrl/alt or a non-printable key.
    """
    m = _CSI_U_RE.match(data)
    if not m:
        return None
    modifier = ((int(m.group(4)) if m.group(4) else 1) - 1) & ~LOCK_MASK
    if modifier & (MODIFIERS["ctrl"] | MODIFIERS["alt"]):
        return None
    codepoint = int(m.group(1))
    if modifier & MODIFIERS["shift"] and m.group(2):
        codepoint = int(m.group(2))
    if codepoint < 32 or (codepoint in CODEPOINTS and codepoint != 32):
        return None
    try:
        ch = chr(codepoint)
    except (ValueError, OverflowError):
        return None
    return ch if ch.isprintable() else None
