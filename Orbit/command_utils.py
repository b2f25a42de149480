import re
from dataclasses import dataclass


INTENT_KEYWORDS = ("open", "launch")
_INTENT_RE = re.compile(r"(open|launch)")


@dataclass(frozen=True)
class Launch:
    app_name: str


@dataclass(frozen=True)
class NoMatch:
    fragment: str


@dataclass(frozen=True)
class NotACommand:
    pass


def normalize_command(text):
    return (text or "").strip().lower()


def has_launch_intent(text):
    lowered = (text or "").lower()
    return any(keyword in lowered for keyword in INTENT_KEYWORDS)


def strip_intent_keywords(text):
    """
    Remove every occurrence of the intent keywords and trim.
    Repeats until stable: removing "open" from "oopenpen" leaves a new "open".
    """
    out = (text or "").lower()
    while True:
        cleaned = _INTENT_RE.sub("", out)
        if cleaned == out:
            break
        out = cleaned
    return out.strip()


def match_app(fragment, known_apps):
    # First match in snapshot order wins; "" is a substring of every name.
    needle = (fragment or "").lower()
    for name in known_apps or ():
        if needle in name.lower():
            return name
    return None


def interpret(raw_text, known_apps):
    if not has_launch_intent(raw_text):
        return NotACommand()
    fragment = strip_intent_keywords(raw_text)
    matched = match_app(fragment, known_apps)
    if matched is None:
        return NoMatch(fragment)
    return Launch(matched)
