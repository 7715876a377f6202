"""
Literal repair of broken emoji sequences in a source file.

The rule list is fixed: each pattern is either an emoji or a pair of
U+FFFD replacement characters left behind by a bad re-encode, and each is
swapped for question marks. Rules run strictly in declaration order with
plain ``str.replace``, so a later rule only ever sees the output of the
earlier ones.
"""
import logging
from typing import Dict, Sequence, Tuple

log = logging.getLogger("emoji")

ReplacementRule = Tuple[str, str]

# First mapping wins: a pattern that appears twice keeps its first
# replacement, so U+FFFD followed by '"' maps to '??' and never to '?'.
EMOJI_REPLACEMENTS: Tuple[ReplacementRule, ...] = (
    ("\ufffd'\ufffd", "??"),
    ("\U0001F3AF", "??"),  # direct hit
    ("\ufffd\"\ufffd", "??"),
    ("\ufffd\"", "??"),
    ("\U0001F3A8", "??"),  # artist palette
)


def apply_replacements(text: str,
                       rules: Sequence[ReplacementRule] = EMOJI_REPLACEMENTS) -> str:
    """Return *text* with every rule applied once, in order."""
    for pattern, replacement in rules:
        text = text.replace(pattern, replacement)
    return text


def count_matches(text: str,
                  rules: Sequence[ReplacementRule] = EMOJI_REPLACEMENTS) -> Dict[str, int]:
    """
    Occurrences each rule would replace.

    Counts are taken against the text as it stands when that rule runs,
    after all earlier rules have been applied.
    """
    counts: Dict[str, int] = {}
    for pattern, replacement in rules:
        counts[pattern] = counts.get(pattern, 0) + text.count(pattern)
        text = text.replace(pattern, replacement)
    return counts


def patch_file(path: str,
               rules: Sequence[ReplacementRule] = EMOJI_REPLACEMENTS) -> int:
    """
    Rewrite *path* in place with all rules applied.

    The file is read in full before anything is written, so a missing or
    unreadable target raises without creating or touching a file. Bytes
    that are not valid UTF-8 decode to U+FFFD, which is what the rules
    match. Line endings are preserved exactly.

    Returns:
        Total number of replacements made.
    """
    with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
        content = f.read()

    counts = count_matches(content, rules)
    for pattern, count in counts.items():
        if count:
            log.debug(f"{path}: {count} x {pattern!r}")

    content = apply_replacements(content, rules)

    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)

    total = sum(counts.values())
    log.debug(f"{path}: {total} replacement(s) written")
    return total
