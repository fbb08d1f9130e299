"""
Section splitting for the Intake context.

Divides a normalized request into three parts:
- meta block: the leading tracking line(s) and links
- description: free text before the first numbered item
- numbered list: "<n>. text" items, soft-wrapped lines folded into one item

The splitter is a finite-state scan over an explicit line index. Every
non-empty line ends up in exactly one part; no line is dropped.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from sieve.contexts.intake.logger import log_missing_items, log_split_summary
from sieve.contexts.intake.section_patterns import (
    META_WINDOW,
    SectionPatterns,
    is_description_marker,
    is_meta_line,
    is_numbered_item,
)

MISSING_ITEM_VALUE = "N/A"

# Scan states
META = "meta"
DESCRIPTION = "description"
LIST = "list"


@dataclass
class SplitResult:
    """
    Segmented request.

    numbered_list keys are item numbers (>= 1); gaps are allowed and can be
    inspected with get_missing_items().
    """

    meta_info: str = ""
    description: str = ""
    numbered_list: dict[int, str] = field(default_factory=dict)
    raw_sections: list[str] = field(default_factory=list)


def split(text: str) -> SplitResult:
    """
    Split normalized request text into meta block, description and numbered list.

    State transitions:
        meta -> description   on a line containing a description marker
        meta -> list          on a numbered line seen before any marker
        description -> list   on the first numbered line

    Lines after the meta block that precede the description marker are kept
    as description text, as is the marker line itself.

    Args:
        text: Normalized request text (see normalizer.normalize)

    Returns:
        SplitResult; all fields empty when text has no recognizable structure
    """
    lines = [line.strip() for line in (text or "").split("\n") if line.strip()]

    meta_lines = _collect_meta_lines(lines)
    description_lines = []
    numbered_list = {}

    state = META
    index = len(meta_lines)

    while index < len(lines):
        line = lines[index]

        if state in (META, DESCRIPTION) and is_numbered_item(line):
            state = LIST
            continue

        if state == META:
            if is_description_marker(line):
                state = DESCRIPTION
            description_lines.append(line)
            index += 1
        elif state == DESCRIPTION:
            description_lines.append(line)
            index += 1
        else:
            number, content, index = _consume_item(lines, index)
            if number in numbered_list:
                # Repeated number: keep both texts under the one key
                numbered_list[number] = f"{numbered_list[number]} {content}".strip()
            else:
                numbered_list[number] = content

    result = SplitResult(
        meta_info="\n".join(meta_lines),
        description=" ".join(description_lines).strip(),
        numbered_list=numbered_list,
        raw_sections=lines,
    )

    log_split_summary(
        total_lines=len(lines),
        meta_lines=len(meta_lines),
        description_chars=len(result.description),
        item_numbers=sorted(numbered_list),
    )

    return result


def _collect_meta_lines(lines: list[str]) -> list[str]:
    """Return the leading run of meta lines within the meta window."""
    meta_lines = []
    for line in lines[:META_WINDOW]:
        if not is_meta_line(line):
            break
        meta_lines.append(line)
    return meta_lines


def _consume_item(lines: list[str], index: int) -> tuple[int, str, int]:
    """
    Consume one numbered item and its continuation lines.

    Args:
        lines: All non-empty lines
        index: Index of a line that opens a numbered item

    Returns:
        (item number, item text, index of the next unconsumed line)
    """
    match = SectionPatterns.NUMBERED_ITEM.match(lines[index])
    number = int(match.group(1))
    parts = [match.group(2).strip()]

    index += 1
    while index < len(lines) and not is_numbered_item(lines[index]):
        parts.append(lines[index])
        index += 1

    return number, " ".join(part for part in parts if part), index


def get_missing_items(numbered_list: Mapping[int, str]) -> list[int]:
    """
    Find gaps in item numbering.

    Args:
        numbered_list: Item number -> text

    Returns:
        Sorted item numbers in [1, max(existing)] that are absent ([] if empty)
    """
    existing = {int(number) for number in numbered_list}
    if not existing:
        return []

    missing = [number for number in range(1, max(existing) + 1) if number not in existing]
    log_missing_items(missing)
    return missing


def fill_missing_items(numbered_list: Mapping[int, str]) -> dict[int, str]:
    """
    Return a copy of numbered_list with every gap filled by "N/A".

    Present items are left untouched; the result is ordered by item number.
    """
    filled = {int(number): text for number, text in numbered_list.items()}
    for number in get_missing_items(numbered_list):
        filled[number] = MISSING_ITEM_VALUE
    return dict(sorted(filled.items()))
