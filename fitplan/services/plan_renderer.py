"""Classification of generated plan text into displayable blocks.

Updates:
    v0.1.0 - 2026-10-19 - Line classifier and paragraph grouping.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class BlockKind(str, Enum):
    HEADER = "header"
    BULLET = "bullet"
    NUMBERED = "numbered"
    PARAGRAPH = "paragraph"


class GroupVariant(str, Enum):
    """Container style of a paragraph group, alternating by index parity."""

    A = "A"
    B = "B"


SECTION_KEYWORDS: Tuple[str, ...] = (
    "Exercise Plan",
    "Nutrition Plan",
    "Weekly Schedule",
    "Diet Plan",
)

# Checked in order; the first substring found wins.
TOPIC_TAGS: Tuple[str, ...] = (
    "exercise",
    "nutrition",
    "schedule",
    "diet",
    "cardio",
    "strength",
    "tips",
)

_HEADER_PREFIX = re.compile(r"^[#\s]+")
_NUMBERED = re.compile(r"^(\d+)\.\s*")


@dataclass(slots=True, frozen=True)
class RenderedBlock:
    """One classified line of plan text."""

    kind: BlockKind
    text: str
    ordinal: Optional[str] = None
    topic: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"kind": self.kind.value, "text": self.text}
        if self.kind is BlockKind.NUMBERED:
            payload["ordinal"] = self.ordinal
        if self.kind is BlockKind.HEADER:
            payload["topic"] = self.topic
        return payload


@dataclass(slots=True, frozen=True)
class PlanGroup:
    """Blank-line separated run of blocks rendered in one container."""

    index: int
    blocks: Tuple[RenderedBlock, ...]

    @property
    def variant(self) -> GroupVariant:
        return GroupVariant.A if self.index % 2 == 0 else GroupVariant.B

    def as_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "variant": self.variant.value,
            "blocks": [block.as_dict() for block in self.blocks],
        }


def topic_tag(text: str) -> Optional[str]:
    """Return the first topic keyword contained in `text`, case-insensitively."""

    lowered = text.lower()
    for tag in TOPIC_TAGS:
        if tag in lowered:
            return tag
    return None


def is_header(line: str) -> bool:
    return line.startswith("#") or line.strip().startswith(SECTION_KEYWORDS)


def classify_line(line: str) -> Optional[RenderedBlock]:
    """Classify a single line of plan text.

    Rules apply in priority order: header, bullet, numbered item, paragraph.
    Blank lines yield `None`.
    """

    if is_header(line):
        text = _HEADER_PREFIX.sub("", line).strip()
        return RenderedBlock(BlockKind.HEADER, text, topic=topic_tag(text))
    if line.startswith(("-", "*")):
        return RenderedBlock(BlockKind.BULLET, line[1:].lstrip())
    match = _NUMBERED.match(line)
    if match:
        return RenderedBlock(
            BlockKind.NUMBERED, line[match.end():], ordinal=match.group(1)
        )
    if line.strip():
        return RenderedBlock(BlockKind.PARAGRAPH, line)
    return None


def split_groups(plan_text: str) -> List[str]:
    """Split plan text on blank-line boundaries, keeping empty groups in place."""

    normalised = plan_text.replace("\r\n", "\n").replace("\r", "\n")
    return normalised.split("\n\n")


def render_plan(plan_text: str) -> List[PlanGroup]:
    """Classify a generated plan into ordered groups of blocks.

    Group indexes count every split group, including empty ones that are
    dropped from the output, so variants follow the source layout.
    """

    groups: List[PlanGroup] = []
    for index, section in enumerate(split_groups(plan_text)):
        blocks = tuple(
            block
            for block in (classify_line(line) for line in section.split("\n"))
            if block is not None
        )
        if blocks:
            groups.append(PlanGroup(index=index, blocks=blocks))
    return groups


__all__ = [
    "BlockKind",
    "GroupVariant",
    "PlanGroup",
    "RenderedBlock",
    "SECTION_KEYWORDS",
    "TOPIC_TAGS",
    "classify_line",
    "is_header",
    "render_plan",
    "split_groups",
    "topic_tag",
]
