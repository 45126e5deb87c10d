"""Split a free-text model answer into report sections.

The model is asked for six numbered sections but answers in whatever
markdown it likes, so headings are recognized by keyword. Prose sections
(summary, insights, trends) collect text; list sections collect bullet
or numbered items.
"""

from __future__ import annotations

import re

from planner_engine.models.report import WeeklyReport, WeeklyStats
from report_client.exceptions import ReportParseError

# Checked in order; the first keyword found in a heading wins.
_HEADING_KEYWORDS = (
    ("summary", ("performance summary", "summary")),
    ("strengths", ("strengths", "going well")),
    ("improvements", ("improvement", "areas for")),
    ("recommendations", ("recommendation", "next week")),
    ("insights", ("insights", "muscle building")),
    ("trends", ("trend", "analysis")),
)
_PROSE_SECTIONS = frozenset({"summary", "insights", "trends"})
_MAX_HEADING_WORDS = 8
_MAX_PLAIN_HEADING_WORDS = 4

_BULLET = re.compile(r"^\s*(?:[-•*]|\d+[.)])\s+")
_BULLET_ONLY = re.compile(r"^[-•*]\s")
_NUMBERED = re.compile(r"^\d+[.)]\s+")
_MARKUP = re.compile(r"[#*_`]+")


def _section_for_heading(line: str) -> str | None:
    lower = line.lower()
    for section, keywords in _HEADING_KEYWORDS:
        if any(keyword in lower for keyword in keywords):
            return section
    return None


def _split_heading(line: str, in_list: bool = False) -> tuple[str | None, str]:
    """Return (section, trailing text) if *line* is a heading, else (None, line).

    Inside a list section a numbered line is an item unless it is
    emphasized, so "3. Strength work: add a session" stays an item.
    """
    if _BULLET_ONLY.match(line):
        return None, line
    heading, sep, rest = line.partition(":")
    numbered = bool(_NUMBERED.match(line))
    bare = _MARKUP.sub("", _NUMBERED.sub("", heading)).strip()
    words = len(bare.split())
    emphasized = line.startswith("#") or "**" in heading or bare.isupper()
    labelled = bool(sep) and words <= _MAX_HEADING_WORDS and not (numbered and in_list)
    plain = not numbered and words <= _MAX_PLAIN_HEADING_WORDS and not bare.endswith(".")
    if not (emphasized or labelled or plain):
        return None, line
    section = _section_for_heading(bare)
    if section is None:
        return None, line
    return section, _MARKUP.sub("", rest).strip()


def parse_report_text(text: str, stats: WeeklyStats, generated_at: str = "") -> WeeklyReport:
    """Parse the model's answer into a WeeklyReport.

    Args:
        text: Raw assistant message.
        stats: Stats of the analysed week, attached unchanged.
        generated_at: ISO timestamp to stamp on the report.

    Raises:
        ReportParseError: No section received any content.
    """
    prose: dict[str, list[str]] = {name: [] for name in _PROSE_SECTIONS}
    lists: dict[str, list[str]] = {"strengths": [], "improvements": [], "recommendations": []}
    current: str | None = None

    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        section, content = _split_heading(line, in_list=current in lists)
        if section is not None:
            current = section
            if not content:
                continue
            line = content
        if current is None:
            continue

        if current in _PROSE_SECTIONS:
            prose[current].append(_MARKUP.sub("", _BULLET.sub("", line)).strip())
        else:
            item = _MARKUP.sub("", _BULLET.sub("", line)).strip()
            if item:
                lists[current].append(item)

    summary = " ".join(p for p in prose["summary"] if p)
    if not summary and not any(lists.values()) and not any(prose.values()):
        raise ReportParseError("No report sections found in the model answer")

    return WeeklyReport(
        summary=summary,
        strengths=tuple(lists["strengths"]),
        improvements=tuple(lists["improvements"]),
        recommendations=tuple(lists["recommendations"]),
        insights=" ".join(p for p in prose["insights"] if p),
        trends=" ".join(p for p in prose["trends"] if p),
        stats=stats,
        generated_at=generated_at,
        is_demo=False,
        raw_response=text,
    )
