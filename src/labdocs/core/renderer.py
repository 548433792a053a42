"""Markdown to HTML rendering.

Converts Markdown with an ordered sequence of regex substitutions. Each
rule runs once over the whole text and later rules see the HTML emitted
by earlier ones, so the order of RULES is significant:

- fenced code runs before inline code so fence backticks are consumed first
- bold runs before italic so ``**x**`` is never split into nested italics
- status glyph passes match the exact bullet item markup of the list rule

Constructs the rules do not anticipate (nested lists, blockquotes, nested
fences) pass through partially transformed.
"""

import html
import re
from dataclasses import dataclass

HEADING_CLASSES: dict[int, str] = {
    1: "text-4xl font-bold text-slate-900 mb-6 pb-4 border-b border-slate-200",
    2: "text-2xl font-semibold text-slate-800 mt-8 mb-4 flex items-center gap-2",
    3: "text-xl font-semibold text-slate-700 mt-6 mb-3",
    4: "text-lg font-medium text-slate-600 mt-4 mb-2",
}

# Decorative markup placed before the heading text
HEADING_ACCENTS: dict[int, str] = {
    2: '<div class="w-1 h-6 bg-blue-500 rounded"></div>',
}

STATUS_GLYPHS: dict[str, str] = {
    "✅": "text-green-500",  # check mark
    "⭐": "text-red-500",  # star
    "\U0001f7e1": "text-yellow-500",  # yellow circle
}

CODE_BLOCK_CLASS = "relative bg-slate-900 rounded-lg p-4 mb-6 overflow-x-auto"
PRE_CLASS = "text-slate-100 text-sm"
INLINE_CODE_CLASS = "bg-slate-100 text-slate-800 px-1.5 py-0.5 rounded text-sm font-mono"
BULLET_ITEM_CLASS = "flex items-start gap-2 text-slate-700 mb-2"
BULLET_CLASS = "w-2 h-2 bg-blue-400 rounded-full mt-2.5 flex-shrink-0"
ORDERED_ITEM_CLASS = "text-slate-700 mb-2 ml-4"
STRONG_CLASS = "font-semibold text-slate-900"
EM_CLASS = "italic text-slate-600"
LINK_CLASS = "text-blue-600 hover:text-blue-800 underline decoration-2 underline-offset-2"
HR_CLASS = "my-8 border-t border-slate-200"
PARAGRAPH_CLASS = "text-slate-700 leading-relaxed mb-4"
STATUS_ITEM_CLASS = "inline-flex items-center gap-2"


@dataclass(frozen=True)
class Substitution:
    """Single global regex replacement step."""

    name: str
    pattern: re.Pattern[str]
    replacement: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def _heading_rule(level: int) -> Substitution:
    accent = HEADING_ACCENTS.get(level, "")
    return Substitution(
        name=f"h{level}",
        pattern=re.compile(rf"^{'#' * level} (.*)$", re.MULTILINE),
        replacement=(
            rf'<h{level} class="{HEADING_CLASSES[level]}">{accent}\g<1></h{level}>'
        ),
    )


def _status_glyph_rule(glyph: str, color_class: str) -> Substitution:
    item_open = re.escape(
        f'<li class="{BULLET_ITEM_CLASS}"><div class="{BULLET_CLASS}"></div>'
    )
    return Substitution(
        name=f"status-{color_class}",
        pattern=re.compile(
            rf"({item_open})<span>([^<]*?){re.escape(glyph)}([^<]*)</span></li>"
        ),
        replacement=(
            rf'\g<1><span class="{STATUS_ITEM_CLASS}">\g<2>'
            rf'<span class="{color_class}">{glyph}</span>\g<3></span></li>'
        ),
    )


RULES: tuple[Substitution, ...] = (
    *(_heading_rule(level) for level in sorted(HEADING_CLASSES)),
    Substitution(
        name="code-block",
        pattern=re.compile(r"```(.*?)```", re.DOTALL),
        replacement=(
            rf'<div class="{CODE_BLOCK_CLASS}"><pre class="{PRE_CLASS}">\g<1></pre></div>'
        ),
    ),
    Substitution(
        name="inline-code",
        pattern=re.compile(r"`([^`]+)`"),
        replacement=rf'<code class="{INLINE_CODE_CLASS}">\g<1></code>',
    ),
    Substitution(
        name="bullet-item",
        pattern=re.compile(r"^- (.*)$", re.MULTILINE),
        replacement=(
            rf'<li class="{BULLET_ITEM_CLASS}"><div class="{BULLET_CLASS}"></div>'
            r"<span>\g<1></span></li>"
        ),
    ),
    # Numbering is dropped, only the item text is kept
    Substitution(
        name="ordered-item",
        pattern=re.compile(r"^(\d+)\. (.*)$", re.MULTILINE),
        replacement=rf'<li class="{ORDERED_ITEM_CLASS}">\g<2></li>',
    ),
    Substitution(
        name="bold",
        pattern=re.compile(r"\*\*(.*?)\*\*"),
        replacement=rf'<strong class="{STRONG_CLASS}">\g<1></strong>',
    ),
    Substitution(
        name="italic",
        pattern=re.compile(r"\*(.*?)\*"),
        replacement=rf'<em class="{EM_CLASS}">\g<1></em>',
    ),
    Substitution(
        name="link",
        pattern=re.compile(r"\[([^\]]+)\]\(([^)]+)\)"),
        replacement=rf'<a href="\g<2>" class="{LINK_CLASS}">\g<1></a>',
    ),
    Substitution(
        name="horizontal-rule",
        pattern=re.compile(r"^---$", re.MULTILINE),
        replacement=rf'<hr class="{HR_CLASS}" />',
    ),
    Substitution(
        name="paragraph",
        pattern=re.compile(r"\n\n"),
        replacement=rf'</p><p class="{PARAGRAPH_CLASS}">',
    ),
    *(_status_glyph_rule(glyph, color) for glyph, color in STATUS_GLYPHS.items()),
)


class MarkdownRenderer:
    """Renders Markdown text to an HTML fragment.

    Output is trusted by default: Markdown sources are authored alongside
    the site. With escape_html enabled, HTML special characters in the
    source are escaped before any rule runs.
    """

    def __init__(
        self,
        *,
        escape_html: bool = False,
        rules: tuple[Substitution, ...] = RULES,
    ) -> None:
        self._escape_html = escape_html
        self._rules = rules

    @property
    def escape_html(self) -> bool:
        return self._escape_html

    def render(self, text: str) -> str:
        """Render Markdown text.

        Args:
            text: Markdown source without front matter

        Returns:
            HTML fragment. Never fails; unsupported syntax passes through.
        """
        if self._escape_html:
            text = html.escape(text)
        for rule in self._rules:
            text = rule.apply(text)
        return text


def render_markdown(text: str) -> str:
    """Render Markdown text with the default rules."""
    return MarkdownRenderer().render(text)
