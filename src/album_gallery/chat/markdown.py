"""
Minimal Markdown to HTML conversion for assistant answers.

Covers what LLM answers actually use: headings, bold/italic, underline,
strike, inline code, ordered/unordered lists, bare links and paragraphs.
Input HTML is escaped first.
"""
import re

_ESCAPES = {"&": "&amp;", "<": "&lt;", ">": "&gt;"}

_URL = re.compile(r"(https?://[^\s)]+)(?=\)|\s|$)")
_HEADING_23 = re.compile(r"^[ \t]*(###?)[ \t]+(.+)$", re.MULTILINE)
_HEADING_1 = re.compile(r"^[ \t]*#[ \t]+(.+)$", re.MULTILINE)
_BOLD_STARS = re.compile(r"\*\*([^*]+)\*\*")
_BOLD_UNDERSCORES = re.compile(r"__([^_]+)__")
_ITALIC_STAR = re.compile(r"(^|[\s(])\*([^*\n]+)\*(?=[\s).,!?:;]|$)")
_ITALIC_UNDERSCORE = re.compile(r"(^|[\s(])_([^_\n]+)_(?=[\s).,!?:;]|$)")
_UNDERLINE = re.compile(r"\+\+([^+\n]+)\+\+")
_STRIKE = re.compile(r"~~([^~\n]+)~~")
_CODE = re.compile(r"`([^`]+)`")
_ORDERED_BLOCK = re.compile(r"(?:^[ \t]*\d+\.[ \t].+(?:\n|$))+", re.MULTILINE)
_ORDERED_MARK = re.compile(r"^[ \t]*\d+\.[ \t]")
_UNORDERED_BLOCK = re.compile(r"(?:^[ \t]*[-*][ \t].+(?:\n|$))+", re.MULTILINE)
_UNORDERED_MARK = re.compile(r"^[ \t]*[-*][ \t]")
_LIST_LABEL = re.compile(r"(<li>)([^:<]+?):\s*")
_BLOCK_START = re.compile(r"^<(ul|ol|h1|h2|h3)")


def _heading(match) -> str:
    tag = "h3" if match.group(1) == "###" else "h2"
    return f"<{tag}>{match.group(2)}</{tag}>"


def _list_block(tag: str, marker):
    def replace(match) -> str:
        block = match.group(0)
        items = [marker.sub("", line).strip() for line in block.strip().split("\n")]
        trailing = "\n" if block.endswith("\n") else ""
        return f"<{tag}>" + "".join(f"<li>{item}</li>" for item in items) + f"</{tag}>" + trailing
    return replace


def _paragraph(chunk: str) -> str:
    if _BLOCK_START.match(chunk):
        return chunk
    return "<p>" + chunk.replace("\n", "<br>") + "</p>"


def md_to_html(md: str) -> str:
    if not md:
        return ""

    t = md.replace("“", '"').replace("”", '"')
    t = t.replace("‘", "'").replace("’", "'")
    t = re.sub(r"[&<>]", lambda m: _ESCAPES[m.group(0)], t)

    t = _URL.sub(r'<a href="\1" target="_blank" rel="noopener noreferrer">\1</a>', t)
    t = _HEADING_23.sub(_heading, t)
    t = _HEADING_1.sub(r"<h1>\1</h1>", t)

    t = _BOLD_STARS.sub(r"<strong>\1</strong>", t)
    t = _BOLD_UNDERSCORES.sub(r"<strong>\1</strong>", t)
    t = _ITALIC_STAR.sub(r"\1<em>\2</em>", t)
    t = _ITALIC_UNDERSCORE.sub(r"\1<em>\2</em>", t)
    t = _UNDERLINE.sub(r"<u>\1</u>", t)
    t = _STRIKE.sub(r"<del>\1</del>", t)
    t = _CODE.sub(r"<code>\1</code>", t)

    t = _ORDERED_BLOCK.sub(_list_block("ol", _ORDERED_MARK), t)
    t = _UNORDERED_BLOCK.sub(_list_block("ul", _UNORDERED_MARK), t)
    t = _LIST_LABEL.sub(lambda m: f"{m.group(1)}<strong>{m.group(2)}:</strong> ", t)

    return "\n".join(_paragraph(chunk) for chunk in re.split(r"\n{2,}", t))
