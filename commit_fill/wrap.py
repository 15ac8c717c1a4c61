"""Refill commit-message bodies at a given width."""

import re
import textwrap

LIST_ITEM_RE = re.compile(r"^\s*([-*+]\s+|\d+[.)]\s+)")
TRAILER_RE = re.compile(r"^[A-Za-z0-9-]+: \S")
SCISSORS_LINE = "# ------------------------ >8 ------------------------"


def _is_verbatim(line):
    """Lines that are never reflowed."""
    return (
        line.startswith("#")
        or line[:1] in (" ", "\t")
        or bool(LIST_ITEM_RE.match(line))
    )


def _is_trailer_block(lines):
    trailers = [line for line in lines if not line.startswith("#")]
    return bool(trailers) and all(TRAILER_RE.match(line) for line in trailers)


def _split_paragraphs(lines):
    paragraphs = []
    current = []
    for line in lines:
        if line.strip():
            current.append(line)
        else:
            if current:
                paragraphs.append(current)
                current = []
            paragraphs.append(None)  # blank line
    if current:
        paragraphs.append(current)
    return paragraphs


def _fill_paragraph(lines, width):
    out = []
    prose = []

    def flush():
        if prose:
            joined = " ".join(part.strip() for part in prose)
            out.extend(
                textwrap.wrap(
                    joined,
                    width=width,
                    break_long_words=False,
                    break_on_hyphens=False,
                )
            )
            prose.clear()

    for line in lines:
        if _is_verbatim(line):
            flush()
            out.append(line)
        else:
            prose.append(line)
    flush()
    return out


def fill_message(text, width):
    """
    Refill the body paragraphs of a commit message at `width` columns.

    The subject line, comment lines, indented lines, list items and a
    closing trailer block (e.g. "Signed-off-by: ...") are left untouched.
    """
    lines = text.splitlines()
    if not lines:
        return text

    # Everything from the scissors line on is the verbose diff.
    tail = []
    if SCISSORS_LINE in lines:
        idx = lines.index(SCISSORS_LINE)
        lines, tail = lines[:idx], lines[idx:]

    # Leading blank lines are dropped by git's cleanup; the subject follows them.
    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1
    out = lines[:start + 1]
    paragraphs = _split_paragraphs(lines[start + 1:])

    # Only the last paragraph with non-comment text may be a trailer block.
    last_text = None
    for idx, para in enumerate(paragraphs):
        if para is not None and any(not line.startswith("#") for line in para):
            last_text = idx

    for idx, para in enumerate(paragraphs):
        if para is None:
            out.append("")
        elif idx == last_text and _is_trailer_block(para):
            out.extend(para)
        else:
            out.extend(_fill_paragraph(para, width))

    result = "\n".join(out + tail)
    if text.endswith("\n"):
        result += "\n"
    return result
