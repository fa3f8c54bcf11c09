from typing import List, Tuple

from wcwidth import wcwidth

from .core import MAX_TEXT_WIDTH, MIN_BOX_WIDTH


def char_width(char: str) -> int:
    return max(wcwidth(char), 1)


def text_width(text: str) -> int:
    return sum(char_width(char) for char in text)


def _hard_break(word: str, limit: int) -> List[str]:
    chunks: List[str] = []
    current: List[str] = []
    current_width = 0
    for char in word:
        width = char_width(char)
        if current and current_width + width > limit:
            chunks.append("".join(current))
            current = []
            current_width = 0
        current.append(char)
        current_width += width
    if current:
        chunks.append("".join(current))
    return chunks


def wrap_text(text: str, max_width: int = MAX_TEXT_WIDTH) -> List[str]:
    """Wrap ``text`` into lines no wider than ``max_width`` display columns.

    Explicit line breaks start a new paragraph. Inside a paragraph words are
    packed greedily; a word wider than ``max_width`` is hard-broken into
    ``max_width``-sized chunks and its last chunk stays open for packing.
    An empty paragraph produces one empty line.
    """
    limit = max(max_width, 1)
    lines: List[str] = []

    for paragraph in text.split("\n"):
        words = paragraph.split()
        if not words:
            lines.append("")
            continue

        line = ""
        for word in words:
            if text_width(word) > limit:
                if line:
                    lines.append(line)
                chunks = _hard_break(word, limit)
                lines.extend(chunks[:-1])
                line = chunks[-1]
                continue
            if not line:
                line = word
            elif text_width(line) + 1 + text_width(word) <= limit:
                line = f"{line} {word}"
            else:
                lines.append(line)
                line = word
        lines.append(line)

    return lines


def calculate_node_size(text: str, max_width: int = MAX_TEXT_WIDTH) -> Tuple[int, int]:
    lines = wrap_text(text, max_width)
    height = len(lines) + 2
    width = max(text_width(line) for line in lines) + 4
    return max(width, MIN_BOX_WIDTH), height
