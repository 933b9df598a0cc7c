"""Human-readable labels from inline YAML comments.

A block sequence entry may carry a trailing comment that describes it::

    enum:
      - active    # Active account
      - archived

The comment text becomes the member label; entries without one use their
raw value.
"""

import yaml

COMMENT_MARKER = "#"
BLOCK_STYLES = ("|", ">")


def inline_comment(node: yaml.Node) -> str:
    """Return the comment following ``node`` on the same source line.

    Only works for nodes composed from an in-memory string, where marks
    carry the source buffer. Returns "" when there is no such comment.
    """
    # Block scalars end on the line after their content
    if node.style in BLOCK_STYLES:
        return ""

    mark = node.end_mark
    if mark is None or mark.buffer is None:
        return ""

    buffer = mark.buffer
    end = len(buffer)
    for terminator in ("\n", "\r", "\0"):
        position = buffer.find(terminator, mark.pointer)
        if position != -1:
            end = min(end, position)

    rest = buffer[mark.pointer:end].strip(" \t")
    if not rest.startswith(COMMENT_MARKER):
        return ""

    return rest


def member_label(node: yaml.ScalarNode) -> str:
    """Label for one enum entry: its inline comment, else its value."""
    comment = inline_comment(node)
    if comment.startswith(COMMENT_MARKER):
        comment = comment[len(COMMENT_MARKER):]
    label = comment.strip()

    return label or node.value
