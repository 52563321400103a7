"""Split long reports into message-sized chunks.

Telegram caps messages at 4096 characters; reports are cut on line
boundaries a little below that.
"""

DEFAULT_MAX_CHUNK_SIZE = 4000


def split_into_chunks(report: str, max_size: int = DEFAULT_MAX_CHUNK_SIZE) -> list[str]:
    """Split text into chunks of at most max_size characters.

    Lines are never split. A line longer than max_size on its own is
    emitted as a chunk by itself. Joining the chunks gives back the
    original text exactly.

    Args:
        report: Text to split
        max_size: Maximum chunk length in characters

    Returns:
        Ordered list of chunks (empty for empty text)
    """
    if max_size < 1:
        raise ValueError(f"max_size must be at least 1, got {max_size}")

    chunks = []
    current = ""
    # Only "\n" ends a line; other separators stay inside it
    lines = [line + "\n" for line in report.split("\n")]
    lines[-1] = lines[-1][:-1]

    for line in lines:
        if not line:
            continue
        if current and len(current) + len(line) > max_size:
            chunks.append(current)
            current = ""
        current += line

    if current:
        chunks.append(current)
    return chunks
