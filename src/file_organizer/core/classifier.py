"""Extension based classification of directory entries."""

UNKNOWN_LABEL = "unknown"


def extension_label(file_name: str, unknown_label: str = UNKNOWN_LABEL) -> str:
    """
    Derive the extension label of a file name.

    The label is the lowercased text after the final dot. Names without a
    usable extension map to ``unknown_label``:

    - no dot at all (``notes``)
    - a single leading dot (``.bashrc``)
    - a trailing dot (``draft.``)
    - an extension that cannot be encoded as text, which happens for names
      decoded by the OS with surrogate escapes

    Args:
        file_name: Bare file name, not a path
        unknown_label: Label used when no extension is found

    Returns:
        Lowercase label without the leading dot
    """
    stem, dot, suffix = file_name.rpartition('.')
    if not dot or not stem or not suffix:
        return unknown_label

    try:
        suffix.encode('utf-8')
    except UnicodeEncodeError:
        return unknown_label

    return suffix.lower()


def lossy_text(text: str) -> str:
    """
    Replace undecodable bytes carried as surrogate escapes with U+FFFD.

    File names the OS could not decode keep their raw bytes as lone
    surrogates, which cannot be written to a UTF-8 stream.
    """
    try:
        return text.encode('utf-8', 'surrogateescape').decode('utf-8', 'replace')
    except UnicodeEncodeError:
        return text.encode('utf-8', 'replace').decode('utf-8')
