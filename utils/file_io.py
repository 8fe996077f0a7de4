import logging
import os
from pathlib import Path


class MangleIOError(Exception):
    """Raised when the wordlist or output file cannot be opened, read or written."""
    pass


def strip_terminator(line):
    # LF or CRLF only; a lone CR stays part of the word
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


# Load the whole wordlist into memory, one word per line
def load_wordlist(path_to_words, encoding="utf-8"):
    """
    Read every line of the wordlist before any mangling starts.

    Only the line terminator is removed; words are not stripped or validated.
    """
    path_to_words = Path(path_to_words)
    try:
        with path_to_words.open("r", encoding=encoding, newline="\n") as file:
            words = [strip_terminator(line) for line in file]
    except FileNotFoundError as e:
        raise MangleIOError(f"{path_to_words} - File not found.") from e
    except (UnicodeDecodeError, LookupError) as e:
        raise MangleIOError(f"{path_to_words} - Cannot decode as {encoding}: {e}") from e
    except OSError as e:
        raise MangleIOError(f"{path_to_words} - {e.strerror or e}") from e

    if not words:
        logging.warning(f"Empty file. Nothing to mangle in {path_to_words}.")
    logging.debug(f"Loaded {len(words)} words from {path_to_words}")
    return words


def open_output(output_path, encoding="utf-8", truncate=True):
    """
    Open the output file for writing, creating it when absent.

    With truncate=False the file is opened without truncation, so bytes left
    over from a longer previous file survive past the new output.
    """
    output_path = Path(output_path)
    flags = os.O_WRONLY | os.O_CREAT
    if truncate:
        flags |= os.O_TRUNC
    try:
        fd = os.open(output_path, flags, 0o666)
    except OSError as e:
        raise MangleIOError(f"{output_path} - {e.strerror or e}") from e
    return os.fdopen(fd, "w", encoding=encoding, newline="\n")


def write_variants(output, variants):
    """Write one variant per line and flush, so each input line lands on disk as it finishes."""
    try:
        for variant in variants:
            output.write(variant + "\n")
        output.flush()
    except UnicodeEncodeError as e:
        raise MangleIOError(f"Cannot encode variant: {e}") from e
    except OSError as e:
        raise MangleIOError(f"Write failed: {e.strerror or e}") from e
    return len(variants)

