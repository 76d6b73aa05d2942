"""
CSV Tokenizer Module
Splits raw portfolio CSV text into rows of field values.

The content file is hand-edited, so this is a small quote-aware scanner
rather than a full RFC 4180 reader:

- Lines are split on newlines before quote scanning, so a quoted field
  holding a literal newline ends up split across two rows.
- A double quote toggles the "inside quotes" state and is never kept.
  A doubled quote ("") is not unescaped.
- Blank lines are dropped.
"""

import logging
from typing import List

logger = logging.getLogger(__name__)

QUOTE = '"'
SEPARATOR = ','
BOM = '\ufeff'


def split_lines(csv_text: str) -> List[str]:
    """Split text into lines, dropping lines that are blank after trimming.

    A leading byte-order mark is removed so the first header label matches.
    """
    if csv_text.startswith(BOM):
        csv_text = csv_text[len(BOM):]
    return [line for line in csv_text.split('\n') if line.strip()]


def clean_field(value: str) -> str:
    """Trim a field and strip at most one enclosing pair of quotes."""
    value = value.strip()
    if value.startswith(QUOTE):
        value = value[1:]
    if value.endswith(QUOTE):
        value = value[:-1]
    return value


def _scan(line: str):
    fields = []
    current = []
    inside_quotes = False

    for char in line:
        if char == QUOTE:
            inside_quotes = not inside_quotes
        elif char == SEPARATOR and not inside_quotes:
            fields.append(clean_field(''.join(current)))
            current = []
        else:
            current.append(char)

    return fields, ''.join(current)


def tokenize_header(line: str) -> List[str]:
    """
    Tokenize the header row into column labels.

    The trailing label is only kept when it is non-empty, so a header line
    ending in a comma does not produce a phantom empty column.
    """
    labels, remainder = _scan(line)
    if remainder.strip():
        labels.append(clean_field(remainder))
    return labels


def tokenize_row(line: str) -> List[str]:
    """Tokenize one data row. The trailing field is always kept."""
    values, remainder = _scan(line)
    values.append(clean_field(remainder))
    return values
