import string


def column_number_to_label(column_number: int) -> str:
    """Convert a 1-based column number to its A1 letters (27 -> "AA")

    Returns an empty string for 0 or negative numbers.
    """
    label = ""
    while column_number > 0:
        column_number, remainder = divmod(column_number - 1, 26)
        label = string.ascii_uppercase[remainder] + label
    return label


def column_label_to_number(label: str) -> int:
    """Convert A1 column letters back to a 1-based column number ("AA" -> 27)"""
    number = 0
    for char in label.upper():
        if char not in string.ascii_uppercase:
            raise ValueError(f"Invalid column label: {label!r}")
        number = number * 26 + string.ascii_uppercase.index(char) + 1
    return number


def a1_range(sheet_name: str, start_col: int, start_row: int, end_col: int, end_row: int) -> str:
    """Build an A1 range selector such as "JUN!J4:K4" from numeric coordinates"""
    start = f"{column_number_to_label(start_col)}{start_row}"
    end = f"{column_number_to_label(end_col)}{end_row}"
    return f"{sheet_name}!{start}:{end}"
