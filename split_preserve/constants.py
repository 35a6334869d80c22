"""Constants for split_preserve - program metadata and character tables."""

# Program metadata
PROGRAM_NAME = "split-preserve"

# Code points with the Unicode Derived Core Property White_Space.
# str.isspace() additionally accepts U+001C..U+001F, which are not listed here.
WHITE_SPACE = frozenset(
    [
        "\u0009",  # CHARACTER TABULATION
        "\u000a",  # LINE FEED
        "\u000b",  # LINE TABULATION
        "\u000c",  # FORM FEED
        "\u000d",  # CARRIAGE RETURN
        " ",  # SPACE
        "\u0085",  # NEXT LINE
        "\u00a0",  # NO-BREAK SPACE
        "\u1680",  # OGHAM SPACE MARK
        *(chr(cp) for cp in range(0x2000, 0x200B)),  # EN QUAD..HAIR SPACE
        "\u2028",  # LINE SEPARATOR
        "\u2029",  # PARAGRAPH SEPARATOR
        "\u202f",  # NARROW NO-BREAK SPACE
        "\u205f",  # MEDIUM MATHEMATICAL SPACE
        "\u3000",  # IDEOGRAPHIC SPACE
    ]
)
