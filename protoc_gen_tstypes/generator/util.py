"""Identifier helpers."""


def to_camel_case(name: str) -> str:
    """Convert a snake_case field name to lowerCamelCase.

    Follows protoc's JSON name rule: underscores are dropped and the
    following character is upper-cased; the first character is kept as-is.
    """
    result: list[str] = []
    capitalize_next = False
    for char in name:
        if char == "_":
            capitalize_next = True
        elif capitalize_next:
            result.append(char.upper())
            capitalize_next = False
        else:
            result.append(char)
    return "".join(result)
