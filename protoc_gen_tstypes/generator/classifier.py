"""Partition of message fields into plain fields and oneof groups."""

from .types import FieldSpec, GeneratorError, MessageSpec


class GroupIndexError(GeneratorError):
    """Raised when a field references a oneof group its message does not declare."""


def classify(message: MessageSpec) -> tuple[list[FieldSpec], list[list[FieldSpec]]]:
    """Split a message's fields into plain fields and per-group member lists.

    Every declared group gets a list, even if no field references it.
    Input order is preserved within each bucket.
    """
    plain_fields: list[FieldSpec] = []
    groups: list[list[FieldSpec]] = [[] for _ in range(message.group_count)]

    for field in message.fields:
        if field.group_index is None:
            plain_fields.append(field)
            continue

        if not 0 <= field.group_index < message.group_count:
            raise GroupIndexError(
                f"{message.name}.{field.key} is in oneof {field.group_index}, "
                f"but {message.name} declares {message.group_count}"
            )
        groups[field.group_index].append(field)

    return plain_fields, groups
