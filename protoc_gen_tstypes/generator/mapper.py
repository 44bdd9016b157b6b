"""Mapping from schema field types to TypeScript types."""

from google.protobuf.descriptor_pb2 import FieldDescriptorProto

from .types import (
    BOOLEAN,
    NUMBER,
    STRING,
    FieldSpec,
    GeneratorError,
    ScalarKind,
    TsFieldType,
    TsType,
)


class UnmappedScalarKindError(GeneratorError):
    """Raised when a field type has no TypeScript mapping."""


# Map descriptor field types to scalar kinds
DESCRIPTOR_KINDS: dict[int, ScalarKind] = {
    FieldDescriptorProto.TYPE_DOUBLE: ScalarKind.NUMERIC,
    FieldDescriptorProto.TYPE_FLOAT: ScalarKind.NUMERIC,
    FieldDescriptorProto.TYPE_INT64: ScalarKind.NUMERIC,
    FieldDescriptorProto.TYPE_UINT64: ScalarKind.NUMERIC,
    FieldDescriptorProto.TYPE_INT32: ScalarKind.NUMERIC,
    FieldDescriptorProto.TYPE_FIXED64: ScalarKind.NUMERIC,
    FieldDescriptorProto.TYPE_FIXED32: ScalarKind.NUMERIC,
    FieldDescriptorProto.TYPE_UINT32: ScalarKind.NUMERIC,
    FieldDescriptorProto.TYPE_SFIXED32: ScalarKind.NUMERIC,
    FieldDescriptorProto.TYPE_SFIXED64: ScalarKind.NUMERIC,
    FieldDescriptorProto.TYPE_SINT32: ScalarKind.NUMERIC,
    FieldDescriptorProto.TYPE_SINT64: ScalarKind.NUMERIC,
    FieldDescriptorProto.TYPE_STRING: ScalarKind.TEXTUAL,
    FieldDescriptorProto.TYPE_BYTES: ScalarKind.TEXTUAL,
    FieldDescriptorProto.TYPE_BOOL: ScalarKind.BOOLEAN,
    FieldDescriptorProto.TYPE_ENUM: ScalarKind.REFERENCE,
    FieldDescriptorProto.TYPE_MESSAGE: ScalarKind.REFERENCE,
    FieldDescriptorProto.TYPE_GROUP: ScalarKind.REFERENCE,
}

# Map scalar kinds to TypeScript primitives
PRIMITIVE_TYPE_MAP: dict[ScalarKind, TsType] = {
    ScalarKind.NUMERIC: NUMBER,
    ScalarKind.TEXTUAL: STRING,
    ScalarKind.BOOLEAN: BOOLEAN,
}


def scalar_kind(field_type: int) -> ScalarKind:
    """Classify a descriptor field type."""
    try:
        return DESCRIPTOR_KINDS[field_type]
    except KeyError:
        raise UnmappedScalarKindError(f"Unknown field type: {field_type}") from None


def map_scalar(field: FieldSpec) -> TsType:
    """Map a field's scalar kind to a TypeScript type.

    References are emitted by name, never inlined.
    """
    if field.kind == ScalarKind.REFERENCE:
        if not field.type_name:
            raise UnmappedScalarKindError(f"{field.key} references a type without a name")
        return TsType(field.type_name)

    try:
        return PRIMITIVE_TYPE_MAP[field.kind]
    except KeyError:
        raise UnmappedScalarKindError(f"{field.key} has unknown kind: {field.kind}") from None


def map_field_type(field: FieldSpec) -> TsFieldType:
    """Map a field to its TypeScript type, wrapping repeated fields in an array."""
    return TsFieldType(map_scalar(field), array=field.is_repeated)
