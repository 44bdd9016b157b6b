"""Conversion of protobuf descriptors into generator types."""

from google.protobuf.descriptor_pb2 import (
    DescriptorProto,
    FieldDescriptorProto,
    FileDescriptorProto,
    FileDescriptorSet,
)

from .mapper import scalar_kind
from .types import FieldSpec, FileSpec, MessageSpec, Multiplicity
from .util import to_camel_case


def field_spec(field: FieldDescriptorProto) -> FieldSpec:
    """Convert a field descriptor."""
    return FieldSpec(
        key=field.json_name or to_camel_case(field.name),
        kind=scalar_kind(field.type),
        multiplicity=(
            Multiplicity.REPEATED
            if field.label == FieldDescriptorProto.LABEL_REPEATED
            else Multiplicity.SINGLE
        ),
        type_name=field.type_name or None,
        group_index=field.oneof_index if field.HasField("oneof_index") else None,
    )


def message_spec(message: DescriptorProto) -> MessageSpec:
    """Convert a message descriptor. Nested types are not included."""
    return MessageSpec(
        name=message.name,
        fields=[field_spec(field) for field in message.field],
        group_count=len(message.oneof_decl),
    )


def file_spec(proto_file: FileDescriptorProto) -> FileSpec:
    """Convert a file descriptor and its top-level messages."""
    return FileSpec(
        name=proto_file.name,
        messages=[message_spec(message) for message in proto_file.message_type],
    )


def load_descriptor_set(data: bytes) -> list[FileSpec]:
    """Decode a serialized FileDescriptorSet (protoc --descriptor_set_out)."""
    descriptor_set = FileDescriptorSet()
    descriptor_set.ParseFromString(data)
    return [file_spec(proto_file) for proto_file in descriptor_set.file]
