"""Unit tests configuration file."""

import pytest
from google.protobuf.descriptor_pb2 import (
    DescriptorProto,
    FieldDescriptorProto,
    FileDescriptorProto,
    FileDescriptorSet,
)


def pytest_configure(config):
    """Disable verbose output when running tests."""
    terminal = config.pluginmanager.getplugin("terminal")
    if terminal:
        terminal.TerminalReporter.showfspath = False


def _make_field(name, field_type, *, json_name=None, type_name=None, repeated=False, oneof=None):
    field = FieldDescriptorProto(
        name=name,
        json_name=name if json_name is None else json_name,
        type=field_type,
        label=(
            FieldDescriptorProto.LABEL_REPEATED
            if repeated
            else FieldDescriptorProto.LABEL_OPTIONAL
        ),
    )
    if type_name is not None:
        field.type_name = type_name
    if oneof is not None:
        field.oneof_index = oneof
    return field


@pytest.fixture
def shape_file():
    shape = DescriptorProto(name="Shape")
    shape.field.append(_make_field("id", FieldDescriptorProto.TYPE_INT32))
    shape.field.append(
        _make_field("circle", FieldDescriptorProto.TYPE_MESSAGE, type_name="Circle", oneof=0)
    )
    shape.field.append(
        _make_field("square", FieldDescriptorProto.TYPE_MESSAGE, type_name="Square", oneof=0)
    )
    shape.oneof_decl.add(name="kind")

    circle = DescriptorProto(name="Circle")
    circle.field.append(_make_field("radius", FieldDescriptorProto.TYPE_DOUBLE))

    square = DescriptorProto(name="Square")
    square.field.append(_make_field("side", FieldDescriptorProto.TYPE_FLOAT))

    return FileDescriptorProto(name="shapes.proto", message_type=[shape, circle, square])


@pytest.fixture
def tags_file():
    tags = DescriptorProto(name="Tags")
    tags.field.append(_make_field("tags", FieldDescriptorProto.TYPE_STRING, repeated=True))
    return FileDescriptorProto(name="tags.proto", message_type=[tags])


@pytest.fixture
def descriptor_set_path(tmp_path, shape_file, tags_file):
    path = tmp_path / "schema.pb"
    path.write_bytes(FileDescriptorSet(file=[shape_file, tags_file]).SerializeToString())
    return path


@pytest.fixture
def make_field():
    return _make_field
