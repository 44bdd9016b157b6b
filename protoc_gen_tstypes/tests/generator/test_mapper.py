"""Tests for field type mapping."""

import pytest
from google.protobuf.descriptor_pb2 import FieldDescriptorProto

from protoc_gen_tstypes.generator.mapper import (
    DESCRIPTOR_KINDS,
    UnmappedScalarKindError,
    map_field_type,
    map_scalar,
    scalar_kind,
)
from protoc_gen_tstypes.generator.types import FieldSpec, Multiplicity, ScalarKind


def describe_scalar_kind():
    def classifies_every_numeric_encoding(expect):
        numeric = [
            FieldDescriptorProto.TYPE_DOUBLE,
            FieldDescriptorProto.TYPE_FLOAT,
            FieldDescriptorProto.TYPE_INT64,
            FieldDescriptorProto.TYPE_UINT64,
            FieldDescriptorProto.TYPE_INT32,
            FieldDescriptorProto.TYPE_FIXED64,
            FieldDescriptorProto.TYPE_FIXED32,
            FieldDescriptorProto.TYPE_UINT32,
            FieldDescriptorProto.TYPE_SFIXED32,
            FieldDescriptorProto.TYPE_SFIXED64,
            FieldDescriptorProto.TYPE_SINT32,
            FieldDescriptorProto.TYPE_SINT64,
        ]
        for field_type in numeric:
            expect(scalar_kind(field_type)) == ScalarKind.NUMERIC

    def classifies_string_and_bytes_as_textual(expect):
        expect(scalar_kind(FieldDescriptorProto.TYPE_STRING)) == ScalarKind.TEXTUAL
        expect(scalar_kind(FieldDescriptorProto.TYPE_BYTES)) == ScalarKind.TEXTUAL

    def classifies_bool(expect):
        expect(scalar_kind(FieldDescriptorProto.TYPE_BOOL)) == ScalarKind.BOOLEAN

    def classifies_named_types_as_references(expect):
        expect(scalar_kind(FieldDescriptorProto.TYPE_ENUM)) == ScalarKind.REFERENCE
        expect(scalar_kind(FieldDescriptorProto.TYPE_MESSAGE)) == ScalarKind.REFERENCE
        expect(scalar_kind(FieldDescriptorProto.TYPE_GROUP)) == ScalarKind.REFERENCE

    def covers_every_descriptor_type(expect):
        expect(len(DESCRIPTOR_KINDS)) == 18

    def rejects_unknown_types(expect):
        with pytest.raises(UnmappedScalarKindError):
            scalar_kind(0)
        with pytest.raises(UnmappedScalarKindError):
            scalar_kind(19)


def describe_map_scalar():
    def maps_primitives(expect):
        expect(str(map_scalar(FieldSpec("a", ScalarKind.NUMERIC)))) == "number"
        expect(str(map_scalar(FieldSpec("b", ScalarKind.TEXTUAL)))) == "string"
        expect(str(map_scalar(FieldSpec("c", ScalarKind.BOOLEAN)))) == "boolean"

    def keeps_reference_names_verbatim(expect):
        field = FieldSpec("point", ScalarKind.REFERENCE, type_name=".geo.Point")
        expect(str(map_scalar(field))) == ".geo.Point"

    def rejects_references_without_a_name(expect):
        with pytest.raises(UnmappedScalarKindError):
            map_scalar(FieldSpec("point", ScalarKind.REFERENCE))

    def is_stable_across_calls(expect):
        field = FieldSpec("a", ScalarKind.NUMERIC)
        expect(map_scalar(field)) == map_scalar(field)


def describe_map_field_type():
    def leaves_single_fields_unwrapped(expect):
        expect(str(map_field_type(FieldSpec("a", ScalarKind.BOOLEAN)))) == "boolean"

    def wraps_repeated_fields_in_readonly_arrays(expect):
        tags = FieldSpec("tags", ScalarKind.TEXTUAL, Multiplicity.REPEATED)
        expect(str(map_field_type(tags))) == "ReadonlyArray<string>"

    def wraps_repeated_references_too(expect):
        points = FieldSpec("points", ScalarKind.REFERENCE, Multiplicity.REPEATED, type_name="Point")
        expect(str(map_field_type(points))) == "ReadonlyArray<Point>"
