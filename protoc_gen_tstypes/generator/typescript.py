"""TypeScript declaration generator for protobuf messages."""

import logging

from jinja2 import Environment, PackageLoader

from .classifier import classify
from .mapper import map_field_type
from .types import NEVER, FieldSpec, GeneratedType, MessageSpec, TsField, TsFieldType, Variant

logger = logging.getLogger(__name__)

env = Environment(
    loader=PackageLoader("protoc_gen_tstypes.generator", "templates"),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)

template = env.get_template("typescript.d.ts.j2")


def _plain_member(field: FieldSpec) -> TsField:
    # Plain fields are always present once defaults are filled in,
    # whatever the wire-level label says.
    return TsField(field.key, map_field_type(field), required=True)


def _live_member(field: FieldSpec) -> TsField:
    return TsField(field.key, map_field_type(field), required=False)


def _forbidden_member(field: FieldSpec) -> TsField:
    return TsField(field.key, TsFieldType(NEVER), required=False)


def synthesize_union(group: list[FieldSpec]) -> list[Variant]:
    """Encode a oneof group as a union of object shapes.

    Variant i declares member i with its own type and every other member
    as ``never``, so no value can populate two members at once. The live
    member stays optional too: a value may leave the whole group unset.

    Returns one variant per member, each holding one entry per member.
    """
    return [
        [
            _live_member(other) if j == i else _forbidden_member(other)
            for j, other in enumerate(group)
        ]
        for i in range(len(group))
    ]


def build(
    name: str, plain_fields: list[FieldSpec], groups: list[list[FieldSpec]]
) -> GeneratedType:
    """Build the declaration model for classified fields."""
    for index, group in enumerate(groups):
        if not group:
            logger.warning("%s: oneof %d has no members, rendering it as never", name, index)

    return GeneratedType(
        name=name,
        plain_shape=[_plain_member(field) for field in plain_fields],
        group_unions=[synthesize_union(group) for group in groups],
    )


def render_type(generated: GeneratedType) -> str:
    """Render a declaration model to TypeScript source."""
    return template.render(
        name=generated.name,
        plain_shape=generated.plain_shape,
        group_unions=generated.group_unions,
    )


def render(name: str, plain_fields: list[FieldSpec], groups: list[list[FieldSpec]]) -> str:
    """Render classified fields to a TypeScript type alias declaration."""
    return render_type(build(name, plain_fields, groups))


def render_message(message: MessageSpec) -> str:
    """Classify and render a single message."""
    plain_fields, groups = classify(message)
    return render(message.name, plain_fields, groups)
