"""Type definitions for schema translation and declaration rendering."""

from dataclasses import dataclass, field
from enum import StrEnum, auto

from dataclasses_json import DataClassJsonMixin


class GeneratorError(RuntimeError):
    """Raised when a schema cannot be translated into type declarations."""


class ScalarKind(StrEnum):
    """Target-relevant classification of a schema field's type."""

    NUMERIC = auto()  # every integer and floating-point encoding
    TEXTUAL = auto()  # string and bytes
    BOOLEAN = auto()
    REFERENCE = auto()  # enum, message or group, named by type_name


class Multiplicity(StrEnum):
    """Whether a field holds one value or a sequence of values."""

    SINGLE = auto()
    REPEATED = auto()


@dataclass
class FieldSpec(DataClassJsonMixin):
    """Represents one schema field.

    - type_name: qualified name of the referenced type, set for REFERENCE kinds
    - group_index: index into the owning message's oneof list, None for plain fields
    """

    key: str
    kind: ScalarKind
    multiplicity: Multiplicity = Multiplicity.SINGLE
    type_name: str | None = None
    group_index: int | None = None

    @property
    def is_repeated(self) -> bool:
        return self.multiplicity == Multiplicity.REPEATED


@dataclass
class MessageSpec(DataClassJsonMixin):
    """Represents one message type and its declared oneof groups."""

    name: str
    fields: list[FieldSpec] = field(default_factory=list)
    group_count: int = 0


@dataclass
class FileSpec(DataClassJsonMixin):
    """Represents one schema file."""

    name: str
    messages: list[MessageSpec] = field(default_factory=list)


@dataclass(frozen=True)
class OutputFile(DataClassJsonMixin):
    """A generated file: name plus text content."""

    name: str
    content: str


@dataclass(frozen=True)
class TsType:
    """A TypeScript type token: a primitive keyword or a type reference."""

    name: str

    def __str__(self) -> str:
        return self.name


NUMBER = TsType("number")
STRING = TsType("string")
BOOLEAN = TsType("boolean")
NEVER = TsType("never")


@dataclass(frozen=True)
class TsFieldType:
    """A mapped type, optionally wrapped in a read-only array."""

    type: TsType
    array: bool = False

    def __str__(self) -> str:
        if self.array:
            return f"ReadonlyArray<{self.type}>"
        return str(self.type)


@dataclass(frozen=True)
class TsField:
    """A single member of an object shape."""

    key: str
    type: TsFieldType
    required: bool

    def __str__(self) -> str:
        if self.required:
            return f"{self.key}: {self.type};"
        return f"{self.key}?: {self.type};"


# One object shape inside a oneof union; exactly one member is live.
Variant = list[TsField]


@dataclass(frozen=True)
class GeneratedType:
    """Rendered-ready declaration for one message.

    plain_shape holds the always-present members. group_unions holds one
    union per oneof group, in group index order; each union holds one
    variant per group member.
    """

    name: str
    plain_shape: list[TsField]
    group_unions: list[list[Variant]]
