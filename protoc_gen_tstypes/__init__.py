"""protoc-gen-tstypes - TypeScript type declarations from protobuf schemas."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("protoc-gen-tstypes")
except PackageNotFoundError:
    __version__ = "(local)"
