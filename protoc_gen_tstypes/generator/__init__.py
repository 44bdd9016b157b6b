"""protoc-gen-tstypes declaration generator."""

from .classifier import GroupIndexError as GroupIndexError
from .classifier import classify as classify
from .driver import generate as generate
from .driver import process_request as process_request
from .mapper import UnmappedScalarKindError as UnmappedScalarKindError
from .mapper import map_field_type as map_field_type
from .mapper import map_scalar as map_scalar
from .types import *
from .typescript import render as render
from .typescript import synthesize_union as synthesize_union
