"""Generation over whole requests: every message of every file."""

import logging
from collections.abc import Iterable

from google.protobuf.compiler.plugin_pb2 import CodeGeneratorRequest, CodeGeneratorResponse

from .descriptors import file_spec
from .types import FileSpec, MessageSpec, OutputFile
from .typescript import render_message

logger = logging.getLogger(__name__)

OUTPUT_SUFFIX = ".d.ts"


def output_name(message_name: str) -> str:
    """Name of the declaration file generated for a message."""
    return message_name + OUTPUT_SUFFIX


def generate_message(message: MessageSpec) -> OutputFile:
    """Generate the declaration file for one message."""
    return OutputFile(name=output_name(message.name), content=render_message(message))


def generate(files: Iterable[FileSpec]) -> list[OutputFile]:
    """Generate one declaration file per message, in input order."""
    outputs: list[OutputFile] = []
    for proto_file in files:
        logger.debug("Generating %d message(s) from %s", len(proto_file.messages), proto_file.name)
        for message in proto_file.messages:
            outputs.append(generate_message(message))
            logger.debug("Generated %s", outputs[-1].name)
    return outputs


def process_request(request: CodeGeneratorRequest) -> CodeGeneratorResponse:
    """Answer a protoc plugin request."""
    if request.parameter:
        logger.debug("Ignoring plugin parameter: %s", request.parameter)

    outputs = generate(file_spec(proto_file) for proto_file in request.proto_file)

    response = CodeGeneratorResponse()
    # Proto3 optional fields arrive as one-member oneofs, which render as optional members
    response.supported_features = CodeGeneratorResponse.FEATURE_PROTO3_OPTIONAL
    for output in outputs:
        response_file = response.file.add()
        response_file.name = output.name
        response_file.content = output.content
    return response
