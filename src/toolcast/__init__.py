from .errors import (
    DecodeError,
    InvalidRecord,
    InvalidTypeTag,
    MalformedPayload,
    MissingField,
    ToolcastError,
    TypeMismatch,
    UnknownTool,
)
from .schema import (
    FieldSpec,
    PrimitiveType,
    RecordType,
    SchemaDocument,
    compile_schema,
    record,
    record_type,
)
from .structured import Outcome, decode_arguments, encode_arguments, resolve_tool_call
from .tools import ToolDescriptor, ToolRegistry, build_tool_descriptor, build_tool_descriptors
from .ports import AgentPort, AgentResponse, ToolCall
from .providers import LiteLLMAgent, Message
from .config import AgentSettings
from .client import StructuredClient

__all__ = [
    # Records
    "FieldSpec",
    "RecordType",
    "record",
    "record_type",
    "PrimitiveType",
    # Entry points
    "SchemaDocument",
    "compile_schema",
    "ToolDescriptor",
    "build_tool_descriptor",
    "build_tool_descriptors",
    "decode_arguments",
    "encode_arguments",
    "ToolRegistry",
    # Agent boundary
    "AgentPort",
    "AgentResponse",
    "ToolCall",
    "Message",
    "LiteLLMAgent",
    "AgentSettings",
    "StructuredClient",
    "Outcome",
    "resolve_tool_call",
    # Errors
    "ToolcastError",
    "InvalidTypeTag",
    "DecodeError",
    "MalformedPayload",
    "MissingField",
    "TypeMismatch",
    "UnknownTool",
    "InvalidRecord",
]
