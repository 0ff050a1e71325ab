"""Terrific environment: configuration, loaders and exceptions."""

from terrific.environment.core import Environment
from terrific.environment.exceptions import (
    ErrorCode,
    InvalidInvocationData,
    SourceSnippet,
    TemplateError,
    TemplateNotFoundError,
    TemplateRuntimeError,
    TemplateSyntaxError,
    UndefinedError,
    UnresolvableTemplateError,
    build_source_snippet,
)
from terrific.environment.loaders import DictLoader, FunctionLoader, Loader

__all__ = [
    "DictLoader",
    "Environment",
    "ErrorCode",
    "FunctionLoader",
    "InvalidInvocationData",
    "Loader",
    "SourceSnippet",
    "TemplateError",
    "TemplateNotFoundError",
    "TemplateRuntimeError",
    "TemplateSyntaxError",
    "UndefinedError",
    "UnresolvableTemplateError",
    "build_source_snippet",
]
