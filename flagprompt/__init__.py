#!/usr/bin/env python3
# flagprompt/__init__.py
from __future__ import annotations
"""
Flag suggestion engine and typed-value coercion for interactive prompts.

Subpackages expose their own APIs:
- flagprompt.handlers:  Suggest / HandlerInfo descriptions
- flagprompt.interface: fuzzy matching, suggestion filtering, completer
- flagprompt.convert:   scalar kinds, overflow-checked conversion
"""

import logging

from flagprompt.convert import Scalar, ScalarKind, coerce_text, convert_param  # noqa: F401
from flagprompt.errors import (  # noqa: F401
    ConversionError,
    DomainMismatchError,
    InvalidLiteralError,
    RangeOverflowError,
)
from flagprompt.handlers import HandlerInfo, Suggest  # noqa: F401
from flagprompt.interface import get_handler_suggests, is_match  # noqa: F401

__version__ = "0.1.0"

# Library logging stays silent unless the host application configures handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())
