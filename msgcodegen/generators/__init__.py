# SPDX-License-Identifier: MIT
"""Source generators for msgcodegen."""

from msgcodegen.generators.generator import BaseGenerator, Generator
from msgcodegen.generators.msgcodes import MsgCodeGenerator

__all__ = [
    "BaseGenerator",
    "Generator",
    "MsgCodeGenerator",
]
