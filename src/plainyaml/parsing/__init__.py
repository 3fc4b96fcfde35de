"""Parsing mixins for plainyaml.

- TokenNavigationMixin: cursor movement over the token list
- BlockParsingMixin: node, sequence and mapping grammar
"""

from plainyaml.parsing.blocks import BlockParsingMixin
from plainyaml.parsing.token_nav import TokenNavigationMixin

__all__ = ["BlockParsingMixin", "TokenNavigationMixin"]
