"""Descent over plainyaml tokens driven by an explicit frame stack.

The grammar is the recursive one: look at the token under the cursor and
decide what it starts.

- SCALAR: a Scalar leaf
- DASH: a Sequence of the nodes up to the end of the line
- INDENT: a Mapping of key/value pairs up to the closing DEDENT,
  which is left for the caller
- NEWLINE, COLON: nothing by themselves; forward to the next node
- DEDENT: consumed, produces nothing

Containers are kept on a list of frames (see ``frames.py``) instead of the
call stack, so arbitrarily deep nesting parses without RecursionError.

Malformed arrangements go through ``_malformed``, which the host parser
turns into either a debug log record or a ParseError (strict mode).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from plainyaml.nodes import Mapping, Scalar, Sequence
from plainyaml.parsing.frames import Frame, MappingFrame, SequenceFrame
from plainyaml.tokens import Token, TokenType

if TYPE_CHECKING:
    from plainyaml.config import ParseConfig
    from plainyaml.nodes import YAMLNode

# Tokens that end the item list of a single dash
_SEQUENCE_STOP = (TokenType.NEWLINE, TokenType.DEDENT)


class BlockParsingMixin:
    """Mixin for node, sequence and mapping parsing.

    Required Host Attributes:
        - _config: ParseConfig

    Required Host Methods:
        - _at_end() -> bool
        - _at(*types) -> bool
        - _advance() -> Token | None
        - _peek(offset) -> Token | None
        - _skip_ahead(token_type, offset) -> int
        - _malformed(token, message) -> None

    """

    _config: ParseConfig
    _current: Token | None

    def _parse_node(self) -> YAMLNode | None:
        """Parse the node starting at the cursor."""
        return self._drive([])

    def _parse_root_mapping(self) -> Mapping:
        """Parse the implicit document-level mapping."""
        return cast(Mapping, self._drive([MappingFrame(root=True)]))

    def _drive(self, stack: list[Frame]) -> YAMLNode | None:
        """Run the frame stack until the outermost node is complete.

        With an empty stack this parses one node from the cursor; with a
        pre-seeded frame it finishes that frame.
        """
        node: YAMLNode | None = None
        if not stack:
            node = self._open_node(stack)

        while stack:
            frame = stack[-1]
            if self._wants_child(frame):
                child = self._open_node(stack)
                if stack[-1] is frame:
                    self._attach(frame, child)
                continue

            stack.pop()
            node = self._close(frame)
            if stack:
                self._attach(stack[-1], node)

        return node

    def _open_node(self, stack: list[Frame]) -> YAMLNode | None:
        """Dispatch on the cursor token.

        Leaves are returned directly. A container pushes its frame onto
        ``stack`` and returns None; its node is produced when the frame
        closes. NEWLINE and COLON are skipped in a loop.
        """
        while (token := self._current) is not None:
            match token.type:
                case TokenType.SCALAR:
                    self._advance()
                    return Scalar(token.value)

                case TokenType.DASH:
                    self._advance()
                    stack.append(SequenceFrame(dash=token))
                    return None

                case TokenType.INDENT:
                    self._advance()
                    dash = self._current
                    if (
                        self._config.merge_sequences
                        and dash is not None
                        and dash.type is TokenType.DASH
                    ):
                        self._advance()
                        stack.append(SequenceFrame(dash=dash))
                    else:
                        stack.append(MappingFrame())
                    return None

                case TokenType.DEDENT:
                    self._advance()
                    return None

                case _:
                    self._advance()
        return None

    def _wants_child(self, frame: Frame) -> bool:
        if isinstance(frame, SequenceFrame):
            return self._sequence_wants_item(frame)
        return self._mapping_wants_value(frame)

    def _sequence_wants_item(self, frame: SequenceFrame) -> bool:
        """Decide whether the sequence takes another item.

        Each DASH yields its own Sequence. With ``merge_sequences`` the
        following sibling dashes (separated only by NEWLINEs) add their
        items to the same Sequence.
        """
        while True:
            if not self._at_end() and not self._at(*_SEQUENCE_STOP):
                return True
            if len(frame.items) == frame.start:
                self._malformed(frame.dash, "sequence entry has no value")
            if not (self._config.merge_sequences and self._at(TokenType.NEWLINE)):
                return False

            offset = self._skip_ahead(TokenType.NEWLINE)
            following = self._peek(offset)
            if following is None or following.type is not TokenType.DASH:
                return False
            for _ in range(offset + 1):
                self._advance()
            frame.dash = following
            frame.start = len(frame.items)

    def _mapping_wants_value(self, frame: MappingFrame) -> bool:
        """Consume tokens up to the next ``key:`` and report whether one was found.

        Stops without consuming at the block's DEDENT. At the root there is
        no enclosing block, so DEDENTs (closing nested blocks) are skipped
        and the mapping runs to the end of the tokens.
        """
        while (token := self._current) is not None:
            match token.type:
                case TokenType.DEDENT if not frame.root:
                    return False

                case TokenType.NEWLINE | TokenType.DEDENT:
                    self._advance()

                case TokenType.SCALAR:
                    self._advance()
                    if not self._at(TokenType.COLON):
                        self._malformed(token, f"expected ':' after key {token.value!r}")
                        continue
                    self._advance()
                    frame.key = token
                    return True

                case _:
                    self._malformed(
                        token, f"unexpected {token.type.name} where a mapping key was expected"
                    )
                    self._advance()
        return False

    def _attach(self, frame: Frame, node: YAMLNode | None) -> None:
        """Hand a finished child to its parent frame."""
        if isinstance(frame, SequenceFrame):
            if node is not None:
                frame.items.append(node)
            return

        key = frame.key
        frame.key = None
        if key is None:
            return
        if node is None:
            self._malformed(key, f"missing value for key {key.value!r}")
            return
        # Duplicate keys: the last value wins.
        frame.entries[key.value] = node

    def _close(self, frame: Frame) -> YAMLNode:
        if isinstance(frame, SequenceFrame):
            return Sequence(frame.items)
        return Mapping(frame.entries)

    def _malformed(self, token: Token, message: str) -> None:
        """Report a malformed arrangement. Implemented by Parser."""
        raise NotImplementedError
