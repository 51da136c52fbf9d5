"""Core data types shared by the shell: tokens, redirections and syntax trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterable, List, Optional


class TokenType(Enum):
    """Kinds of token produced by the lexer."""

    AND = 0
    OR = 1
    IN = 2
    OUT = 3
    HEREDOC = 4
    APPEND = 5
    PIPE = 6
    WORD = 7
    EOL = 8
    LPAREN = 9
    RPAREN = 10


class ExitCode(IntEnum):
    """Exit statuses reported by the shell."""

    OK = 0
    KO = 1
    BUILTIN = 2
    EXEC = 126
    NOENT = 127
    INVAL = 128
    SEGV = 255


class AstType(Enum):
    """Kinds of node in the syntax tree."""

    CMD = 0
    AND = 1
    OR = 2
    PIPE = 3
    SUBSHELL = 4


class RedirType(Enum):
    """Kinds of input/output redirection."""

    IN = 0
    OUT = 1
    APPEND = 2
    HEREDOC = 3


@dataclass(frozen=True)
class Token:
    """A single lexical token."""

    word: Optional[str]
    type: TokenType


@dataclass
class Redir:
    """A redirection and the file (or heredoc body) it refers to."""

    type: RedirType
    filename: str


@dataclass
class AstNode:
    """A node of the syntax tree.

    Command nodes carry their words and redirections; operator nodes
    (and, or, pipe) carry two children; a subshell carries its body on
    the left and may have redirections of its own.
    """

    type: AstType
    left: Optional[AstNode] = None
    right: Optional[AstNode] = None
    redirs: List[Redir] = field(default_factory=list)
    command: List[str] = field(default_factory=list)

    def add_command(self, word: str) -> None:
        """Append a word to the command's argument list."""
        self.command.append(word)

    def add_redirs(self, redirs: Iterable[Redir]) -> None:
        """Append redirections, keeping their order."""
        self.redirs.extend(redirs)