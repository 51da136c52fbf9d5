import pytest

from minishell.shelltypes import (
    AstNode,
    AstType,
    ExitCode,
    Redir,
    RedirType,
    Token,
    TokenType,
)


@pytest.mark.parametrize(
    "code, member",
    [
        (0, ExitCode.OK),
        (1, ExitCode.KO),
        (2, ExitCode.BUILTIN),
        (126, ExitCode.EXEC),
        (127, ExitCode.NOENT),
        (128, ExitCode.INVAL),
        (255, ExitCode.SEGV),
    ],
)
def test_exit_codes_match_shell_conventions(code, member):
    assert ExitCode(code) is member


def test_exit_codes_follow_exec_in_sequence():
    assert ExitCode(ExitCode.EXEC + 1) is ExitCode.NOENT
    assert ExitCode(ExitCode.NOENT + 1) is ExitCode.INVAL


def test_unknown_exit_code_is_rejected():
    with pytest.raises(ValueError):
        ExitCode(3)


def test_token_type_order():
    names = [
        "AND", "OR", "IN", "OUT", "HEREDOC", "APPEND",
        "PIPE", "WORD", "EOL", "LPAREN", "RPAREN",
    ]
    assert [TokenType(i).name for i in range(len(names))] == names
    with pytest.raises(ValueError):
        TokenType(len(names))


def test_ast_and_redir_type_order():
    assert [AstType(i).name for i in range(5)] == [
        "CMD", "AND", "OR", "PIPE", "SUBSHELL",
    ]
    assert [RedirType(i).name for i in range(4)] == [
        "IN", "OUT", "APPEND", "HEREDOC",
    ]


def test_token_equality_and_immutability():
    tok = Token("echo", TokenType.WORD)
    assert tok == Token("echo", TokenType.WORD)
    assert tok != Token("echo", TokenType.PIPE)
    with pytest.raises(AttributeError):
        tok.word = "ls"  # type: ignore[misc]


def test_new_node_is_empty():
    node = AstNode(AstType.CMD)
    assert node.left is None
    assert node.right is None
    assert node.command == []
    assert node.redirs == []


def test_nodes_do_not_share_lists():
    a = AstNode(AstType.CMD)
    b = AstNode(AstType.CMD)
    a.add_command("ls")
    assert b.command == []


def test_add_command_keeps_order():
    node = AstNode(AstType.CMD)
    for word in ["echo", "hello", "world"]:
        node.add_command(word)
    assert node.command == ["echo", "hello", "world"]


def test_add_redirs_extends_in_order():
    node = AstNode(AstType.CMD)
    first = Redir(RedirType.IN, "in.txt")
    second = Redir(RedirType.APPEND, "out.txt")
    node.add_redirs([first])
    node.add_redirs(iter([second]))
    assert node.redirs == [first, second]


def test_operator_node_holds_children():
    left = AstNode(AstType.CMD, command=["ls"])
    right = AstNode(AstType.CMD, command=["wc"])
    pipe = AstNode(AstType.PIPE, left, right)
    assert pipe.left is left
    assert pipe.right is right
    assert pipe.left.command == ["ls"]