import pytest

from minicc.lexer import lex, tokenize
from minicc.parser import ASTNode, NodeType, ParseError, Parser, parse_program

INPUT_C = """int main() {
    int a = 10;
    if (a > 5) {
        return a;
    }
    return 0;
}
"""


def parser_for(source):
    return Parser(lex(source))


def test_var_declaration():
    parser = parser_for("int a = 10")
    assert parser.parse_var_declaration() == ASTNode(NodeType.VAR_DECLARATION, "a")
    assert parser.index == 4


def test_var_declaration_stops_at_mismatch():
    parser = parser_for("int main ( )")
    assert parser.parse_var_declaration() is None
    assert parser.index == 2


def test_var_declaration_requires_number():
    parser = parser_for("int a = b")
    assert parser.parse_var_declaration() is None
    assert parser.index == 3


def test_var_assignment():
    parser = parser_for("x = 5")
    assert parser.parse_var_assignment() == ASTNode(NodeType.VAR_ASSIGNMENT, "x")
    assert parser.index == 3


def test_function_def():
    parser = parser_for("main ( ) {")
    assert parser.parse_function_def() == ASTNode(NodeType.FUNCTION_DEF, "main")
    assert parser.index == 4


def test_function_def_with_parameters_fails():
    parser = parser_for("f ( a ) {")
    assert parser.parse_function_def() is None
    assert parser.index == 2


@pytest.mark.parametrize("value", ["a", "0"])
def test_return_statement(value):
    parser = parser_for(f"return {value}")
    assert parser.parse_return_statement() == ASTNode(NodeType.RETURN_STATEMENT, value)


def test_return_without_value():
    parser = parser_for("return ;")
    assert parser.parse_return_statement() is None
    assert parser.index == 1


def test_if_statement():
    parser = parser_for("if ( a ) {")
    assert parser.parse_if_statement() == ASTNode(NodeType.IF_STATEMENT, "if")
    assert parser.index == 5


def test_if_with_comparison_is_not_recognised():
    parser = parser_for("if (a > 5) {")
    assert parser.parse_if_statement() is None
    assert parser.index == 3


def test_while_statement():
    parser = parser_for("while ( 1 ) {")
    assert parser.parse_while_statement() == ASTNode(NodeType.WHILE_STATEMENT, "while")


def test_expression():
    assert parser_for("42").parse_expression() == ASTNode(NodeType.EXPRESSION, "42")
    assert parser_for("(").parse_expression() is None


def test_statement_dispatch():
    assert parser_for("x = 1").parse_statement().type is NodeType.VAR_ASSIGNMENT
    assert parser_for("f ( ) {").parse_statement().type is NodeType.FUNCTION_DEF
    assert parser_for("while ( x ) {").parse_statement().type is NodeType.WHILE_STATEMENT


def test_statement_unknown_does_not_advance():
    parser = parser_for("foo bar")
    assert parser.parse_statement() is None
    assert parser.index == 0


def test_parse_program_returns_first_statement():
    root = parse_program(lex("x = 1 return 2"))
    assert root == ASTNode(NodeType.VAR_ASSIGNMENT, "x")


def test_parse_program_without_eof_token():
    assert parse_program(tokenize("return 0")) == ASTNode(NodeType.RETURN_STATEMENT, "0")


def test_parse_program_empty():
    assert parse_program(lex("")) is None
    assert parse_program([]) is None


def test_parse_program_stuck_on_semicolon():
    with pytest.raises(ParseError):
        parse_program(lex("int a = 10;"))


def test_parse_program_input_file_cannot_progress():
    with pytest.raises(ParseError, match=r"'\('"):
        parse_program(lex(INPUT_C))