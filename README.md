# minicc

minicc reads source code written in a small subset of C. It splits the code into
tokens and recognises a handful of statement forms.

## Installation

```
pip install .
```

## Command line

```
minicc path/to/input.c
```

The command prints every token in the file, one per line, up to and including
the end-of-file token. Each line shows the numeric value of the token's
`TokenType` and its text:

```
Token: Type=0, Lexeme='int'
Token: Type=2, Lexeme='main'
...
Token: Type=21, Lexeme=''
```

If no file is given, the command prints `Usage: minicc <source_file>` and exits
with status 1. If the file cannot be opened, it writes `Failed to open file: ...`
to standard error and exits with status 1.

## Library

### Tokens

`minicc.tokens` defines `TokenType`, an `IntEnum` of token kinds, and `Token`, a
frozen dataclass holding a `type` and the `lexeme` text it was read from.

### Lexing

```python
from minicc.lexer import Lexer, lex, tokenize

for token in Lexer("int a = 10;"):
    print(token.type.name, token.lexeme)

tokens = lex("return a;")      # every token, ending with an EOF token
simple = tokenize("a + 1")     # the simpler scanner; no EOF token
```

`Lexer` reads one token at a time with `next_token()`; once the input is used
up it returns an `EOF` token on every call. Iterating over a `Lexer` yields
tokens up to and including the `EOF` token. A NUL character ends the input.

The lexer recognises the keywords `int`, `return`, `if`, `else`, `while`,
`for`, `continue`, `break`, `switch`, `case`, `default` and `struct`;
identifiers made of ASCII letters, digits and underscores; decimal numbers;
the punctuation `( ) { } ; ,`; the operators `+ - * /`, `=`, `==`, `!=`,
`<`, `<=`, `>` and `>=`. Any other character, including a lone `!`, becomes
an `UNKNOWN` token.

`tokenize` is a simpler scanner: only `int` and `return` are keywords,
identifiers hold letters and digits only, `*` and `/` become `MULTIPLY` and
`DIVIDE`, and any character it does not know (such as `=` or `<`) is skipped.

### Parsing

```python
from minicc.lexer import lex
from minicc.parser import parse_program

root = parse_program(lex("int a = 10"))
print(root.type.name, root.value)    # VAR_DECLARATION a
```

`Parser` recognises these statement forms:

- `int NAME = NUMBER` (the node holds the name)
- `NAME = NUMBER` (the node holds the name)
- `NAME ( ) {`, a function header (the node holds the name)
- `return NAME` or `return NUMBER` (the node holds the returned value)
- `if ( EXPR ) {` and `while ( EXPR ) {`, where `EXPR` is one name or number

Each recognised statement becomes an `ASTNode` with a `NodeType` and a value.
A `parse_*` method returns `None` at the first token that does not fit its form,
keeping the tokens it has already consumed.

`parse_program` parses statements until the tokens or an `EOF` token run out,
and returns the first statement it recognised. If it meets a token that begins
none of the forms above — a semicolon or a closing brace, for example — it
raises `ParseError`.

## What it does not do

minicc does not build a full syntax tree, check types, or generate code. The
parser only recognises the statement heads listed above, and the `minicc`
command only prints tokens.

## Tests

```
pip install ".[test]"
pytest
```