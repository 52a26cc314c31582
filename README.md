# rotten

The front end of a small scripting language. It turns `.rot` source into
tokens and parses an expression from them into a syntax tree. Any lexing or
parsing error is reported with its row, column and the offending lexeme.

## Installing

```
pip install .
```

## Command line

Check a script:

```
rotten path/to/script.rot
```

If the script lexes and parses cleanly, nothing is printed and the exit
status is 0. If the file cannot be read, or a lexing or parsing error occurs,
a message goes to standard error and the exit status is 1.

Start the interactive prompt by giving no script:

```
rotten
```

The prompt greets you with the version, shows `> `, lexes and parses each
line you type and prints any error. Type `.exit`, or end the input, to leave.

Show the version:

```
rotten --version
```

## Library use

```python
from rotten.lexer import scan
from rotten.parser import Parser

tokens = scan("1 + 2 * 3")
tree = Parser(tokens).parse()
```

`rotten.cli.run(source)` does both steps and returns the tree, and
`rotten.cli.run_file(path)` does the same for the contents of a file.

### Tokens

`scan` returns a list of `Token` objects (from `rotten.token`), each with:

- `kind`: a `TokenType`
- `value`: a `float` for numbers, the text between the quotes for strings,
  otherwise `None`
- `lexeme`: the source text of the token
- `position`: a `TokenPosition` with `row` and `column`, both counted from 1

The list always ends with an `END_OF_FILE` token. Identifiers start with a
letter or `_`; the keywords are `and`, `class`, `else`, `false`, `for`,
`fun`, `if`, `nil`, `or`, `return`, `super`, `this`, `true`, `var` and
`while`. Comments are written as `// to end of line` or `/* block */`.
Strings have no escape sequences and may span lines.

Lexing errors raise `rotten.lexer.LexerError`, whose `message` is a
`LexerErrorMessage` (unexpected character, unterminated string, or a number
that fails to parse). The error's text has the form:

```
[row:column] Error: Unexpected character.
@
```

### Parsing

`Parser(tokens).parse()` parses one expression from the start of the tokens.
The grammar, from lowest to highest precedence:

- equality: `==`, `!=`
- comparison: `>`, `>=`, `<`, `<=`
- term: `+`, `-`
- factor: `*`, `/`
- unary: `!`, `-`
- primary: numbers, strings, `true`, `false`, `nil`, parenthesised expressions

Binary operators associate to the left. `nil` is represented by the single
`rotten.token.Nil` instance. Parsing errors raise `rotten.parser.ParserError`,
whose `message` is a `ParserErrorMessage` and whose `token`, when set, is the
token where parsing failed.

### Syntax tree

The node classes live in `rotten.nodes`. The parser produces
`BinaryExpression`, `UnaryExpression`, `GroupingExpression` and
`LiteralExpression`. The module also defines node classes for assignment,
calls, property get and set, `this`, `super`, variables, logical operators
and the statements (block, class, expression, for, function, if, return, var,
while). Every node has an `accept(visitor)` method that calls the matching
`visit_*` method of an `ExpressionVisitor`, `StatementVisitor` or `Visitor`.

## What it does not do

- Nothing is evaluated: there is no interpreter behind the parser, so a
  script produces no output of its own.
- The parser reads a single expression. Statements, declarations, variables,
  calls and logical operators are not parsed, even though node classes for
  them exist, and tokens after the first expression are ignored.

## Running the tests

```
pip install .[test]
pytest
```