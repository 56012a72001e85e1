# textops

`textops` is an interactive console program that works on one piece of text. You pick an operation from a numbered menu. The text stays in memory between operations, so you can apply several edits in a row.

## Installation

```
pip install .
```

## Running

```
textops
```

`textops --help` shows the usage line. The command takes no other options.

Here is the menu:

| Choice | Operation | What it does |
|-------:|-----------|--------------|
| 1 | Replace | Asks for a new text. Then it replaces `length` characters from position `pos` with new text. |
| 2 | Find | Reports the 1-based position of the first occurrence of a word, or "Not found". |
| 3 | Remove | Erases `length` characters starting at `pos`. |
| 4 | Gender by name | Guesses the gender of a Polish first name. A name ending in "a" or "A" is Female and any other is Male. |
| 5 | Reverse | Reverses the text. |
| 6 | Concatenate | Appends a line of text to the end. |
| 7 | Insert | Inserts text at `pos`. Any position from 1 to length + 1 is accepted. |
| 8 | Copy | Shows the `length` characters starting at `pos`. |
| 9 | ASCII converter | Shows the character code of the first non-blank character entered. |
| 10 | Uppercase | Converts the ASCII letters of the text to upper case. |
| 11 | Lowercase | Converts the ASCII letters of the text to lower case. |
| 12 | Save to file | Writes the text to the named file and replaces the file's contents. |
| 13 | Load from file | Replaces the text with the contents of a file, up to its first NUL character. |
| 14 | Help | Shows a short summary of the operations. |
| 15 | Exit | Quits the program. |

Some operations need an existing text: Find, Remove, Reverse, Concatenate, Insert, Copy, Uppercase, Lowercase and Save. If the text is empty, each of these first asks you to type it.

### How input and errors work

- Positions are 1-based.
- If a position or length falls outside the text, the operation is rejected. The failure is appended, with a timestamp, to `string_operations.log` in the current directory.
- An error message is written to standard error, and you return to the menu after pressing Enter. This happens in two cases:
  - a menu choice or position is not a number;
  - a menu choice is not between 1 and 15.
- The program exits at the end of input. It also exits on Ctrl-C, with status 130.
- Colours and screen clearing are used only when output goes to a terminal.

## Using it as a library

```python
from textops.operations import TextBuffer, OperationError, guess_gender, ascii_code

buf = TextBuffer("Hello world")
buf.replace(7, 5, "there")    # "Hello there"
buf.find("there")             # 7
buf.insert(1, ">> ")          # ">> Hello there"
buf.copy(4, 5)                # "Hello"
buf.to_upper()                # ">> HELLO THERE"
buf.reverse()                 # "EREHT OLLEH >>"

try:
    buf.remove(100, 1)
except OperationError as exc:
    print(exc)                # "Remove operation error"

guess_gender("Anna")          # "Female"
ascii_code("A")               # 65
```

`TextBuffer` methods:

- `replace`, `remove`, `insert`, `concat`, `reverse`, `to_upper`, `to_lower` and `load` change `buf.text` and return the new text.
- `copy` and `find` leave the text unchanged.
- `save(filename)` writes the text to a file.

Failures raise `OperationError`, a subclass of `RuntimeError`.

Errors are logged to the file given by `log_path`, which defaults to `string_operations.log`. Pass `log_path=None` to turn logging off.

### Driving the menu from code

`textops.cli.Session` takes three arguments:

- a `TextBuffer`;
- an input function that returns one line per call;
- an output stream.

`run_choice(n)` carries out a single menu choice. It returns `False` for choice 15. `loop()` runs the whole menu until you exit or input ends.

`textops.console` holds the terminal helpers: `Color`, `set_color`, `draw_line`, `clear_screen` and `wait_for_key_press`.

## Running the tests

```
pip install .[test]
pytest
```