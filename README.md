# strkit

String helpers that work on plain Python `str` values. Every function
returns a new string or a value and leaves its input unchanged. All of them
live in the module `strkit.string_util`.

## Installation

```
pip install .
```

## Usage

```python
from strkit.string_util import (
    CaseMode,
    erase_chars,
    replace_string,
    trim_string,
    split_string,
    join_string,
    starts_with,
    match_pattern,
)

erase_chars("hello world", "ol")                  # 'he wrd'
replace_string("This is a test", "is", "was", 4)  # 'This was a test'
trim_string("!$$hello$$", "!$")                   # 'hello'
split_string("a, b,,c", ", ")                     # ['a', 'b', 'c']
join_string(["a", "b", "c"], "-")                 # 'a-b-c'
starts_with("hello", "HELL", CaseMode.ASCII_INSENSITIVE)  # True
match_pattern("hello world", "hello?world")       # True
```

## Functions

- `erase_chars(text, chars)` removes every character of `text` that appears
  in `chars`.
- `replace_string(text, find_with, replace_with, pos=0, replace_all=True)`
  replaces matches of `find_with`, searching from `pos`. With
  `replace_all=False` only the first match is replaced. If `pos` is `None`,
  or `pos` plus the length of `find_with` is past the end of `text`, the
  text comes back unchanged. An empty `find_with` or a negative `pos`
  raises `ValueError`.
- `trim_string`, `trim_leading_string` and `trim_tailing_string` remove
  characters in a set from both ends, the start, or the end of a string.
- `contains_only_chars(text, chars)` is true when `text` is empty or made
  only of characters in `chars`.
- `is_string_ascii_only(text)` is true when every character is ASCII.
- `ascii_string_to_lower` and `ascii_string_to_upper` change the case of
  ASCII letters only; other characters are left as they are.
- `ascii_string_compare_case_insensitive(lhs, rhs)` compares without regard
  to ASCII case and returns -1, 0 or 1.
- `ascii_string_equal_case_insensitive(lhs, rhs)` is true when the two
  strings are equal without regard to ASCII case.
- `starts_with(text, token, mode=CaseMode.SENSITIVE)` and
  `ends_with(text, token, mode=CaseMode.SENSITIVE)` test a prefix or suffix.
  `CaseMode.ASCII_INSENSITIVE` ignores ASCII case. A `mode` that is not a
  `CaseMode` raises `ValueError`.
- `split_string(text, delimiters)` splits on any character in `delimiters`
  and drops empty fields.
- `join_string(tokens, sep)` joins the tokens with `sep` between each pair.
- `match_pattern(text, pattern)` is a case-sensitive wildcard match: `*`
  matches any run of zero or more characters, and `?` matches exactly one
  character other than `.`.

## Running the tests

```
pip install .[test]
pytest
```