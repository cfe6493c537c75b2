# templdata

Building blocks for feeding data into text templates: generic collections, string
helpers, conversion of text into data, and assembly of a template context from
variable files and `name=value` pairs.

## Installation

```
pip install templdata
```

The only runtime dependency is PyYAML.

## What is in the package

- `templdata.generic_list`: `BaseList`, a `list` subclass whose operations return new
  lists and compare elements by their rendered text: `append_items`, `prepend_items`,
  `union`, `intersect`, `unique`, `without`, `get` (negative indexes count from the
  end, out-of-range indexes give `None`), `first`, `last`, `pop_items`,
  `remove_indexes`, `reversed_copy`, `set` (enlarges the list with `None`), `join`,
  `strings`, `string_array`. Importing this module registers the default helpers.
- `templdata.generic_dict`: `BaseDict`, a `dict` subclass with string keys: `set`,
  `add` (an existing value becomes a list), `fetch`, `default`, `has`, `delete`
  (raises `KeyError` for a missing key), `flush`, `pop_keys`, `clone`, `omit`,
  `merge` (existing values are kept, nested dictionaries merged), `transpose`,
  `get_keys` / `get_values` / `keys_as_string` (alphabetical order), `native`.
  It renders as `dict[key:value ...]` with sorted keys.
- `templdata.base`: `BaseHelper`, which creates lists and dictionaries and converts
  arbitrary mappings and sequences into them, and `need_conversion`.
- `templdata.registry`: the process-wide helper pair (`set_helpers`, `get_helpers`)
  and the functions that use it: `as_dictionary`, `try_as_dictionary`,
  `create_dictionary`, `as_list`, `try_as_list`, `create_list`, `new_list`,
  `new_string_list`.
- `templdata.text`: `String`, a `str` subclass with word and context selection
  (`select_word`, `get_word_at_position`, `select_context`,
  `get_context_at_position`), quoted-string protection (`protect`,
  `restore_protected`), `index_all`, `add_line_number`, `parse_bool`, `quote`,
  `escape`, splitting and trimming helpers.
- `templdata.string_array`: `StringArray`, a list of strings whose methods apply a
  string operation to every element.
- `templdata.string_util`: `sprint`, `wrap_string`, `center_string`, `unindent`,
  `indent`, `indent_n`, `split2`, `split_lines`, `join_lines`, `concat`,
  `to_strings`, `pretty_print_struct` and more.
- `templdata.utils`: `is_empty_value`, `if_undef`, `iif`, `default`.
- `templdata.convert_data`: `convert_data` and `load_data` turn JSON, YAML or the
  relaxed `a = 10 b = Foo` form into Python values; `register_converter` adds or
  removes converters (tried in alphabetical order of their names); `marshal_go`
  flattens objects and dataclasses into plain values, honouring `hcl`/`json`/`yaml`/
  `xml`/`toml` field metadata tags with `omitempty`, `inline`, `squash` and `key`;
  `to_bash` renders values as bash 4 declarations.
- `templdata.context`: `create_context` builds one dictionary from required variable
  files, optional variable files and `name=value` arguments; `-` reads from standard
  input.
- `templdata.errors`: `ErrorArray` (several errors reported as one), `ManagedError`,
  `TemplateNotFoundError`, `must`, `trap`, `raise_error`, `print_error`, `printf`.

## Examples

```python
from templdata.text import String
from templdata.string_util import wrap_string
from templdata.convert_data import convert_data, to_bash

String("Find the $third word").select_word(10)            # "$third"
String("Test (with (inner) text)").select_context(7, "(", ")")
String("Off").parse_bool()                                 # False

print(wrap_string("Lorem ipsum dolor sit amet", 11))

convert_data("a = 10 b = Foo")                             # {"a": 10, "b": "Foo"}
print(to_bash({"A": [1, "2"], "I": 123}))
# declare -a A
# A=(1 2)
# I=123
```

```python
from templdata.generic_list import BaseList
from templdata.generic_dict import BaseDict

BaseList([1, 2, 3]).union(3, 4)                            # [1, 2, 3, 4]
str(BaseDict({"A": 1, "B": 2, "C": 1}).transpose())        # "dict[1:[A C] 2:B]"
```

```python
from templdata.context import create_context

context = create_context(["vars.yaml"], [], ["env=prod", "replicas=3"], "", False)
```

A required file that is missing raises `ManagedError` unless `ignore_missing_files`
is true; optional files that are missing are skipped.

## What it does not do

This is a library only. It has no command-line program and does not render
templates itself. Out of the box `convert_data` understands JSON, YAML and the relaxed
assignment form; other formats such as HCL need a converter added with
`register_converter`.

## Running the tests

```
pip install "templdata[test]"
pytest
```