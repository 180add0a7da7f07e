# gox

Small helpers that need only the standard library. They cover the chores that
come up in most projects: checking bytes, pulling numbers out of text,
comparing and diffing lists, listing directories, reading values out of JSON
by path, working with ISO weeks, stepping through spreadsheet column names,
zipping files, and checking IP addresses and URLs.

Each topic has its own module, so you import only what you need.

## Modules

| Module | What it provides |
| --- | --- |
| `gox.bytex` | `is_empty`, `is_blank`, `to_string`, and `starts_with` / `ends_with` / `contains` that test against several byte strings, with or without case |
| `gox.cryptox` | `crc32`, `md5` and `sha1` of a string |
| `gox.extractx` | `number` and `numbers` for values written like `1,234.56`, plus `to_int`, `to_int8` … `to_int64`, `to_float32` and `to_float64`, which give 0 when nothing fits |
| `gox.filex` | `is_file`, `is_dir`, `exists` and `size`. None of them raise |
| `gox.filepathx` | `dirs` and `files` with a `WalkOption` (filter function, `only`, `exclude`, case sensitivity, recursion), `generate_dir_names`, and `ext`, which guesses an extension from a file's content |
| `gox.inx` | `is_in`, `int_in`, and `string_in`, which ignores case |
| `gox.pathx` | `filename_without_ext` |
| `gox.randx` | `letter`, `number` and `any_chars`: random strings from a secure source |
| `gox.mapx` | `keys` (sorted, as strings) and `string_map_string_encode` (query string with sorted keys) |
| `gox.setx` | `to_set`, `to_int_set` and `to_string_set`: remove duplicates |
| `gox.nullx` | `string_from` / `null_string` and `time_from` / `null_time`. A blank string or the zero time becomes `None` |
| `gox.fmtx` | `pretty_print`, `pretty_println` and `spretty_print`: values as JSON indented by four spaces |
| `gox.keyx` | `generate`, which builds a key from any mix of values, sequences, mappings and dataclasses |
| `gox.slicex` | `map_values`, `filter_values`, `string_slice_equal`, `int_slice_equal`, reversing, `diff` / `string_slice_diff` / `int_slice_diff`, and `chunk` |
| `gox.spreedsheetx` | `Column`, a cursor over column names `A` … `XFD`, and `ColumnError` |
| `gox.timex` | day, month and ISO-week boundaries, `between`, `is_am` / `is_pm`, `x_iso_week` (weeks start on Sunday), a US daylight-saving check, and `chinese_time_location` |
| `gox.zipx` | `compress` and `uncompress` |
| `gox.isx` | `empty`, `equal`, `safe_characters`, `http_url`, `color_hex` and `is_os` |
| `gox.urlx` | `URL` with editable query values, plus `is_absolute` and `is_relative` |
| `gox.ipx` | `remote_addr` (client address from proxy headers), `local_addr`, `is_private` / `is_public`, `number` / `to_string` (IPv4 to integer and back), and `random_ip` |
| `gox.htmlx` | `tag`, which builds an HTML element from a tag name, content, attributes and styles |
| `gox.jsonx` | `to_json`, `to_pretty_json`, `to_raw_message`, empty raw messages and `is_empty_raw_message`, `convert`, and `extract`, which finds JSON inside other text |
| `gox.jsonparser` | `Parser` and `ParseFinder`, for reading values by dotted path |

## Examples

Pulling numbers out of text:

```python
from gox import extractx

extractx.number("1,234.3")            # "1234.3"
extractx.numbers("$100,$200")         # ["100", "200"]
extractx.number("1.0 out of 5 stars") # "1.0"
```

Working with lists:

```python
from gox import slicex

slicex.chunk([1, 2, 3], 2)                       # [[1, 2], [3]]
slicex.string_slice_diff(["a", "b", "c"], ["a"]) # ["b", "c"]
slicex.int_slice_equal([0, 1, 2], [2, 1, 0])     # True
```

Stepping through spreadsheet columns:

```python
from gox.spreedsheetx import Column

column = Column("A")
column.next()
column.name           # "B"
column.to("ZZ")
column.right_shift(2)
column.name           # "AAB"
column.end_name       # "AAB"
```

Moving past the last column (`XFD`) or before the first (`A`) raises
`ColumnError`, and so does an invalid column name.

Reading JSON by path, with a default when the path is missing:

```python
from gox.jsonparser import Parser

parser = Parser('{"a": {"b": {"c": [1, 2, 3]}}}')
parser.find("a.b.c.2").to_int()   # 3
parser.find("a.x", 7).to_int()    # 7
str(parser.find("a.b"))           # '{"c":[1,2,3]}'
parser.exists("a.b.c.1")          # True
```

Finding the JSON inside other text:

```python
from gox import jsonx

jsonx.extract('{"a": 1, "b": 2}}}}a')   # '{"a": 1, "b": 2}'
jsonx.to_json(None, "[]")               # "[]"
```

`extract` raises `ValueError` when the text is blank or holds no JSON.

ISO weeks:

```python
from gox import timex

timex.week_start(202201)                  # 2022-01-03 00:00:00+00:00
timex.year_weeks_by_week(202201, 202204)  # [202201, 202202, 202203, 202204]
```

Building HTML:

```python
from gox import htmlx

htmlx.tag("div", "hello", {"id": "name"}, {"font-size": "1"})
# '<div id="name" style="font-size:1;">hello</div>'
```

Editing the query values of a URL:

```python
from gox.urlx import URL

url = URL("https://www.example.com/a/1.txt?a=1&b=2#abc")
url.set_value("a", "11")
str(url)   # "https://www.example.com/a/1.txt?a=11&b=2#abc"
```

IP addresses:

```python
from gox import ipx

ipx.is_private("127.0.0.1")   # True
ipx.number("0.0.1.0")         # 256
ipx.to_string(256)            # "0.0.1.0"
ipx.remote_addr({"X-Real-IP": "127.0.0.1:8080"}, "", False)  # "127.0.0.1"
```

`is_private`, `is_public` and `number` raise `ValueError` for a string that is
not an IP address.

Zip archives:

```python
from gox import zipx

zipx.compress("out.zip", ["a.txt", "docs/b.txt"], compact_directory=True)
zipx.uncompress("out.zip", "extracted")
```

## What it does not do

- There is no command-line tool. This is a library only.
- `gox.htmlx` builds elements but does not strip or clean HTML.
- There is no module of general string helpers. Text handling is limited to
  what `bytex`, `extractx`, `inx` and `isx` provide.

## Requirements

Python 3.10 or newer. Only the standard library is used.