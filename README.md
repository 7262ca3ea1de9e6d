# flagvalues

Typed values for command-line flags. Each value object parses the text given for a flag, holds the result in its `value` attribute, and renders itself back to text with `str()`. List and map values gather input when a flag is given more than once.

## What it does not do

The package provides the value objects only. It has no flag set, no argument-list parser, no usage or help output and no command of its own: code that reads a command line decides which value an argument belongs to and calls its `set` method.

## Value kinds

| Module | Classes |
| --- | --- |
| `flagvalues.integers` | `Int8Value`, `Int64Value`, `UintValue`, `Uint8Value`, `Uint16Value`, `Uint32Value`, `Uint64Value` (all subclasses of `IntegerValue`) |
| `flagvalues.text_values` | `StringValue`, `StringSliceValue`, `StringArrayValue` |
| `flagvalues.int_slices` | `IntSliceValue`, `Int32SliceValue`, `Int64SliceValue`, `UintSliceValue` (all subclasses of `IntegerSliceValue`) |
| `flagvalues.maps` | `StringToIntValue`, `StringToInt64Value` |
| `flagvalues.ip` | `IPValue`, `IPMaskValue` |
| `flagvalues.ip_slices` | `IPNetValue`, `IPSliceValue`, `IPNetSliceValue` |

Every value derives from `Value` in `flagvalues.values`: `set(text)` parses and stores, `str(value)` gives the text form, and the class attribute `type_name` names the kind (`"int8"`, `"stringSlice"`, `"ipNet"` and so on).

`StringSliceValue`, `StringArrayValue`, the integer lists and `IPSliceValue` also derive from `SliceValue`, which adds:

* `append(text)` – parse one item and add it to the end;
* `replace(values)` – replace the whole list with the parsed items;
* `get_slice()` – the items rendered as a list of strings.

`IPNetSliceValue` is a list value too but has only `set` and `str()`.

Parse failures raise `FlagValueError`, a subclass of `ValueError`. Integer parse failures raise `NumberError` (from `flagvalues.numbers`), a subclass of `FlagValueError`.

## Examples

```python
from flagvalues.int_slices import IntSliceValue
from flagvalues.text_values import StringSliceValue
from flagvalues.maps import StringToIntValue
from flagvalues.integers import Uint8Value
from flagvalues.ip import IPMaskValue
from flagvalues.ip_slices import IPNetValue
from flagvalues.numbers import NumberError

numbers = IntSliceValue([0, 1])
numbers.set("1,2")          # the first set replaces the default
numbers.set("3")            # later sets extend the list
numbers.value               # [1, 2, 3]
str(numbers)                # "[1,2,3]"

words = StringSliceValue()
words.set('"one,two",three')
words.value                 # ["one,two", "three"]
str(words)                  # '["one,two",three]'

counts = StringToIntValue()
counts.set("a=1,b=2")
counts.set("b=3")
counts.value                # {"a": 1, "b": 3}

small = Uint8Value()
try:
    small.set("256")
except NumberError:
    pass
small.value                 # 255: the nearest bound is kept

mask = IPMaskValue()
mask.set("255.255.255.0")
str(mask)                   # "ffffff00"

network = IPNetValue()
network.set("1.2.3.4/8")
str(network)                # "1.0.0.0/8"
```

## How each kind reads its text

* **Fixed-size integers** (`flagvalues.integers`) accept an optional sign for signed kinds and the prefixes `0x`, `0b`, `0o` or a leading `0` for octal; underscores may separate digits. A value that does not fit its bit size raises `NumberError`. When `set` fails the stored value becomes what the parse settled on: zero for bad syntax, the nearest bound when out of range.
* **`StringValue`** stores the text unchanged.
* **`StringSliceValue`** reads each argument as one CSV record, so quoted fields may contain commas. The first `set` replaces the default; later calls append. `append` and `replace` take items as given, without CSV splitting.
* **`StringArrayValue`** keeps each argument whole, commas and all.
* **Integer lists** split each argument on commas. `IntSliceValue` and `UintSliceValue` take plain decimal items; `Int32SliceValue` and `Int64SliceValue` also accept base prefixes. A bad item raises without changing the stored list.
* **`StringToIntValue` / `StringToInt64Value`** take comma-separated `key=value` pairs with decimal values. Later calls merge into the map, later keys winning; a pair without `=` raises `FlagValueError`.
* **`IPValue`** holds one `ipaddress` address; surrounding whitespace is ignored and empty text leaves the value unchanged. IPv4-mapped IPv6 addresses become IPv4 addresses.
* **`IPMaskValue`** holds four mask bytes, set from an address such as `255.255.255.0` or eight hex digits such as `ffffff00`; it renders as hex.
* **`IPNetValue`** holds one `ipaddress` network from CIDR text; host bits are cleared.
* **`IPSliceValue` / `IPNetSliceValue`** drop all quote characters (`"`, `'`, `` ` ``), read the argument as one CSV record and ignore whitespace around each item. Items given through `IPSliceValue.append` or `replace` that are not addresses are kept as missing entries, shown as `<nil>`.

## Converting rendered text back

Each module has functions that turn a value's text form back into Python data:

* `flagvalues.integers`: `int8_conv`, `int64_conv`, `uint_conv`, `uint8_conv`, `uint16_conv`, `uint32_conv`, `uint64_conv`
* `flagvalues.text_values`: `string_conv`, `string_slice_conv`, `string_array_conv` (these two expect the surrounding brackets)
* `flagvalues.int_slices`: `int_slice_conv`, `int32_slice_conv`, `int64_slice_conv`, `uint_slice_conv`
* `flagvalues.maps`: `string_to_int_conv`, `string_to_int64_conv`
* `flagvalues.ip`: `ip_conv`, `ipv4_mask_conv`
* `flagvalues.ip_slices`: `ipnet_conv`, `ip_slice_conv`, `ipnet_slice_conv`

For example `int_slice_conv("[1,2,3]")` gives `[1, 2, 3]` and `string_to_int_conv("[]")` gives `{}`.

## Helpers

* `flagvalues.numbers.parse_int(text, bits, base)` and `parse_uint(text, bits, base)` parse integers of a given bit size (0 means 64) in a given base (0 follows the prefix). Errors are `NumberError`, whose `value` attribute holds the settled result and whose `out_of_range` property tells range errors from syntax errors.
* `flagvalues.ip.parse_ip(text)` parses an IPv4 or IPv6 address; `parse_ipv4_mask(text)` parses a mask in either form above.
* `flagvalues.ip_slices.parse_cidr(text)` parses CIDR notation into a network.
* `flagvalues.text_values.read_as_csv(text)` reads the first CSV record of a text (empty text gives `[]`; text of blank lines only raises `EOFError`), and `write_as_csv(values)` writes one record without a line ending, quoting fields where needed.

## Requirements

Python 3.10 or later. The package uses the standard library only; the test suite uses pytest, available through the `test` extra.