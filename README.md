# jsol

`jsol` reads programs written as JSON documents, checks them against the
jsol module format and links them into a small intermediate representation.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The module format

A program file is a JSON object with a `type` field, either `entrypoint` or
`module`, together with optional lists of `operations` and `constants`:

```json
{
  "type": "entrypoint",
  "operations": [{"type": "nop"}],
  "constants": [{"name": "DEBUG", "value": true}]
}
```

- An operation is an object with a `type` field. The only operation so far is
  `nop`.
- A constant is an object with a string `name` and a `value`. A value can be
  `null`, a boolean, a number, a string, or an array of these; JSON objects
  are rejected. Integers must fit in 64 bits, signed or unsigned. A float
  that is not finite is read as `null`.
- An `entrypoint` always has an operation list (empty when the field is
  missing). A `module` without an `operations` field has no operation list at
  all (`operations` is `None`).

When written back, an entrypoint always carries both `operations` and
`constants`; a module leaves out a missing operation list and an empty
constant list.

Malformed input raises `jsol.parse.ParseError`.

## Command line

```
jsol program.json
```

The command:

1. removes and recreates `./out` in the current directory, and logs to
   `./out/output.log` (plain text) and `./out/output.json` (one JSON object
   per line); messages at info level and above also go to stderr;
2. loads the file;
3. resets the program's constants to a single `DEBUG = true`, and if that
   changes the program, writes the file back as indented JSON;
4. links the program and prints the resulting link context to stderr.

It exits with status 0 on success and 1 when the file cannot be read or
written or is not a valid module. The `-o` / `--optimize` flag is accepted
and has no effect yet.

## Library use

```python
from jsol.parse import RawJsolModule
from jsol.ir import LinkContext

module = RawJsolModule.loads('{"type": "module", "operations": [{"type": "nop"}]}')
linker = LinkContext()
linker.resolve_module(module)
print(linker.modules)   # [Module(operations=[<Operation.NOP: 'nop'>])]
print(module.dumps())
```

`RawJsolModule.from_json` / `to_json` work on already decoded data, and
`loads` / `dumps` on JSON text. `jsol.cli.modify_script(module)` applies the
constant reset described above to a module in place.

Values keep their JSON kind:

```python
from jsol.value import value_from_json
from jsol.valuetype import Type

assert value_from_json(1.5).type() is Type.FLOAT
assert value_from_json(3).type() is Type.INT
assert value_from_json([1, "a"]).to_json() == [1, "a"]
```

`jsol.number.Number` holds an integer (unsigned or negative 64-bit) or a
finite float, with `is_i64`, `is_u64`, `is_f64` and `as_*` accessors, and
raises `NumberError` for values it cannot hold.

`Type.from_json` accepts the names `any`, `null`, `bool`/`boolean`,
`int`/`number`, `float`/`double`, `string` and `array`, an index from 0 to 6,
or a one-key object such as `{"int": null}`; anything else raises
`jsol.valuetype.TypeError_`. `Type.to_json` gives the lower-case name.

## What it does not do

`jsol` does not run programs. It reads, validates, rewrites and links module
files, but there is no interpreter that executes the linked operations, and
the only operation it knows is `nop`. Linking handles one file at a time;
modules do not import one another.