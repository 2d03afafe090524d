# discoverydoc

`discoverydoc` reads API Discovery documents, written as JSON or YAML, into
typed Python dataclasses. While reading, it checks every part of the document:
keys that the format does not allow, required keys that are missing, and values
of the wrong kind are all reported. Every object can be exported again as plain
Python values with `to_raw_info()`.

## Installation

```
pip install discoverydoc
```

With the test dependencies:

```
pip install "discoverydoc[test]"
```

## Parsing a document

```python
from discoverydoc.document import parse_document, version

with open("discovery-v1.json", "rb") as handle:
    doc = parse_document(handle.read())

print(doc.name, doc.version, doc.title)
print(version())  # "discovery_v1"
```

`parse_document` accepts `bytes` (decoded as UTF-8), `str` or `None`.

## Errors

All problems are raised as exceptions from `discoverydoc.reader`:

- Input that is `None`, empty or only whitespace raises a `CompilerError`
  with the message `document has no content`.
- Text that is not valid YAML or JSON raises a `CompilerError` that carries
  the parser's message.
- A document that breaks the format raises a `CompilerError` when exactly one
  problem is found. When there are several problems, it raises an `ErrorGroup`
  instead, and its `errors` attribute holds every `CompilerError`, with nested
  groups flattened.

Each `CompilerError` message begins with the dotted path to the place in the
document where the problem is, for example
`$root.schemas.Book has invalid property: bogus`.

```python
from discoverydoc.document import parse_document
from discoverydoc.reader import CompilerError, ErrorGroup

try:
    parse_document(b"kind: discovery#restDescription\nbogus: 1\n")
except ErrorGroup as problems:
    for problem in problems.errors:
        print(problem)
except CompilerError as problem:
    print(problem)
```

## The model

- `discoverydoc.api.Document` is the whole API description.
- `discoverydoc.schema.Schema` is a schema. `parse_schemas` reads a mapping of schemas.
- `discoverydoc.parameter.Parameter` is a parameter. `parse_parameters` reads a mapping of parameters.
- `discoverydoc.method` holds `Method`, `Request`, `Response` and `Resource`, along with `parse_methods` and `parse_resources`.
- `discoverydoc.auth` holds `Icons`, `Auth`, `Oauth2`, `Scope`, `MediaUpload`, `Protocols` and `UploadProtocol`, along with `parse_scopes`.
- `discoverydoc.reader.Annotations` holds annotations. `discoverydoc.reader.Any` keeps an arbitrary value as YAML text.

Each class has `from_node(node, context)`. The `node` is a value as a YAML or
JSON loader produces it, such as a dict, list or scalar, and `context` is a
`discoverydoc.reader.Context` or `None`. Named collections are plain dicts that
keep the order of the source document. These collections are schemas,
parameters, methods, resources and scopes.

`to_raw_info()` leaves out fields that are empty or false. There are two
exceptions. A document always contains `kind` and `discoveryVersion`, and icons
always contain `x16` and `x32`.

```python
import json

print(json.dumps(doc.to_raw_info(), indent=2))
```

## What it does not do

This is a library only. It provides no command-line tool. It does not download
documents and does not resolve `$ref` references. It does not convert documents
into other API description formats.

## Running the tests

```
pytest
```