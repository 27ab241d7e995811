# anttools

Small building blocks for Python applications: thread-safe containers, a
delayed task queue, text and data codecs, crypto helpers, translations, zip
archives, SQL column value types and a Redis wrapper.

## Installation

```
pip install anttools
```

With the test dependencies:

```
pip install "anttools[test]"
```

## Modules

| Module | Contents |
| --- | --- |
| `anttools.array` | `Array`, a lock-protected list, and `search(items, key)` returning the first matching index or -1 |
| `anttools.maps` | `SafeMap`, a lock-protected dictionary with `set`, `get`, `get_or_set`, `count`, `delete`, `lock_func` |
| `anttools.queue` | `DelayQueue`, a one-second timing wheel of 100 slots that runs callbacks at a given time |
| `anttools.htmltext` | `strip_tags`, `entities`, `entities_decode`, `special_chars`, `special_chars_decode` |
| `anttools.urlcodec` | `encode`, `decode`, `raw_encode`, `raw_decode`, `build_query`, `parse_url` and the `URLComponent` bit flags |
| `anttools.aes` | `encrypt_cbc` / `decrypt_cbc` (PKCS#5 padding, the first key block as IV) and `encrypt_cfb` / `decrypt_cfb` (random IV prepended) |
| `anttools.rsa` | `Rsa`, PKCS#1 v1.5 encryption with a PEM public key and a PKCS#1 PEM private key, base64 ciphertext |
| `anttools.uuids` | `new`, `create`, `new_dce_group`, `new_dce_person`, `new_md5`, `new_random`, `new_sha1` |
| `anttools.hashing` | `md5`, `sha1`, `sha256` as lower-case hex, and `crc32` as an unsigned integer |
| `anttools.b64` | standard base64 `encode` and `decode` |
| `anttools.binary` | little-endian `encode(value, kind)` and `decode(data, kind)`, `kind` being e.g. `"uint64"` or a struct code |
| `anttools.charset` | `decode(data, charset)` for legacy character sets such as GBK, Big5, KOI8-R or HZ-GB-2312 |
| `anttools.mail` | `Email`, building a MIME message with attachments and sending it over SMTP |
| `anttools.ini` | `decode`, `encode`, `to_json` for INI text |
| `anttools.tomlcodec` | `decode`, `encode`, `to_json` for TOML |
| `anttools.xmlcodec` | `decode`, `encode`, `to_json` for flat XML documents mapped to string dictionaries |
| `anttools.yamlcodec` | `decode`, `encode`, `to_json` for YAML mappings |
| `anttools.jsonpath` | `decode`, `encode`, `open_file` and `Json`, a cursor walking decoded JSON along dotted paths |
| `anttools.i18n` | `I18n`, messages read from `<path>/<language>.<type>` files (TOML, YAML or JSON) |
| `anttools.archive` | `create`, `add_file_to_zip`, and `unzip`, which refuses entries that would land outside the target directory |
| `anttools.sqltypes` | `JsonValue` and `NullableTime`, values converted to and from database columns and JSON |
| `anttools.rediskit` | `RedisClient` for a single server, a cluster or a sentinel-managed master |

## Examples

Containers and codecs:

```python
from anttools import aes, hashing
from anttools.array import Array
from anttools.jsonpath import decode

items = Array()
for n in range(5):
    items.append(n)
items.insert(2, 99)
assert items.search(99) == 2
assert items.list() == [0, 1, 99, 2, 3, 4]

doc = decode(b'[{"users": {"list": [{"name": "Ming"}]}}]')
assert doc.get("0.users.list.0.name").string() == "Ming"

assert hashing.md5("test") == "098f6bcd4621d373cade4e832627b4f6"

key = b"ABCDEFGHIJKLMNOP"
assert aes.decrypt_cbc(aes.encrypt_cbc(b"Hello World", key), key) == b"Hello World"
```

`Array.get` and `Array.delete` raise `IndexError` for an index out of range;
`Array.set` returns `False` instead. The conversion methods of `Json`
(`string`, `int`, `float`, `bool`, `map`, `array`, `strings`, `ints`) consume
the current value; `Json.value` reads it without doing so.

Translations:

```python
from anttools.i18n import I18n

lang = I18n("./language", "zh-CN")          # reads ./language/zh-CN.toml
print(lang.t("common.name", "value"))      # dots walk nested tables, %s is filled in
print(lang.t_option("hello", "en"))        # looks the key up in ./language/en.toml
```

A key that is not found comes back unchanged.

Delayed tasks:

```python
from datetime import datetime, timedelta
from anttools.queue import DelayQueue

queue = DelayQueue()
queue.add_task(datetime.now() + timedelta(seconds=10), "job", print, [1, 2, 3])
queue.start()  # blocks until queue.stop() is called
```

`add_task` raises `ValueError` for a time before the queue was created or for
a key already scheduled in the same slot. Each task runs in its own thread.

E-mail:

```python
from anttools.mail import Email

password = "password"
mail = Email(
    from_addr="sender@example.com",
    to=["reader@example.com"],
    title="Report",
    text="See attachment.",
    file_paths=["report.txt"],
    password=password,
    address="smtp.example.com:587",
    host="smtp.example.com",
)
message = mail.build_message()  # inspect the MIME message
mail.send()                     # STARTTLS, then PLAIN login
```

Without an address and host, `send` uses `smtp.qq.com:25`. The server part of
the address must equal `host`, and a non-local server must offer STARTTLS.

Redis:

```python
from anttools.rediskit import RedisClient

with RedisClient.connect("127.0.0.1:6379") as conn:
    conn.set("key", "value")
    assert conn.get("key") == "value"
    conn.push_list("list_test", "message")
    print(conn.get_list("list_test"))
```

## What is not included

The package has no command-line program, no HTTP server or web framework
integration, no logging or configuration loader, and no database connection
layer: `anttools.sqltypes` supplies column value types only, and the only
storage client is `RedisClient`.