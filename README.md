# cloudisk

This package provides a command-line TCP client for a simple file-sharing service. It also includes the building blocks for a server:

- a framed command protocol
- socket helpers
- a blocking task queue and a worker thread pool
- a `key=value` configuration reader
- a small fixed-size hash table and a linked list

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The client

```
cloudisk-client [--host HOST] [--port PORT]
```

By default the client connects to `127.0.0.1:8080`. While it runs, it watches both standard input and the connection:

- Each line you type is turned into a command frame and sent to the server.
- Anything the server sends back is printed as `recv: ...`.
- End of input prints `byebye.` and exits.
- If the server closes the connection, the client prints `server closed.` and exits.

The client recognises these command words: `pwd`, `ls`, `cd`, `mkdir`, `rmdir`, `puts` and `gets`. The first argument after the word, if there is one, becomes the frame's content. Any other word is sent with type `CmdType.NOTCMD`.

For `puts <file>`, the client first sends the command frame. It then sends the file's size as an 8-byte little-endian integer, followed by the file's bytes in chunks of up to 1000 bytes. If the file cannot be opened, the error is printed and the client keeps running.

## Wire format

A frame (`cloudisk.protocol.Train`) has three parts:

- a little-endian 32-bit content length;
- a little-endian 32-bit command type (`CmdType`);
- up to 1000 bytes of content.

```python
from cloudisk.protocol import CmdType, Train, parse_command

train = parse_command("mkdir photos")
assert train.type is CmdType.MKDIR
assert Train.unpack(train.pack()) == train
```

`Train.unpack` raises `ValueError` in these cases:

- the header is truncated;
- the length is out of range;
- the content is truncated.

`CmdType` also defines the login codes `TASK_LOGIN_SECTION1` through `TASK_LOGIN_SECTION2_RESP_ERROR` (100–105).

## Library modules

### `cloudisk.protocol`

- `CmdType`
- `Train` (`pack()`, `unpack()`, `length`)
- `get_command_type(word)`
- `parse_command(line)`

### `cloudisk.net`

- `tcp_init(ip, port)` returns a socket bound to the address with `SO_REUSEADDR` set. It does not call `listen()`.
- `tcp_connect(ip, port)` returns a connected socket.
- `send_all(sock, data)` sends every byte and returns the count.
- `recv_exact(sock, length)` reads `length` bytes, or fewer if the peer closes first.

### `cloudisk.taskqueue`

- `Task` holds `peerfd`, `epfd`, `type` and `data`.
- `TaskQueue` is a thread-safe FIFO queue:
  - `put()` adds a task.
  - `get()` blocks until a task is available.
  - `is_empty()` and `len()` report on the queue.
  - `broadcast_all()` stops the queue. After that, every waiting or later `get()` returns `None`.

### `cloudisk.threadpool`

`ThreadPool(num, handler, poll_interval=0.01)` runs `handler(task)` in one of `num` worker threads.

- `start()` launches the workers. Calling it a second time raises `RuntimeError`.
- `submit(task)` queues a task.
- `stop()` waits until the queue is empty, then stops and joins the workers.
- A pool can also be used as a context manager.
- Exceptions raised by the handler are logged, and the worker carries on.

### `cloudisk.config`

`read_config(filename)` loads `key=value` lines into a `HashTable`:

- lines without a value are skipped;
- anything after a second `=` is dropped;
- a later key replaces an earlier one.

The constants `IP`, `PORT` and `THREAD_NUM` name the usual keys.

### `cloudisk.hashtable`

`HashTable` uses open addressing over 100 slots, and `hash_key(key)` is its hash function. It provides:

- `insert(key, value)`
- `find(key)`, which returns `None` when the key is absent
- `erase(key)`
- `items()`
- `dump()`
- `clear()`
- `len()`

Keys longer than 49 bytes and `None` values raise `ValueError`. A full table raises `OverflowError`.

### `cloudisk.linkedlist`

`LinkedList` is a singly linked list with:

- `append(value)`
- `remove(target)`, which removes the first equal value and returns whether one was found
- `clear()`
- `dump()`
- iteration and `len()`

### `cloudisk.strutil`

`split_string(text, delimiter, max_tokens)` splits on any character of `delimiter` and skips empty tokens. It keeps at most `max_tokens - 1` tokens.

## What this package does not do

- There is no server command. Nothing here accepts connections or executes `pwd`, `ls`, `cd`, `mkdir`, `rmdir`, `puts` or `gets`. The queue, pool, config and socket helpers are pieces for building one.
- The client has no login step. It never sends the login command types.
- `gets` only sends the command frame. The client does not receive or save a downloaded file.