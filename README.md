# tilegfx

`tilegfx` is a small, pure-Python collection of building blocks for tile-based
games that run headlessly. It offers a depth-ordered render queue, a simulated
input event hub, and a set of character, string, memory and line-reading
helpers. It has no dependencies outside the standard library.

## Installation

```
pip install tilegfx
```

To run the test suite:

```
pip install "tilegfx[test]"
pytest
```

## Render queue

`tilegfx.renderqueue` orders draw calls by depth.

- `DrawCall(image, instance_id)` is one instance of an image waiting to be
  drawn. `depth()` returns `image.instances[instance_id].z`, so any image
  object whose `instances` items have a `z` attribute will do.
- `sort_render_queue(queue)` returns a new list ordered by ascending depth.
  Calls of equal depth come out in the reverse of their order in `queue`.
- `remove_image_calls(queue, image)` removes every call of `image` from the
  list in place and returns the removed calls in their original order.

```python
from types import SimpleNamespace
from tilegfx.renderqueue import DrawCall, sort_render_queue

img = SimpleNamespace(instances=[SimpleNamespace(z=3), SimpleNamespace(z=1)])
queue = [DrawCall(img, 0), DrawCall(img, 1)]
[call.instance_id for call in sort_render_queue(queue)]   # [1, 0]
```

## Input events

`tilegfx.events.EventHub` tracks key, button and cursor state and forwards
events to callbacks. One hook of each kind is kept; registering another
replaces it, and a non-callable hook raises `TypeError`.

- `key_hook(func, param)`: `func(KeyData, param)` on every key event.
  `KeyData` has `key`, `action`, `os_key` and `modifier`.
- `mouse_hook(func, param)`: `func(button, action, modifiers, param)`.
- `scroll_hook(func, param)`: `func(xoffset, yoffset, param)`.
- `cursor_hook(func, param)`: `func(x, y, param)`.

Input is fed in with `press_key(key, action, scancode, modifiers)`,
`click(button, action, modifiers)`, `scroll(xoffset, yoffset)` and
`move_cursor(x, y)`. `action` is an `Action` (`RELEASE`, `PRESS`, `REPEAT`) or
its integer value. `RELEASE` clears the held state; the others set it.
`is_key_down`, `is_mouse_down` and `get_mouse_pos` query the state.
`set_mouse_pos` places the cursor without calling the hook, and
`get_mouse_pos` truncates to whole pixels.

```python
from tilegfx.events import Action, EventHub

hub = EventHub()
seen = []
hub.key_hook(lambda data, param: seen.append((data.key, data.action, param)), "p")
hub.press_key(65, Action.PRESS)
hub.is_key_down(65)          # True
seen                         # [(65, Action.PRESS, 'p')]
```

## Helpers

### `tilegfx.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii` and `is_print` classify ASCII
characters given as a one-character string or an integer code. `to_upper` and
`to_lower` map ASCII letters and return the same kind they were given.
`atoi(text)` parses a leading decimal integer after optional whitespace and
one sign, stops at the first non-digit, returns 0 when there are no digits and
wraps to the 32-bit signed range. `itoa(n)` returns the decimal text.

```python
from tilegfx.chars import atoi, to_upper
atoi("  -42abc")   # -42
to_upper("a")      # 'A'
```

### `tilegfx.strings`

`strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`,
`substr`, `strjoin`, `strtrim`, `split`, `strmapi` and `striteri`. Searches
return an index or `None`. Searching for `"\0"` returns the length of the
string. `strlcpy(src, size)` and `strlcat(dest, src, size)` return the
resulting text together with the length they tried to create. `split` drops
empty pieces. `strjoin` treats `None` as empty.

```python
from tilegfx.strings import split, strlcpy
split("a,,b", ",")     # ['a', 'b']
strlcpy("hello", 3)    # ('he', 5)
```

### `tilegfx.memory`

`memset`, `bzero`, `calloc`, `memcpy`, `memmove`, `memchr` and `memcmp` work
on `bytearray` or writable `memoryview` buffers. A length or offset that
reaches past the end of a buffer raises `IndexError`. `memmove(buf,
dst_offset, src_offset, n)` copies within one buffer, and the regions may
overlap.

```python
from tilegfx.memory import memmove, memcmp
buf = bytearray(b"hello")
memmove(buf, 1, 0, 3)          # bytearray(b'hhelo')
memcmp(b"abc", b"abd", 3)      # -1
```

### `tilegfx.nextline`

`LineReader(fd, buffer_size=5)` reads a file descriptor, or any object with
`fileno()`, in chunks of `buffer_size` bytes. `read_line()` returns the next
line with its newline kept, the final line even without one, and `None` at
the end. Iterating yields every line. A descriptor that cannot be read raises
`OSError`.

## What this package does not do

`tilegfx` opens no window and draws nothing. It has no image or pixel
buffers, no PNG or XPM42 loading, no game loop and no formatted console
output. The render queue only orders draw calls. The event hub only records
input that your code feeds into it.