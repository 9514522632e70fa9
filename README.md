# libft

Small helpers for characters, numbers, strings, byte buffers and file
descriptors. They keep the exact behaviour of the classic C-library style
functions, odd edge cases included, and use Python types: `str`, `bytes`,
`bytearray` and `None` in place of a null pointer.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `libft.chars`: `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`, `is_print`,
  `to_lower`, `to_upper`. Each one takes a character code.
- `libft.convert`: `atoi(text)` and `itoa(n)`.
- `libft.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`. These
  write to an open file descriptor.
- `libft.memory`: `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove`,
  `memset`. These work on `bytearray` buffers.
- `libft.search`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy`, `strlcat`.
- `libft.transform`: `strdup`, `substr`, `strjoin`, `strtrim`, `split`,
  `strmapi`, `striteri`.

## Example

```python
from libft.convert import atoi, itoa
from libft.transform import split, strtrim

atoi("  -42abc")            # -42
itoa(-2147483648)           # "-2147483648"
split("..aaa  aa a", " ")   # ["..aaa", "aa", "a"]
strtrim("xxhixx", "x")      # "hi"
```