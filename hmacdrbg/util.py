def unhex(value: str, name: str = "input") -> bytes:
  """Decode hex input, tolerating whitespace, colons and a 0x prefix."""
  s = "".join(value.split()).replace(":", "")
  if s[:2].lower() == "0x":
    s = s[2:]
  try:
    return bytes.fromhex(s)
  except ValueError:
    raise ValueError(f"Invalid hex for {name}: {value!r}") from None


def parse_count(value: str, name: str, default: int) -> int:
  """Parse a non-negative decimal integer option, returning default if not given."""
  if not value:
    return default
  if not value.isdecimal():
    raise ValueError(f"Invalid number for {name}: {value!r}")
  return int(value)
