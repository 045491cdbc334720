"""
Formatting helpers
"""


def fmt_colon_delimited_hex(data: bytes) -> str:
    """Render bytes as lowercase hex pairs separated by colons, e.g. "ab:cd:ef" """
    return ":".join(f"{byte:02x}" for byte in data)
