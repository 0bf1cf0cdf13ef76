#!/usr/bin/env python3
"""
Quick Start Guide for the Text Pre-Reader.

This example reads a small settings file while hiding blank lines, comments
and overlong lines, then shows the same content as a character stream.
"""

import logging
import sys
import tempfile
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from text_prereader import Configuration, TextPreReader, open_reader

SAMPLE = """\
# service settings
host = example.org

    port = 8080
; legacy = yes
motd = this line is far too long to be useful in a settings file
"""


def line_example(path: Path) -> None:
    """Read filtered lines from a file."""
    print("Step 1: Filtered lines")
    print("-" * 30)

    config = Configuration.skip_comments("#", ";")
    config.max_line_length = 20

    with TextPreReader(path, config) as reader:
        for line in reader:
            print(f"  {line!r}")


def character_example(path: Path) -> None:
    """Peek and read the filtered character stream."""
    print("\nStep 2: Character stream")
    print("-" * 30)

    with open_reader(path, trim_lines=True, skip_empty_or_null=True,
                     skip_starting_with=["#", ";", "motd"]) as reader:
        print(f"  first character: {reader.peek_char()!r}")
        print(f"  stream: {reader.read_to_end()!r}")


def main():
    """Main function."""
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "settings.conf"
        path.write_text(SAMPLE, encoding="utf-8")

        line_example(path)
        character_example(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
