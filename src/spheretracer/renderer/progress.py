# renderer/progress.py
import sys
from typing import TextIO


class ScanlineProgress:
    """
    Progress sink for Renderer.render(). Called with the number of
    scanlines still to render; prints "Done." once that reaches zero.

    Writes to stderr by default so it never mixes with an image written
    to stdout.
    """
    def __init__(self, stream: TextIO = None):
        self.stream = stream if stream is not None else sys.stderr

    def __call__(self, remaining: int):
        if remaining > 0:
            print(f"\rScanlines remaining: {remaining} ", end="", file=self.stream, flush=True)
        else:
            print("\nDone.", file=self.stream, flush=True)
