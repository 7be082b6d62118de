# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""File manipulation utilities."""

from contextlib import contextmanager

@contextmanager
def opened(filename, mode="rb"):
    """Open filename, or do nothing if filename is already an open file object.

    Files opened here are closed when the context exits, whether or not
    the body raised; file objects passed in are left open for the caller.
    """
    if isinstance(filename, (str, bytes)) or hasattr(filename, "__fspath__"):
        file = open(filename, mode)
        try:
            yield file
        finally:
            if not file.closed:
                file.close()
    else:
        yield filename
