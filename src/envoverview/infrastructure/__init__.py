"""Infrastructure layer — reading annotation sources from disk.

The domain core never performs I/O; everything file-shaped lives here.
"""
