"""
Raspberry Pi hardware drivers. Importing a module from this package requires
the board libraries from the ``pi`` extra.
"""
