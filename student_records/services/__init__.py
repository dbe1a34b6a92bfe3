"""
Use cases that span both backends (sync) and shared presentation helpers.

The shell calls these instead of reaching into another backend's store.
"""
