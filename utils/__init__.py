"""
utils package
-------------

Contains utility modules used throughout the lab scheduling application.

Includes the time codec, configuration constants, batch loading, validation and logging setup.
"""
