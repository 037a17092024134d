"""A Pure-Python library for writing LDIF change records"""
__version__ = "1.0.0"

__title__ = "ldifwriter"
__description__ = "A Pure-Python library for writing LDIF change records"

__license__ = "MIT"
__author__ = "The ldifwriter developers"
__copyright__ = "Copyright (c) 2024 {}".format(__author__)
