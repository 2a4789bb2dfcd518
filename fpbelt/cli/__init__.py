# CLI package for fpbelt
"""
Command-line front end for the fpbelt utilities.

Commands:
    fpbelt join: Join items with a delimiter
    fpbelt same: Compare two lists ignoring order
    fpbelt insert: Splice a batch into a list
    fpbelt parse-date: Read a date
    fpbelt parse-url: Read an absolute URL
"""
