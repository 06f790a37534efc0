"""Core output dispatchers."""

import json


def pretty_print(data):
    print(json.dumps(data, indent=2, ensure_ascii=False))


def output(data, formatter=None, fmt="table"):
    """Output data in requested format."""
    if fmt == "table" and formatter:
        print(formatter(data))
    else:
        pretty_print(data)
