"""
Provide a custom JSON encoder that can serialize additional objects,
in particular SIN objects
"""

from collections.abc import Iterator
import json


def keygetter_set(v):
    return str(v).lower()


class CustomJSONEncoder(json.JSONEncoder):
    """
    A custom JSON encoder that can serialize additional objects:
      - any object having a to_json() method that produces a string or
        a serializable object
      - sets (as sorted lists)
      - iterators (as lists)

    Non-serializable objects are converted to plain strings.
    """

    def default(self, obj):
        if hasattr(obj, "to_json"):
            return obj.to_json()
        elif isinstance(obj, set):
            return sorted(obj, key=keygetter_set)
        elif isinstance(obj, Iterator):
            return list(obj)

        try:
            return super().default(obj)
        except TypeError:
            return str(obj)
